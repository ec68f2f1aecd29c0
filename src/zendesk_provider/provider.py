"""Lifecycle dispatch for resources and data sources.

Every call starts from a fresh ResourceData and returns a plain dict:
{"id": ..., "state": {...}, "diagnostics": [...]}.
"""
import logging
from typing import Any, Dict, List, Optional

from zendesk_provider.data_sources import DATA_SOURCES
from zendesk_provider.exceptions import ZendeskValidationError
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.resources import RESOURCES
from zendesk_provider.schema import Diagnostic, Resource, prepare_config, redact_sensitive

logger = logging.getLogger("zendesk-provider")


def _result(
    resource: Resource,
    d: ResourceData,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> Dict[str, Any]:
    # sensitive attributes never leave the provider in clear text
    return {
        "id": d.id,
        "state": redact_sensitive(resource.attributes, d.state()),
        "diagnostics": [diag.model_dump() for diag in diagnostics or []],
    }


class Provider:
    """Runs resource lifecycles against a ZendeskClient."""

    def __init__(self, client):
        self.client = client

    def _resource(self, type_name: str) -> Resource:
        try:
            return RESOURCES[type_name]
        except KeyError:
            raise ZendeskValidationError(f"Unknown resource type: {type_name}")

    def _data_source(self, type_name: str) -> Resource:
        try:
            return DATA_SOURCES[type_name]
        except KeyError:
            raise ZendeskValidationError(f"Unknown data source type: {type_name}")

    def create(self, type_name: str, config: Dict[str, Any]) -> Dict[str, Any]:
        resource = self._resource(type_name)
        d = ResourceData(prepare_config(resource, config))
        logger.debug(f"Creating {type_name}")
        diagnostics = resource.create(d, self.client)
        return _result(resource, d, diagnostics)

    def read(self, type_name: str, id: str, state: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        resource = self._resource(type_name)
        d = ResourceData(state, id=str(id))
        diagnostics = resource.read(d, self.client)
        return _result(resource, d, diagnostics)

    def update(
        self,
        type_name: str,
        id: str,
        config: Dict[str, Any],
        prior_state: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Apply a new configuration to an existing resource.

        A change to a force_new attribute replaces the resource (delete, then
        create). Otherwise the prior state is overlaid with the configuration:
        configured attributes win, unconfigured computed attributes keep their
        prior value and unconfigured plain attributes are cleared. When no
        prior state is given the resource is read first.
        """
        resource = self._resource(type_name)
        config = prepare_config(resource, config)
        if prior_state is None:
            # without a prior state the remote object is the baseline
            prior = self.read(type_name, id)["state"]
        else:
            prior = dict(prior_state)

        replace = sorted(
            name for name, attr in resource.attributes.items()
            if attr.force_new and name in prior and config.get(name) != prior.get(name)
        )
        if replace:
            logger.info(f"Replacing {type_name} {id}: {', '.join(replace)} changed")
            removed = self.delete(type_name, id, prior)
            created = self.create(type_name, config)
            created["diagnostics"] = removed["diagnostics"] + created["diagnostics"]
            return created

        values = dict(prior)
        for name, attr in resource.attributes.items():
            if name in config:
                values[name] = config[name]
            elif not attr.computed:
                values[name] = None

        d = ResourceData(values, id=str(id))
        diagnostics = resource.update(d, self.client)
        return _result(resource, d, diagnostics)

    def delete(self, type_name: str, id: str, state: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        resource = self._resource(type_name)
        d = ResourceData(state, id=str(id))
        diagnostics = resource.delete(d, self.client)
        logger.debug(f"Deleted {type_name} {id}")
        return {"id": "", "state": {}, "diagnostics": [diag.model_dump() for diag in diagnostics or []]}

    def import_resource(self, type_name: str, id: str) -> Dict[str, Any]:
        """Passthrough import: take the id as given and read the resource."""
        resource = self._resource(type_name)
        if not resource.importable:
            raise ZendeskValidationError(f"{type_name} does not support import")
        return self.read(type_name, id)

    def read_data_source(self, type_name: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        data_source = self._data_source(type_name)
        d = ResourceData(prepare_config(data_source, config))
        diagnostics = data_source.read(d, self.client)
        return _result(data_source, d, diagnostics)

    def schema(self) -> Dict[str, Any]:
        return {
            "resources": {name: r.describe() for name, r in sorted(RESOURCES.items())},
            "data_sources": {name: ds.describe() for name, ds in sorted(DATA_SOURCES.items())},
        }
