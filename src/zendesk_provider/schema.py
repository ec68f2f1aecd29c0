"""Resource schema primitives: attributes, resource definitions and diagnostics."""
from typing import Any, Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from zendesk_provider.exceptions import ZendeskValidationError

AttributeType = Literal["string", "int", "bool", "list", "set", "map"]


class Diagnostic(BaseModel):
    severity: Literal["error", "warning"] = "warning"
    summary: str
    detail: str = ""


Diagnostics = List[Diagnostic]


class Attribute(BaseModel):
    """One schema attribute.

    `elem` is the element type of list/set/map attributes: either a scalar type
    name or a nested block schema (mapping of attribute name to Attribute).
    """

    type: AttributeType
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    default: Any = None
    force_new: bool = False
    sensitive: bool = False
    elem: Optional[Union[AttributeType, Dict[str, "Attribute"]]] = None

    def describe(self) -> Dict[str, Any]:
        out = self.model_dump(exclude={"elem"}, exclude_defaults=True)
        out["type"] = self.type
        if isinstance(self.elem, dict):
            out["elem"] = {name: attr.describe() for name, attr in self.elem.items()}
        elif self.elem is not None:
            out["elem"] = self.elem
        return out


Attribute.model_rebuild()

Lifecycle = Callable[[Any, Any], Optional[Diagnostics]]


class Resource(BaseModel):
    """A managed resource or, when only `read` is set, a data source."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    description: str = ""
    schema_: Dict[str, Attribute] = Field(alias="schema")
    create: Optional[Lifecycle] = None
    read: Lifecycle
    update: Optional[Lifecycle] = None
    delete: Optional[Lifecycle] = None
    importable: bool = True

    @property
    def attributes(self) -> Dict[str, Attribute]:
        return self.schema_

    def describe(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "importable": self.importable and self.create is not None,
            "attributes": {name: attr.describe() for name, attr in self.schema_.items()},
        }


def prepare_config(resource: Resource, config: Dict[str, Any] | None) -> Dict[str, Any]:
    """Check a configuration against the schema and fill in defaults.

    Unknown attributes and computed-only attributes are rejected; required
    attributes must be present.
    """
    config = dict(config or {})
    schema = resource.attributes

    unknown = sorted(k for k in config if k not in schema)
    if unknown:
        raise ZendeskValidationError(
            f"Unsupported attributes for {resource.name}: {', '.join(unknown)}",
            attributes=unknown,
        )

    read_only = sorted(
        k for k in config
        if schema[k].computed and not (schema[k].optional or schema[k].required)
    )
    if read_only:
        raise ZendeskValidationError(
            f"Computed attributes cannot be configured for {resource.name}: {', '.join(read_only)}",
            attributes=read_only,
        )

    missing = sorted(
        name for name, attr in schema.items()
        if attr.required and config.get(name) is None
    )
    if missing:
        raise ZendeskValidationError(
            f"Missing required attributes for {resource.name}: {', '.join(missing)}",
            attributes=missing,
        )

    for name, attr in schema.items():
        if attr.default is not None and config.get(name) is None:
            config[name] = attr.default

    return config


def string_attr(description: str = "", **kwargs: Any) -> Attribute:
    return Attribute(type="string", description=description, **kwargs)


def int_attr(description: str = "", **kwargs: Any) -> Attribute:
    return Attribute(type="int", description=description, **kwargs)


def bool_attr(description: str = "", **kwargs: Any) -> Attribute:
    return Attribute(type="bool", description=description, **kwargs)


def computed_string(description: str = "") -> Attribute:
    return Attribute(type="string", description=description, computed=True)


SENSITIVE_PLACEHOLDER = "(sensitive value)"


def redact_sensitive(attributes: Dict[str, Attribute], values: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of `values` with sensitive attributes masked, nested blocks included."""
    redacted = dict(values)
    for name, attr in attributes.items():
        value = redacted.get(name)
        if value is None:
            continue
        if attr.sensitive:
            redacted[name] = SENSITIVE_PLACEHOLDER
        elif isinstance(attr.elem, dict) and isinstance(value, list):
            redacted[name] = [
                redact_sensitive(attr.elem, item) if isinstance(item, dict) else item
                for item in value
            ]
    return redacted
