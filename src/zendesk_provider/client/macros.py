"""Macro and webhook methods for ZendeskClient, backed by zenpy."""
from typing import Any, Dict

from zenpy.lib.api_objects import Macro as ZenpyMacro
from zenpy.lib.exception import RecordNotFoundException

from zendesk_provider.exceptions import (
    ZendeskError,
    ZendeskAPIError,
    ZendeskNotFoundError,
)
from zendesk_provider.models import Macro, Webhook


def _plain(value: Any) -> Any:
    """Turn a zenpy object (or a plain value) into JSON-like data."""
    if value is None:
        return None
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def _macro_from_zenpy(obj: Any) -> Macro:
    return Macro(
        id=getattr(obj, 'id', None),
        url=getattr(obj, 'url', None),
        title=getattr(obj, 'title', None),
        description=getattr(obj, 'description', None),
        position=getattr(obj, 'position', None),
        active=getattr(obj, 'active', None),
        restriction=_plain(getattr(obj, 'restriction', None)),
        actions=_plain(getattr(obj, 'actions', None)) or [],
        created_at=_text(getattr(obj, 'created_at', None)),
        updated_at=_text(getattr(obj, 'updated_at', None)),
    )


def _webhook_from_zenpy(obj: Any) -> Webhook:
    return Webhook(
        id=_text(getattr(obj, 'id', None)),
        name=getattr(obj, 'name', None),
        description=getattr(obj, 'description', None),
        endpoint=getattr(obj, 'endpoint', None),
        http_method=getattr(obj, 'http_method', None),
        request_format=getattr(obj, 'request_format', None),
        status=getattr(obj, 'status', None),
        subscriptions=list(getattr(obj, 'subscriptions', None) or []),
        authentication=_plain(getattr(obj, 'authentication', None)),
        created_at=_text(getattr(obj, 'created_at', None)),
        created_by=_text(getattr(obj, 'created_by', None)),
        updated_at=_text(getattr(obj, 'updated_at', None)),
        updated_by=_text(getattr(obj, 'updated_by', None)),
    )


def _zenpy_macro(macro: Macro, macro_id: int | None = None) -> ZenpyMacro:
    fields: Dict[str, Any] = macro.to_payload()
    if 'restriction' not in fields:
        # an explicit null clears a previous restriction
        fields['restriction'] = None
    if macro_id is not None:
        fields['id'] = macro_id
    return ZenpyMacro(**fields)


class MacroMixin:
    """Mixin providing macro CRUD methods and the webhook lookup.

    ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/macros/
    ref: https://developer.zendesk.com/api-reference/webhooks/webhooks-api/webhooks/
    """

    def get_macro(self, macro_id: int) -> Macro:
        try:
            return _macro_from_zenpy(self.client.macros(id=macro_id))
        except RecordNotFoundException as e:
            raise ZendeskNotFoundError(f"Macro {macro_id} not found: {str(e)}", status_code=404)
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get macro {macro_id}: {str(e)}")

    def create_macro(self, macro: Macro) -> Macro:
        try:
            return _macro_from_zenpy(self.client.macros.create(_zenpy_macro(macro)))
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create macro: {str(e)}")

    def update_macro(self, macro_id: int, macro: Macro) -> Macro:
        try:
            return _macro_from_zenpy(self.client.macros.update(_zenpy_macro(macro, macro_id)))
        except RecordNotFoundException as e:
            raise ZendeskNotFoundError(f"Macro {macro_id} not found: {str(e)}", status_code=404)
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update macro {macro_id}: {str(e)}")

    def delete_macro(self, macro_id: int) -> None:
        try:
            self.client.macros.delete(ZenpyMacro(id=macro_id))
        except RecordNotFoundException as e:
            raise ZendeskNotFoundError(f"Macro {macro_id} not found: {str(e)}", status_code=404)
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete macro {macro_id}: {str(e)}")

    def get_webhook(self, webhook_id: str) -> Webhook:
        try:
            return _webhook_from_zenpy(self.client.webhooks(id=webhook_id))
        except RecordNotFoundException as e:
            raise ZendeskNotFoundError(f"Webhook {webhook_id} not found: {str(e)}", status_code=404)
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get webhook {webhook_id}: {str(e)}")
