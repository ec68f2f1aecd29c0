"""Custom role and custom ticket status methods for ZendeskClient."""
from typing import Any, Dict, List

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import CustomRole, CustomStatus


def _flag(value: bool | str | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return "true" if value else "false"


class CustomRoleMixin:
    """Mixin providing custom agent role CRUD methods.

    ref: https://developer.zendesk.com/api-reference/ticketing/account-configuration/custom_roles/
    """

    def get_custom_roles(self) -> List[CustomRole]:
        try:
            data = self._get_json("/custom_roles.json")
            return [CustomRole.model_validate(r) for r in data.get('custom_roles') or []]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list custom roles: {str(e)}")

    def get_custom_role(self, role_id: int) -> CustomRole:
        try:
            data = self._get_json(f"/custom_roles/{role_id}.json")
            return CustomRole.model_validate(data.get('custom_role') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get custom role {role_id}: {str(e)}")

    def create_custom_role(self, role: CustomRole) -> CustomRole:
        try:
            data = self._post_json("/custom_roles.json", {"custom_role": role.to_payload()})
            return CustomRole.model_validate(data.get('custom_role') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create custom role: {str(e)}")

    def update_custom_role(self, role_id: int, role: CustomRole) -> CustomRole:
        try:
            data = self._put_json(f"/custom_roles/{role_id}.json", {"custom_role": role.to_payload()})
            return CustomRole.model_validate(data.get('custom_role') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update custom role {role_id}: {str(e)}")

    def delete_custom_role(self, role_id: int) -> None:
        try:
            self._delete(f"/custom_roles/{role_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete custom role {role_id}: {str(e)}")


class CustomStatusMixin:
    """Mixin providing custom ticket status methods.

    Zendesk offers no delete endpoint for custom statuses; deactivate them instead.

    ref: https://developer.zendesk.com/api-reference/ticketing/tickets/ticket-statuses/
    """

    def get_custom_statuses(
        self,
        status_category: str | None = None,
        active: bool | str | None = None,
        default: bool | str | None = None,
    ) -> List[CustomStatus]:
        """List custom statuses, optionally filtered by category, active and default flags."""
        params: Dict[str, Any] = {}
        if status_category is not None:
            params['status_categories'] = status_category
        if active is not None:
            params['active'] = _flag(active)
        if default is not None:
            params['default'] = _flag(default)
        try:
            data = self._get_json("/custom_statuses.json", params)
            return [CustomStatus.model_validate(s) for s in data.get('custom_statuses') or []]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list custom statuses: {str(e)}")

    def get_custom_status(self, status_id: int) -> CustomStatus:
        try:
            data = self._get_json(f"/custom_statuses/{status_id}.json")
            return CustomStatus.model_validate(data.get('custom_status') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get custom status {status_id}: {str(e)}")

    def create_custom_status(self, status: CustomStatus) -> CustomStatus:
        try:
            data = self._post_json("/custom_statuses.json", {"custom_status": status.to_payload()})
            return CustomStatus.model_validate(data.get('custom_status') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create custom status: {str(e)}")

    def update_custom_status(self, status_id: int, status: CustomStatus) -> CustomStatus:
        try:
            data = self._put_json(
                f"/custom_statuses/{status_id}.json", {"custom_status": status.to_payload()}
            )
            return CustomStatus.model_validate(data.get('custom_status') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update custom status {status_id}: {str(e)}")
