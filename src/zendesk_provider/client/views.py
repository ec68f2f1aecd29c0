"""View methods for ZendeskClient."""
import logging

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import View, ViewPosition

logger = logging.getLogger("zendesk-provider")


class ViewMixin:
    """Mixin providing view CRUD methods.

    Views are read as conditions/execution and written as all/any/output,
    see View.to_payload.

    ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/
    """

    def create_view(self, view: View) -> View:
        try:
            data = self._post_json("/views.json", {"view": view.to_payload()})
            return View.model_validate(data.get('view') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create view: {str(e)}")

    def get_view(self, view_id: int) -> View:
        try:
            data = self._get_json(f"/views/{view_id}.json")
            return View.model_validate(data.get('view') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get view {view_id}: {str(e)}")

    def update_view(self, view_id: int, view: View) -> View:
        """Update a view in two steps: its position first, then its fields.

        The position is only honoured by the bulk update endpoint, so it is sent
        there before the regular PUT. A failed position update aborts the update.
        """
        try:
            if view.position is not None:
                self.update_view_position(view_id, view.position)
            data = self._put_json(f"/views/{view_id}.json", {"view": view.to_payload()})
            return View.model_validate(data.get('view') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update view {view_id}: {str(e)}")

    def update_view_position(self, view_id: int, position: int) -> None:
        try:
            entry = ViewPosition(id=view_id, position=position)
            self._put_json("/views/update_many", {"views": [entry.model_dump(mode="json")]})
            logger.info(f"Updated position to {position} for view {view_id}")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update position of view {view_id}: {str(e)}")

    def delete_view(self, view_id: int) -> None:
        try:
            self._delete(f"/views/{view_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete view {view_id}: {str(e)}")
