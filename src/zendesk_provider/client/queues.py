"""Omnichannel routing queue methods for ZendeskClient."""
from typing import List

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import Queue


class QueueMixin:
    """Mixin providing routing queue CRUD methods.

    ref: https://developer.zendesk.com/api-reference/ticketing/queues/
    """

    def get_queues(self) -> List[Queue]:
        try:
            data = self._get_json("/queues.json")
            return [Queue.model_validate(q) for q in data.get('queues') or []]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list queues: {str(e)}")

    def get_queue(self, queue_id: int) -> Queue:
        try:
            data = self._get_json(f"/queues/{queue_id}.json")
            return Queue.model_validate(data.get('queue') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get queue {queue_id}: {str(e)}")

    def create_queue(self, queue: Queue) -> Queue:
        try:
            data = self._post_json("/queues.json", {"queue": queue.to_payload()})
            return Queue.model_validate(data.get('queue') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create queue: {str(e)}")

    def update_queue(self, queue_id: int, queue: Queue) -> Queue:
        try:
            data = self._put_json(f"/queues/{queue_id}.json", {"queue": queue.to_payload()})
            return Queue.model_validate(data.get('queue') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update queue {queue_id}: {str(e)}")

    def delete_queue(self, queue_id: int) -> None:
        try:
            self._delete(f"/queues/{queue_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete queue {queue_id}: {str(e)}")
