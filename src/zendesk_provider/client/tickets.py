"""Ticket methods for ZendeskClient."""
from typing import List

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import Ticket


class TicketMixin:
    """Mixin providing ticket CRUD methods.

    ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/
    """

    def get_tickets(self) -> List[Ticket]:
        """List every ticket, following pagination."""
        try:
            return [Ticket.model_validate(t) for t in self._list_all("/tickets.json", "tickets")]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list tickets: {str(e)}")

    def get_ticket(self, ticket_id: int) -> Ticket:
        try:
            data = self._get_json(f"/tickets/{ticket_id}.json")
            return Ticket.model_validate(data.get('ticket') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get ticket {ticket_id}: {str(e)}")

    def create_ticket(self, ticket: Ticket) -> Ticket:
        try:
            data = self._post_json("/tickets.json", {"ticket": ticket.to_payload()})
            return Ticket.model_validate(data.get('ticket') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create ticket: {str(e)}")

    def update_ticket(self, ticket_id: int, ticket: Ticket) -> Ticket:
        try:
            data = self._put_json(f"/tickets/{ticket_id}.json", {"ticket": ticket.to_payload()})
            return Ticket.model_validate(data.get('ticket') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update ticket {ticket_id}: {str(e)}")

    def delete_ticket(self, ticket_id: int) -> None:
        try:
            self._delete(f"/tickets/{ticket_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete ticket {ticket_id}: {str(e)}")
