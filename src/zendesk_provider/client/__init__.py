"""ZendeskClient - composed from base and per-entity mixins."""
from zendesk_provider.client.base import ZendeskClientBase
from zendesk_provider.client.tickets import TicketMixin
from zendesk_provider.client.users import UserMixin
from zendesk_provider.client.roles import CustomRoleMixin, CustomStatusMixin
from zendesk_provider.client.queues import QueueMixin
from zendesk_provider.client.memberships import MembershipMixin
from zendesk_provider.client.views import ViewMixin
from zendesk_provider.client.macros import MacroMixin
from zendesk_provider.client.account import (
    LocaleMixin,
    OAuthClientMixin,
    SatisfactionRatingMixin,
    TagMixin,
)


class ZendeskClient(
    ZendeskClientBase,
    TicketMixin,
    UserMixin,
    CustomRoleMixin,
    CustomStatusMixin,
    QueueMixin,
    MembershipMixin,
    ViewMixin,
    MacroMixin,
    LocaleMixin,
    TagMixin,
    SatisfactionRatingMixin,
    OAuthClientMixin,
):
    """
    Zendesk API client used by every resource and data source.

    Direct REST calls go through the base helpers; macros and webhooks go
    through the zenpy client held in `self.client`.
    """
    pass


__all__ = ['ZendeskClient']
