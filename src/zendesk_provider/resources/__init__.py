"""Managed resource types, keyed by type name."""
from typing import Dict

from zendesk_provider.resources import (
    custom_roles,
    custom_statuses,
    macros,
    queues,
    tickets,
    users,
    views,
)
from zendesk_provider.resources.memberships import GROUP_MEMBERSHIP, ORGANIZATION_MEMBERSHIP
from zendesk_provider.schema import Resource

RESOURCES: Dict[str, Resource] = {
    r.name: r
    for r in (
        tickets.RESOURCE,
        users.RESOURCE,
        views.RESOURCE,
        macros.RESOURCE,
        queues.RESOURCE,
        custom_roles.RESOURCE,
        custom_statuses.RESOURCE,
        GROUP_MEMBERSHIP,
        ORGANIZATION_MEMBERSHIP,
    )
}

__all__ = ['RESOURCES']
