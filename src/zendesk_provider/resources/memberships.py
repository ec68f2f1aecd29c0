"""zendesk_group_membership and zendesk_organization_membership resources.

Memberships are immutable. Changing user_id or the group/organization
replaces the membership, and update only refreshes state.
"""
from typing import Any, Dict

from zendesk_provider.models import GroupMembership, OrganizationMembership
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields
from zendesk_provider.schema import Attribute, Resource, bool_attr, computed_string, int_attr


def _membership_schema(target: str, target_label: str) -> Dict[str, Attribute]:
    return {
        "url": computed_string(f"The API url of this {target_label} membership."),
        "user_id": int_attr("The ID of the user.", required=True, force_new=True),
        target: int_attr(f"The ID of the {target_label}.", required=True, force_new=True),
        "default": bool_attr(
            f"Whether this is the default {target_label} membership for the user.",
            optional=True,
            default=False,
        ),
        "created_at": computed_string(f"The time the {target_label} membership was created."),
        "updated_at": computed_string(f"The time the {target_label} membership was last updated."),
    }


def _membership_fields(membership: Any, target: str) -> Dict[str, Any]:
    return {
        "url": membership.url,
        "user_id": membership.user_id,
        target: getattr(membership, target),
        "default": membership.default,
        "created_at": membership.created_at,
        "updated_at": membership.updated_at,
    }


def _unmarshal_membership(d: ResourceData, membership: Any, target: str) -> Any:
    if d.id:
        membership.id = atoi64(d.id)
    for key in ("user_id", target):
        value, ok = d.get_ok(key)
        if ok:
            setattr(membership, key, int(value))
    default = d.get("default")
    if default is not None:
        membership.default = bool(default)
    return membership


# group memberships
# ref: https://developer.zendesk.com/api-reference/ticketing/groups/group_memberships/

def marshal_group_membership(membership: GroupMembership, d: ResourceData) -> None:
    set_schema_fields(d, _membership_fields(membership, "group_id"))


def unmarshal_group_membership(d: ResourceData) -> GroupMembership:
    return _unmarshal_membership(d, GroupMembership(), "group_id")


def create_group_membership(d: ResourceData, client) -> None:
    membership = client.create_group_membership(unmarshal_group_membership(d))
    d.set_id(str(membership.id))
    marshal_group_membership(membership, d)


def read_group_membership(d: ResourceData, client) -> None:
    marshal_group_membership(client.get_group_membership(atoi64(d.id)), d)


def delete_group_membership(d: ResourceData, client) -> None:
    client.delete_group_membership(atoi64(d.id))


GROUP_MEMBERSHIP = Resource(
    name="zendesk_group_membership",
    description="Provides a group membership resource.",
    schema=_membership_schema("group_id", "group"),
    create=create_group_membership,
    read=read_group_membership,
    update=read_group_membership,
    delete=delete_group_membership,
)


# organization memberships
# ref: https://developer.zendesk.com/api-reference/ticketing/organizations/organization_memberships/

def marshal_organization_membership(membership: OrganizationMembership, d: ResourceData) -> None:
    set_schema_fields(d, _membership_fields(membership, "organization_id"))


def unmarshal_organization_membership(d: ResourceData) -> OrganizationMembership:
    return _unmarshal_membership(d, OrganizationMembership(), "organization_id")


def create_organization_membership(d: ResourceData, client) -> None:
    membership = client.create_organization_membership(unmarshal_organization_membership(d))
    d.set_id(str(membership.id))
    marshal_organization_membership(membership, d)


def read_organization_membership(d: ResourceData, client) -> None:
    marshal_organization_membership(client.get_organization_membership(atoi64(d.id)), d)


def delete_organization_membership(d: ResourceData, client) -> None:
    client.delete_organization_membership(atoi64(d.id))


ORGANIZATION_MEMBERSHIP = Resource(
    name="zendesk_organization_membership",
    description="Provides an organization membership resource.",
    schema=_membership_schema("organization_id", "organization"),
    create=create_organization_membership,
    read=read_organization_membership,
    update=read_organization_membership,
    delete=delete_organization_membership,
)
