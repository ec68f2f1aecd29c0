"""zendesk_user resource.

ref: https://developer.zendesk.com/api-reference/ticketing/users/users/
"""
import logging

from zendesk_provider.models import User
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields, string_list
from zendesk_provider.schema import (
    Attribute,
    Resource,
    bool_attr,
    computed_string,
    int_attr,
    string_attr,
)

logger = logging.getLogger("zendesk-provider")


def marshal_user(user: User, d: ResourceData) -> None:
    fields = {
        "url": user.url,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "active": user.active,
        "verified": user.verified,
        "phone": user.phone,
        "organization_id": user.organization_id,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
    if user.tags is not None:
        fields["tags"] = user.tags
    set_schema_fields(d, fields)


def unmarshal_user(d: ResourceData) -> User:
    user = User()
    if d.id:
        user.id = atoi64(d.id)

    for key in ("name", "email", "role", "phone"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(user, key, value)

    # read with get() so that an explicit false deactivates the user
    active = d.get("active")
    if active is not None:
        user.active = bool(active)

    organization_id, ok = d.get_ok("organization_id")
    if ok:
        user.organization_id = int(organization_id)

    tags, ok = d.get_ok("tags")
    if ok:
        user.tags = string_list(tags)

    return user


def create_user(d: ResourceData, client) -> None:
    user = client.create_user(unmarshal_user(d))
    d.set_id(str(user.id))
    logger.info(f"Created user {user.id}")
    marshal_user(user, d)


def read_user(d: ResourceData, client) -> None:
    marshal_user(client.get_user(atoi64(d.id)), d)


def update_user(d: ResourceData, client) -> None:
    user = client.update_user(atoi64(d.id), unmarshal_user(d))
    marshal_user(user, d)


def delete_user(d: ResourceData, client) -> None:
    client.delete_user(atoi64(d.id))


RESOURCE = Resource(
    name="zendesk_user",
    description="Provides a user resource.",
    schema={
        "url": computed_string("The API url of this user."),
        "name": string_attr("The name of the user.", required=True),
        "email": string_attr("The email address of the user.", optional=True),
        "role": string_attr(
            "The role of the user. Allowed values: end-user, agent, admin.",
            optional=True,
            default="end-user",
        ),
        "active": bool_attr("Whether the user is active.", optional=True, default=True),
        "verified": bool_attr("Whether the user is verified.", optional=True, computed=True),
        "phone": string_attr("The phone number of the user.", optional=True),
        "organization_id": int_attr(
            "The ID of the organization the user belongs to.", optional=True
        ),
        "tags": Attribute(type="set", description="Tags for the user.", optional=True, elem="string"),
        "created_at": computed_string("The time the user was created."),
        "updated_at": computed_string("The time the user was last updated."),
    },
    create=create_user,
    read=read_user,
    update=update_user,
    delete=delete_user,
)
