"""zendesk_custom_role resource.

ref: https://developer.zendesk.com/api-reference/ticketing/account-configuration/custom_roles/
"""
from zendesk_provider.models import CustomRole
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields
from zendesk_provider.schema import Attribute, Resource, computed_string, int_attr, string_attr


def marshal_custom_role(role: CustomRole, d: ResourceData) -> None:
    fields = {
        "url": role.url,
        "name": role.name,
        "description": role.description,
        "role_type": role.role_type,
        "created_at": role.created_at,
        "updated_at": role.updated_at,
    }
    if role.configuration is not None:
        fields["configuration"] = role.configuration
    set_schema_fields(d, fields)


def unmarshal_custom_role(d: ResourceData) -> CustomRole:
    role = CustomRole()
    if d.id:
        role.id = atoi64(d.id)

    for key in ("name", "description"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(role, key, value)

    role_type, ok = d.get_ok("role_type")
    if ok:
        role.role_type = int(role_type)

    configuration, ok = d.get_ok("configuration")
    if ok:
        role.configuration = dict(configuration)

    return role


def create_custom_role(d: ResourceData, client) -> None:
    role = client.create_custom_role(unmarshal_custom_role(d))
    d.set_id(str(role.id))
    marshal_custom_role(role, d)


def read_custom_role(d: ResourceData, client) -> None:
    marshal_custom_role(client.get_custom_role(atoi64(d.id)), d)


def update_custom_role(d: ResourceData, client) -> None:
    role = client.update_custom_role(atoi64(d.id), unmarshal_custom_role(d))
    marshal_custom_role(role, d)


def delete_custom_role(d: ResourceData, client) -> None:
    client.delete_custom_role(atoi64(d.id))


RESOURCE = Resource(
    name="zendesk_custom_role",
    description="Provides a custom agent role resource.",
    schema={
        "url": computed_string("The API url of this custom role."),
        "name": string_attr("The name of the custom role.", required=True),
        "description": string_attr("The description of the custom role.", optional=True),
        "role_type": int_attr("The role type ID.", optional=True),
        "configuration": Attribute(
            type="map",
            description="Configuration settings for the custom role.",
            optional=True,
        ),
        "created_at": computed_string("The time the custom role was created."),
        "updated_at": computed_string("The time the custom role was last updated."),
    },
    create=create_custom_role,
    read=read_custom_role,
    update=update_custom_role,
    delete=delete_custom_role,
)
