"""zendesk_custom_status resource.

Custom ticket statuses cannot be deleted through the API; destroying the
resource only forgets it and reports a warning.

ref: https://developer.zendesk.com/api-reference/ticketing/tickets/ticket-statuses/
"""
import logging

from zendesk_provider.models import CustomStatus
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields
from zendesk_provider.schema import (
    Diagnostic,
    Diagnostics,
    Resource,
    bool_attr,
    computed_string,
    string_attr,
)

logger = logging.getLogger("zendesk-provider")


def marshal_custom_status(status: CustomStatus, d: ResourceData) -> None:
    set_schema_fields(d, {
        "url": status.url,
        "status_category": status.status_category,
        "agent_label": status.agent_label,
        "end_user_label": status.end_user_label,
        "description": status.description,
        "default": status.default,
        "active": status.active,
        "end_user_hidden": status.end_user_hidden,
        "created_at": status.created_at,
        "updated_at": status.updated_at,
    })


def unmarshal_custom_status(d: ResourceData) -> CustomStatus:
    status = CustomStatus()
    if d.id:
        status.id = atoi64(d.id)

    for key in ("status_category", "agent_label", "end_user_label", "description"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(status, key, value)

    # flags are sent when present at all, false included
    for key in ("default", "active", "end_user_hidden"):
        value = d.get(key)
        if value is not None:
            setattr(status, key, bool(value))

    return status


def create_custom_status(d: ResourceData, client) -> None:
    status = client.create_custom_status(unmarshal_custom_status(d))
    d.set_id(str(status.id))
    marshal_custom_status(status, d)


def read_custom_status(d: ResourceData, client) -> None:
    marshal_custom_status(client.get_custom_status(atoi64(d.id)), d)


def update_custom_status(d: ResourceData, client) -> None:
    status = client.update_custom_status(atoi64(d.id), unmarshal_custom_status(d))
    marshal_custom_status(status, d)


def delete_custom_status(d: ResourceData, client) -> Diagnostics:
    logger.warning(f"Custom status {d.id} left in Zendesk; removing it from state only")
    return [
        Diagnostic(
            severity="warning",
            summary="Custom statuses cannot be deleted via API",
            detail="The custom status will remain in Zendesk but will be removed from state.",
        )
    ]


RESOURCE = Resource(
    name="zendesk_custom_status",
    description="Provides a custom ticket status resource.",
    schema={
        "url": computed_string("The API url of this custom status."),
        "status_category": string_attr(
            "The status category. Allowed values: new, open, pending, hold, solved.",
            required=True,
        ),
        "agent_label": string_attr("The label shown to agents.", required=True),
        "end_user_label": string_attr("The label shown to end users.", optional=True),
        "description": string_attr("The description of the custom status.", optional=True),
        "default": bool_attr(
            "Whether this is the default status for the category.", optional=True, default=False
        ),
        "active": bool_attr("Whether the custom status is active.", optional=True, default=True),
        "end_user_hidden": bool_attr(
            "Whether the status is hidden from end users.", optional=True, default=False
        ),
        "created_at": computed_string("The time the custom status was created."),
        "updated_at": computed_string("The time the custom status was last updated."),
    },
    create=create_custom_status,
    read=read_custom_status,
    update=update_custom_status,
    delete=delete_custom_status,
)
