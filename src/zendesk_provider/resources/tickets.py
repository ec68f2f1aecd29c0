"""zendesk_ticket resource.

ref: https://developer.zendesk.com/api-reference/ticketing/tickets/tickets/
"""
import logging

from zendesk_provider.models import Ticket
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields, string_list
from zendesk_provider.schema import (
    Attribute,
    Resource,
    computed_string,
    int_attr,
    string_attr,
)

logger = logging.getLogger("zendesk-provider")


def marshal_ticket(ticket: Ticket, d: ResourceData) -> None:
    fields = {
        "url": ticket.url,
        "subject": ticket.subject,
        "description": ticket.description,
        "type": ticket.type,
        "priority": ticket.priority,
        "status": ticket.status,
        "requester_id": ticket.requester_id,
        "assignee_id": ticket.assignee_id,
        "organization_id": ticket.organization_id,
        "group_id": ticket.group_id,
        "created_at": ticket.created_at,
        "updated_at": ticket.updated_at,
    }
    if ticket.tags is not None:
        fields["tags"] = ticket.tags
    set_schema_fields(d, fields)


def unmarshal_ticket(d: ResourceData) -> Ticket:
    ticket = Ticket()
    if d.id:
        ticket.id = atoi64(d.id)

    for key in ("subject", "description", "type", "priority", "status"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(ticket, key, value)

    for key in ("requester_id", "assignee_id", "organization_id", "group_id"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(ticket, key, int(value))

    tags, ok = d.get_ok("tags")
    if ok:
        ticket.tags = string_list(tags)

    return ticket


def create_ticket(d: ResourceData, client) -> None:
    ticket = client.create_ticket(unmarshal_ticket(d))
    d.set_id(str(ticket.id))
    logger.info(f"Created ticket {ticket.id}")
    marshal_ticket(ticket, d)


def read_ticket(d: ResourceData, client) -> None:
    marshal_ticket(client.get_ticket(atoi64(d.id)), d)


def update_ticket(d: ResourceData, client) -> None:
    ticket = unmarshal_ticket(d)
    ticket = client.update_ticket(atoi64(d.id), ticket)
    marshal_ticket(ticket, d)


def delete_ticket(d: ResourceData, client) -> None:
    client.delete_ticket(atoi64(d.id))


RESOURCE = Resource(
    name="zendesk_ticket",
    description="Provides a ticket resource.",
    schema={
        "url": computed_string("The API url of this ticket."),
        "subject": string_attr("The subject of the ticket.", required=True),
        "description": string_attr("The description of the ticket.", required=True),
        "type": string_attr(
            "The type of the ticket. Allowed values: question, incident, problem, task.",
            optional=True,
        ),
        "priority": string_attr(
            "The priority of the ticket. Allowed values: urgent, high, normal, low.",
            optional=True,
        ),
        "status": string_attr(
            "The status of the ticket. Allowed values: new, open, pending, hold, solved, closed.",
            optional=True,
            default="new",
        ),
        "requester_id": int_attr("The ID of the requester.", optional=True),
        "assignee_id": int_attr("The ID of the assignee.", optional=True),
        "organization_id": int_attr("The ID of the organization.", optional=True),
        "group_id": int_attr("The ID of the group.", optional=True),
        "tags": Attribute(type="set", description="Tags for the ticket.", optional=True, elem="string"),
        "created_at": computed_string("The time the ticket was created."),
        "updated_at": computed_string("The time the ticket was last updated."),
    },
    create=create_ticket,
    read=read_ticket,
    update=update_ticket,
    delete=delete_ticket,
)
