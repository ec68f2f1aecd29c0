"""zendesk_queue resource.

ref: https://developer.zendesk.com/api-reference/ticketing/queues/
"""
from zendesk_provider.models import Queue
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields
from zendesk_provider.schema import Attribute, Resource, computed_string, string_attr


def marshal_queue(queue: Queue, d: ResourceData) -> None:
    fields = {
        "url": queue.url,
        "name": queue.name,
        "description": queue.description,
        "created_at": queue.created_at,
        "updated_at": queue.updated_at,
    }
    if queue.definition is not None:
        fields["definition"] = queue.definition
    set_schema_fields(d, fields)


def unmarshal_queue(d: ResourceData) -> Queue:
    queue = Queue()
    if d.id:
        queue.id = atoi64(d.id)

    for key in ("name", "description"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(queue, key, value)

    definition, ok = d.get_ok("definition")
    if ok:
        queue.definition = dict(definition)

    return queue


def create_queue(d: ResourceData, client) -> None:
    queue = client.create_queue(unmarshal_queue(d))
    d.set_id(str(queue.id))
    marshal_queue(queue, d)


def read_queue(d: ResourceData, client) -> None:
    marshal_queue(client.get_queue(atoi64(d.id)), d)


def update_queue(d: ResourceData, client) -> None:
    queue = client.update_queue(atoi64(d.id), unmarshal_queue(d))
    marshal_queue(queue, d)


def delete_queue(d: ResourceData, client) -> None:
    client.delete_queue(atoi64(d.id))


RESOURCE = Resource(
    name="zendesk_queue",
    description="Provides an omnichannel routing queue resource.",
    schema={
        "url": computed_string("The API url of this queue."),
        "name": string_attr("The name of the queue.", required=True),
        "description": string_attr("The description of the queue.", optional=True),
        "definition": Attribute(
            type="map",
            description="The definition of the queue (JSON object).",
            optional=True,
        ),
        "created_at": computed_string("The time the queue was created."),
        "updated_at": computed_string("The time the queue was last updated."),
    },
    create=create_queue,
    read=read_queue,
    update=update_queue,
    delete=delete_queue,
)
