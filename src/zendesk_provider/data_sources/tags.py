"""zendesk_tags data source.

ref: https://developer.zendesk.com/api-reference/ticketing/ticket-management/tags/
"""
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.schema import Attribute, Resource, int_attr, string_attr


def read_tags(d: ResourceData, client) -> None:
    prefix, ok = d.get_ok("name_prefix")
    if ok:
        tags = client.autocomplete_tags(prefix)
        count = len(tags)
    else:
        tags = client.get_tags()
        count = client.get_tag_count()

    d.set_id("tags")
    d.set("tags", [t.name for t in tags])
    d.set("count", count)


DATA_SOURCE = Resource(
    name="zendesk_tags",
    description="Lists the most popular recent tags, or the tags matching a prefix.",
    schema={
        "name_prefix": string_attr(
            "Only return tags starting with this prefix (at least 2 characters).",
            optional=True,
        ),
        "tags": Attribute(type="list", computed=True, elem="string"),
        "count": int_attr("Number of tags.", computed=True),
    },
    read=read_tags,
    importable=False,
)
