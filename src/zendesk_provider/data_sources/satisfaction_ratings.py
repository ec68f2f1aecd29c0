"""zendesk_satisfaction_ratings data source.

ref: https://developer.zendesk.com/api-reference/ticketing/ticket-management/satisfaction_ratings/
"""
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.schema import Attribute, Resource, int_attr

RATING_ELEM = {
    "id": Attribute(type="int", computed=True),
    "url": Attribute(type="string", computed=True),
    "assignee_id": Attribute(type="int", computed=True),
    "group_id": Attribute(type="int", computed=True),
    "requester_id": Attribute(type="int", computed=True),
    "ticket_id": Attribute(type="int", computed=True),
    "score": Attribute(type="string", computed=True),
    "reason": Attribute(type="string", computed=True),
    "created_at": Attribute(type="string", computed=True),
    "updated_at": Attribute(type="string", computed=True),
}


def read_satisfaction_ratings(d: ResourceData, client) -> None:
    ratings = client.get_satisfaction_ratings()
    d.set_id("satisfaction_ratings")
    d.set("satisfaction_ratings", [
        r.model_dump(mode="json", include=set(RATING_ELEM)) for r in ratings
    ])
    d.set("count", client.get_satisfaction_rating_count())


DATA_SOURCE = Resource(
    name="zendesk_satisfaction_ratings",
    description="Lists satisfaction ratings.",
    schema={
        "satisfaction_ratings": Attribute(type="list", computed=True, elem=RATING_ELEM),
        "count": int_attr("Approximate number of satisfaction ratings.", computed=True),
    },
    read=read_satisfaction_ratings,
    importable=False,
)
