"""zendesk_locales data source.

ref: https://developer.zendesk.com/api-reference/ticketing/account-configuration/locales/
"""
from zendesk_provider.exceptions import ZendeskValidationError
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.schema import Attribute, Resource, string_attr

LOCALE_ELEM = {
    "id": Attribute(type="int", computed=True),
    "url": Attribute(type="string", computed=True),
    "locale": Attribute(type="string", computed=True),
    "name": Attribute(type="string", computed=True),
    "created_at": Attribute(type="string", computed=True),
    "updated_at": Attribute(type="string", computed=True),
}


def read_locales(d: ResourceData, client) -> None:
    scope = d.get("scope") or "all"
    if scope == "all":
        locales = client.get_locales()
    elif scope == "agent":
        locales = client.get_agent_locales()
    elif scope == "public":
        locales = client.get_public_locales()
    else:
        raise ZendeskValidationError(f"scope must be one of all, agent, public; got {scope!r}")

    d.set_id("locales")
    d.set("scope", scope)
    d.set("locales", [
        {
            "id": loc.id,
            "url": loc.url,
            "locale": loc.locale,
            "name": loc.name,
            "created_at": loc.created_at,
            "updated_at": loc.updated_at,
        }
        for loc in locales
    ])


DATA_SOURCE = Resource(
    name="zendesk_locales",
    description="Lists the locales available to the account.",
    schema={
        "scope": string_attr(
            "Which list to read: all (translated for the account), agent or public.",
            optional=True,
            default="all",
        ),
        "locales": Attribute(type="list", computed=True, elem=LOCALE_ELEM),
    },
    read=read_locales,
    importable=False,
)
