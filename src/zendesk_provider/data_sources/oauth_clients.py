"""zendesk_oauth_clients data source. Client secrets are never kept in state.

ref: https://developer.zendesk.com/api-reference/ticketing/oauth/oauth_clients/
"""
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.schema import Attribute, Resource

CLIENT_ELEM = {
    "id": Attribute(type="int", computed=True),
    "url": Attribute(type="string", computed=True),
    "name": Attribute(type="string", computed=True),
    "identifier": Attribute(type="string", computed=True),
    "redirect_uri": Attribute(type="list", computed=True, elem="string"),
    "created_at": Attribute(type="string", computed=True),
    "updated_at": Attribute(type="string", computed=True),
}


def _redirect_uris(value) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def read_oauth_clients(d: ResourceData, client) -> None:
    clients = client.get_oauth_clients()
    d.set_id("oauth_clients")
    d.set("clients", [
        {
            "id": c.id,
            "url": c.url,
            "name": c.name,
            "identifier": c.identifier,
            "redirect_uri": _redirect_uris(c.redirect_uri),
            "created_at": c.created_at,
            "updated_at": c.updated_at,
        }
        for c in clients
    ])


DATA_SOURCE = Resource(
    name="zendesk_oauth_clients",
    description="Lists the OAuth clients of the account.",
    schema={
        "clients": Attribute(type="list", computed=True, elem=CLIENT_ELEM),
    },
    read=read_oauth_clients,
    importable=False,
)
