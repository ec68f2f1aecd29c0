import asyncio
import json
import types

import pytest
from pydantic import AnyUrl

from zendesk_provider import server
from zendesk_provider.handlers import TOOL_HANDLERS
from zendesk_provider.models import Locale, Ticket


class FakeClient:
    def __init__(self):
        self.calls = []

    def create_ticket(self, ticket):
        self.calls.append(("create_ticket", ticket))
        return ticket.model_copy(update={"id": 42})

    def get_ticket(self, ticket_id):
        self.calls.append(("get_ticket", ticket_id))
        return Ticket(id=ticket_id, subject="Hello", status="open")

    def get_locales(self):
        self.calls.append(("get_locales",))
        return [Locale(id=1, locale="en-US", name="English")]


@pytest.fixture
def client(monkeypatch):
    fake = FakeClient()
    server._reset_client_cache_for_tests()
    monkeypatch.setattr(server, "get_zendesk_client", lambda: fake)
    yield fake
    server._reset_client_cache_for_tests()


def call(name, arguments):
    return asyncio.run(server.handle_call_tool(name, arguments))


def test_every_listed_tool_has_a_handler():
    tools = asyncio.run(server.handle_list_tools())

    assert sorted(t.name for t in tools) == sorted(TOOL_HANDLERS)


def test_create_resource_returns_json_result(client):
    content = call("create_resource", {
        "type": "zendesk_ticket",
        "config": {"subject": "Hello", "description": "First ticket"},
    })

    result = json.loads(content[0].text)
    assert result["id"] == "42"
    assert result["state"]["status"] == "new"
    assert client.calls[0][1].status == "new"


def test_read_resource_accepts_numeric_id(client):
    content = call("read_resource", {"type": "zendesk_ticket", "id": 7})

    assert json.loads(content[0].text)["state"]["subject"] == "Hello"
    assert client.calls == [("get_ticket", 7)]


def test_missing_arguments_become_error_text(client):
    content = call("update_resource", {"type": "zendesk_ticket", "id": "7"})

    assert content[0].text.startswith("Error: Missing required arguments: config")
    assert client.calls == []


def test_provider_errors_become_error_text(client):
    content = call("create_resource", {"type": "zendesk_trigger", "config": {}})

    assert content[0].text == "Error: Unknown resource type: zendesk_trigger"


def test_unknown_tool(client):
    content = call("get_ticket", {"ticket_id": 1})

    assert content[0].text == "Error: Unknown tool: get_ticket"


def test_get_provider_schema_for_one_type(client):
    content = call("get_provider_schema", {"type": "zendesk_tags"})

    described = json.loads(content[0].text)
    assert list(described) == ["zendesk_tags"]
    assert "name_prefix" in described["zendesk_tags"]["attributes"]


def test_locales_resource_is_cached(client):
    first = asyncio.run(server.handle_read_resource(AnyUrl("zendesk://locales")))
    second = asyncio.run(server.handle_read_resource(AnyUrl("zendesk://locales")))

    assert first == second
    assert json.loads(first)["metadata"]["count"] == 1
    assert client.calls == [("get_locales",)]


def test_provider_schema_resource(client):
    text = asyncio.run(server.handle_read_resource(AnyUrl("zendesk://provider-schema")))

    assert "zendesk_macro" in json.loads(text)["resources"]


def test_unknown_resource_path(client):
    with pytest.raises(ValueError):
        asyncio.run(server.handle_read_resource(AnyUrl("zendesk://knowledge-base")))
