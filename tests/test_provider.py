import types

import pytest

from zendesk_provider.exceptions import ZendeskValidationError
from zendesk_provider.models import GroupMembership, Queue
from zendesk_provider.provider import Provider


class FakeClient:
    """Records lifecycle calls for queues and group memberships."""

    def __init__(self):
        self.calls = []
        self.next_id = 100

    def create_queue(self, queue):
        self.calls.append(("create_queue", queue))
        return queue.model_copy(update={"id": 5, "created_at": "2024-01-01T00:00:00Z"})

    def get_queue(self, queue_id):
        self.calls.append(("get_queue", queue_id))
        return Queue(id=queue_id, name="Tier 1", description="front line")

    def update_queue(self, queue_id, queue):
        self.calls.append(("update_queue", queue_id, queue))
        return queue.model_copy(update={"id": queue_id})

    def delete_queue(self, queue_id):
        self.calls.append(("delete_queue", queue_id))

    def create_group_membership(self, membership):
        self.next_id += 1
        self.calls.append(("create_group_membership", membership))
        return membership.model_copy(update={"id": self.next_id})

    def get_group_membership(self, membership_id):
        self.calls.append(("get_group_membership", membership_id))
        return GroupMembership(id=membership_id, user_id=1, group_id=2, default=False)

    def delete_group_membership(self, membership_id):
        self.calls.append(("delete_group_membership", membership_id))


@pytest.fixture
def client():
    return FakeClient()


def test_create_returns_id_and_state(client):
    result = Provider(client).create("zendesk_queue", {"name": "Tier 1"})

    assert result["id"] == "5"
    assert result["state"]["name"] == "Tier 1"
    assert result["state"]["created_at"] == "2024-01-01T00:00:00Z"
    assert result["diagnostics"] == []


def test_unknown_types_raise_validation_error(client):
    provider = Provider(client)

    with pytest.raises(ZendeskValidationError):
        provider.create("zendesk_trigger", {})
    with pytest.raises(ZendeskValidationError):
        provider.read_data_source("zendesk_brands")
    assert client.calls == []


def test_update_overlays_config_on_prior_state(client):
    prior = {
        "name": "Tier 1",
        "description": "front line",
        "url": "https://example/queues/5.json",
        "created_at": "2024-01-01T00:00:00Z",
    }

    result = Provider(client).update("zendesk_queue", "5", {"name": "Tier 2"}, prior)

    name, queue_id, sent = client.calls[0]
    assert (name, queue_id) == ("update_queue", 5)
    assert sent.name == "Tier 2"
    # description is no longer configured, so it is not sent
    assert sent.description is None
    assert result["state"]["name"] == "Tier 2"
    assert result["id"] == "5"


def test_update_with_force_new_change_replaces(client):
    prior = {"user_id": 1, "group_id": 2, "default": False}

    result = Provider(client).update(
        "zendesk_group_membership", "9", {"user_id": 1, "group_id": 3}, prior
    )

    assert [c[0] for c in client.calls] == ["delete_group_membership", "create_group_membership"]
    assert client.calls[0][1] == 9
    assert client.calls[1][1].group_id == 3
    assert result["id"] == "101"
    assert result["state"]["group_id"] == 3


def test_update_without_force_new_change_reads_membership(client):
    prior = {"user_id": 1, "group_id": 2, "default": False}

    result = Provider(client).update("zendesk_group_membership", "9", dict(prior), prior)

    assert client.calls == [("get_group_membership", 9)]
    assert result["id"] == "9"


def test_delete_clears_state_and_keeps_warnings(client):
    provider = Provider(client)

    assert provider.delete("zendesk_queue", "5") == {"id": "", "state": {}, "diagnostics": []}

    result = provider.delete("zendesk_custom_status", "77")
    assert result["diagnostics"][0]["severity"] == "warning"
    assert client.calls == [("delete_queue", 5)]


def test_import_reads_by_id(client):
    result = Provider(client).import_resource("zendesk_queue", "5")

    assert client.calls == [("get_queue", 5)]
    assert result["state"]["description"] == "front line"


def test_read_data_source_fills_defaults():
    client = types.SimpleNamespace(get_locales=lambda: [])

    result = Provider(client).read_data_source("zendesk_locales")

    assert result == {"id": "locales", "state": {"scope": "all", "locales": []}, "diagnostics": []}


def test_schema_lists_resources_and_data_sources(client):
    schema = Provider(client).schema()

    assert "zendesk_view" in schema["resources"]
    assert schema["data_sources"]["zendesk_webhook"]["importable"] is False
    webhook_auth = schema["data_sources"]["zendesk_webhook"]["attributes"]["authentication"]
    assert webhook_auth["elem"]["data"]["sensitive"] is True


def test_update_without_prior_state_replaces_on_remote_force_new_change(client):
    result = Provider(client).update("zendesk_group_membership", "9", {"user_id": 1, "group_id": 99})

    assert [c[0] for c in client.calls] == [
        "get_group_membership",
        "delete_group_membership",
        "create_group_membership",
    ]
    assert client.calls[2][1].group_id == 99
    assert result["id"] == "101"
    assert result["state"]["group_id"] == 99


def test_update_without_prior_state_uses_remote_state_as_baseline(client):
    result = Provider(client).update("zendesk_queue", "5", {"name": "Tier 2"})

    assert [c[0] for c in client.calls] == ["get_queue", "update_queue"]
    sent = client.calls[1][2]
    assert sent.name == "Tier 2"
    assert sent.description is None
    assert result["state"]["name"] == "Tier 2"
