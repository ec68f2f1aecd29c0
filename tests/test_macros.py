import types

import pytest
from zenpy.lib.exception import RecordNotFoundException

from zendesk_provider.client import ZendeskClient
from zendesk_provider.exceptions import ZendeskNotFoundError, ZendeskValidationError
from zendesk_provider.models import Macro, MacroAction
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.resources.macros import (
    create_macro,
    marshal_macro,
    read_macro,
    unmarshal_macro,
)


class FakeMacros:
    """Stands in for zenpy's `client.macros` endpoint."""

    def __init__(self, stored=None):
        self.stored = stored or {}
        self.created = []
        self.updated = []
        self.deleted = []

    def __call__(self, id=None):
        if id not in self.stored:
            raise RecordNotFoundException(f"RecordNotFound: {id}")
        return self.stored[id]

    def create(self, macro):
        self.created.append(macro)
        return types.SimpleNamespace(
            id=501,
            url="https://example/api/v2/macros/501.json",
            title=macro.title,
            description=macro.description,
            position=10001,
            active=macro.active,
            restriction=macro.restriction,
            actions=macro.actions,
            created_at=None,
            updated_at=None,
        )

    def update(self, macro):
        self.updated.append(macro)
        return macro

    def delete(self, macro):
        self.deleted.append(macro.id)


def fake_client(monkeypatch, macros):
    def fake_init(self, subdomain, email, token):
        self.client = types.SimpleNamespace(macros=macros)
        self.base_url = "https://example/api/v2"
        self.auth_header = "Basic xxx"

    monkeypatch.setattr(ZendeskClient, "__init__", fake_init, raising=False)
    return ZendeskClient("s", "e", "t")


def test_marshal_encodes_list_values_as_json():
    macro = Macro(
        id=1,
        title="Escalate",
        actions=[
            MacroAction(field="status", value="open"),
            MacroAction(field="set_tags", value=["vip", "escalated"]),
        ],
        restriction={"type": "Group", "id": 4, "ids": [4]},
    )
    d = ResourceData(id="1")

    marshal_macro(macro, d)

    assert d.get("action") == [
        {"field": "status", "value": "open"},
        {"field": "set_tags", "value": '["vip", "escalated"]'},
    ]
    assert d.get("restrictions") == [4]


@pytest.mark.parametrize("restriction", [None, {}, {"type": "User", "id": 9}])
def test_marshal_restriction_without_ids_is_none(restriction):
    d = ResourceData()

    marshal_macro(Macro(title="x", restriction=restriction), d)

    assert d.get("restrictions") is None


def test_unmarshal_decodes_json_array_values():
    d = ResourceData({
        "title": "Notify",
        "active": True,
        "action": [
            {"field": "notification_user", "value": '["requester_id", "Hello", "Body"]'},
            {"field": "comment_value", "value": "Thanks!"},
        ],
        "restrictions": [12, 13],
    })

    macro = unmarshal_macro(d)

    assert macro.actions[0].value == ["requester_id", "Hello", "Body"]
    assert macro.actions[1].value == "Thanks!"
    assert macro.restriction == {"type": "Group", "ids": [12, 13]}


def test_unmarshal_rejects_invalid_json_array():
    d = ResourceData({"title": "Broken", "action": [{"field": "set_tags", "value": "[not json"}]})

    with pytest.raises(ZendeskValidationError):
        unmarshal_macro(d)


def test_object_action_value_is_kept_as_json_and_decoded():
    d = ResourceData()
    marshal_macro(Macro(title="Route", actions=[MacroAction(field="custom_fields_360", value={"a": 1})]), d)

    assert d.get("action") == [{"field": "custom_fields_360", "value": '{"a": 1}'}]
    assert unmarshal_macro(d).actions[0].value == {"a": 1}


def test_create_goes_through_zenpy(monkeypatch):
    macros = FakeMacros()
    client = fake_client(monkeypatch, macros)
    d = ResourceData({
        "title": "Escalate",
        "active": True,
        "action": [{"field": "priority", "value": "urgent"}],
    })

    create_macro(d, client)

    assert d.id == "501"
    sent = macros.created[0]
    assert sent.title == "Escalate"
    assert sent.restriction is None
    assert d.get("position") == 10001
    assert d.get("action") == [{"field": "priority", "value": "urgent"}]


def test_read_missing_macro_raises_not_found(monkeypatch):
    client = fake_client(monkeypatch, FakeMacros())

    with pytest.raises(ZendeskNotFoundError):
        read_macro(ResourceData(id="77"), client)


def test_delete_macro_passes_id(monkeypatch):
    macros = FakeMacros()
    client = fake_client(monkeypatch, macros)

    client.delete_macro(88)

    assert macros.deleted == [88]
