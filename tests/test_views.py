import json
import types
import urllib.request
from urllib.error import HTTPError
import io

import pytest

from zendesk_provider.client import ZendeskClient
from zendesk_provider.exceptions import ZendeskAPIError, ZendeskValidationError
from zendesk_provider.models import View
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.resources.views import (
    column_id_from_state,
    column_id_to_state,
    marshal_view,
    unmarshal_view,
    update_view,
)

VIEW_RESPONSE = {
    "view": {
        "id": 360001,
        "url": "https://example/api/v2/views/360001.json",
        "title": "Open urgent",
        "description": "",
        "position": 3,
        "active": True,
        "restriction": {"type": "Group", "id": 7, "ids": [7, 8]},
        "conditions": {
            "all": [{"field": "status", "operator": "less_than", "value": "solved"}],
            "any": [{"field": "priority", "operator": "is", "value": "urgent"}],
        },
        "execution": {
            "group_by": "status",
            "group_order": "asc",
            "sort_by": "updated_at",
            "sort_order": "desc",
            "group": {"id": "status", "title": "Status", "order": "asc"},
            "sort": {"id": "updated_at", "title": "Updated", "order": "desc"},
            "columns": [
                {"id": "subject", "title": "Subject"},
                {"id": 360012345, "title": "Account tier"},
            ],
        },
    }
}


def make_response(payload):
    class DummyResponse:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

        def read(self):
            return json.dumps(payload).encode("utf-8")

    return DummyResponse()


def minimal_client_init(self, subdomain, email, token):
    self.client = types.SimpleNamespace()
    self.base_url = "https://example/api/v2"
    self.auth_header = "Basic xxx"


def view_state(**overrides):
    values = {
        "title": "Open urgent",
        "active": True,
        "position": 3,
        "all": [{"field": "status", "operator": "less_than", "value": "solved"}],
        "any": [],
        "group_by": "status",
        "sort_by": "updated_at",
        "sort_order": "desc",
        "columns": ["subject", "360012345"],
        "restrictions": [7, 8],
    }
    values.update(overrides)
    return ResourceData(values, id="360001")


def test_marshal_flattens_execution_and_restriction():
    view = View.model_validate(VIEW_RESPONSE["view"])
    d = ResourceData(id="360001")

    marshal_view(view, d)

    state = d.state()
    assert state["columns"] == ["subject", "360012345"]
    assert state["restrictions"] == [7, 8]
    assert state["group_by"] == "status"
    assert state["sort_order"] == "desc"
    assert state["group_title"] == "Status"
    assert state["sort_title"] == "Updated"
    assert state["all"] == [{"field": "status", "operator": "less_than", "value": "solved"}]
    assert state["any"] == [{"field": "priority", "operator": "is", "value": "urgent"}]
    assert state["position"] == 3


def test_marshal_without_restriction_sets_none():
    payload = dict(VIEW_RESPONSE["view"], restriction=None)
    d = ResourceData()

    marshal_view(View.model_validate(payload), d)

    assert d.get("restrictions") is None


def test_unmarshal_builds_write_payload():
    view = unmarshal_view(view_state())

    assert view.id == 360001
    payload = view.to_payload()
    assert payload["output"] == {
        "columns": ["subject", 360012345],
        "group_by": "status",
        "sort_by": "updated_at",
        "sort_order": "desc",
    }
    assert payload["restriction"] == {"type": "Group", "ids": [7, 8]}
    assert payload["all"] == [{"field": "status", "operator": "less_than", "value": "solved"}]
    assert payload["any"] == []
    assert "conditions" not in payload
    assert "execution" not in payload


def test_unmarshal_without_restrictions_clears_restriction():
    payload = unmarshal_view(view_state(restrictions=[])).to_payload()

    assert "restriction" in payload
    assert payload["restriction"] is None


def test_unmarshal_rejects_malformed_conditions():
    with pytest.raises(ZendeskValidationError):
        unmarshal_view(view_state(all=[{"field": "status", "value": "open"}]))


def test_list_condition_value_is_sent_back_as_list():
    payload = dict(
        VIEW_RESPONSE["view"],
        conditions={
            "all": [{"field": "current_tags", "operator": "includes", "value": ["vip", "escalated"]}],
            "any": [],
        },
    )
    d = ResourceData(id="360001")
    marshal_view(View.model_validate(payload), d)

    assert d.get("all") == [
        {"field": "current_tags", "operator": "includes", "value": '["vip", "escalated"]'}
    ]
    sent = unmarshal_view(d).to_payload()
    assert sent["all"] == [
        {"field": "current_tags", "operator": "includes", "value": ["vip", "escalated"]}
    ]


def test_unmarshal_rejects_invalid_json_condition_value():
    with pytest.raises(ZendeskValidationError):
        unmarshal_view(view_state(all=[{"field": "current_tags", "operator": "includes", "value": "[oops"}]))


@pytest.mark.parametrize("column,expected", [
    ("subject", "subject"),
    ("360012345", 360012345),
    (360012345, 360012345),
    (360012345.0, 360012345),
])
def test_column_id_from_state(column, expected):
    assert column_id_from_state(column) == expected


def test_column_id_to_state_prints_integers_without_fraction():
    assert column_id_to_state(360012345.0) == "360012345"
    assert column_id_to_state(360012345) == "360012345"
    assert column_id_to_state("status") == "status"


def test_update_sets_position_before_fields(monkeypatch):
    monkeypatch.setattr(ZendeskClient, "__init__", minimal_client_init, raising=False)
    client = ZendeskClient("s", "e", "t")
    requests = []

    def fake_urlopen(req):
        requests.append((req.get_method(), req.full_url, json.loads(req.data.decode("utf-8"))))
        if "update_many" in req.full_url:
            return make_response({"views": [{"id": 360001, "position": 3}]})
        return make_response(VIEW_RESPONSE)

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen, raising=False)

    d = view_state()
    update_view(d, client)

    assert [(m, u) for m, u, _ in requests] == [
        ("PUT", "https://example/api/v2/views/update_many"),
        ("PUT", "https://example/api/v2/views/360001.json"),
    ]
    assert requests[0][2] == {"views": [{"id": 360001, "position": 3}]}
    assert requests[1][2]["view"]["title"] == "Open urgent"
    assert d.get("group_title") == "Status"


def test_failed_position_update_aborts_update(monkeypatch):
    monkeypatch.setattr(ZendeskClient, "__init__", minimal_client_init, raising=False)
    client = ZendeskClient("s", "e", "t")
    urls = []

    def fake_urlopen(req):
        urls.append(req.full_url)
        raise HTTPError(req.full_url, 403, "Forbidden", None, io.BytesIO(b"{}"))

    monkeypatch.setattr(urllib.request, "urlopen", fake_urlopen, raising=False)

    with pytest.raises(ZendeskAPIError) as excinfo:
        update_view(view_state(), client)

    assert excinfo.value.status_code == 403
    assert urls == ["https://example/api/v2/views/update_many"]
