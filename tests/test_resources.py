import types

import pytest

from zendesk_provider.exceptions import ZendeskValidationError
from zendesk_provider.models import (
    CustomRole,
    CustomStatus,
    GroupMembership,
    OrganizationMembership,
    Queue,
    Ticket,
    User,
)
from zendesk_provider.resource_data import ResourceData
from zendesk_provider.resources import RESOURCES, custom_roles, custom_statuses, queues, tickets, users
from zendesk_provider.resources import memberships


def recording_client(**methods):
    """SimpleNamespace client whose methods record their arguments in `calls`."""
    calls = []

    def wrap(name, func):
        def method(*args):
            calls.append((name, args))
            return func(*args)
        return method

    client = types.SimpleNamespace(**{name: wrap(name, func) for name, func in methods.items()})
    client.calls = calls
    return client


def test_registry_lists_every_resource_type():
    assert sorted(RESOURCES) == [
        "zendesk_custom_role",
        "zendesk_custom_status",
        "zendesk_group_membership",
        "zendesk_macro",
        "zendesk_organization_membership",
        "zendesk_queue",
        "zendesk_ticket",
        "zendesk_user",
        "zendesk_view",
    ]


def test_ticket_create_sets_id_and_state():
    client = recording_client(
        create_ticket=lambda t: t.model_copy(update={"id": 35436, "url": "https://example/tickets/35436.json"}),
    )
    d = ResourceData({
        "subject": "Help, my printer is on fire!",
        "description": "The smoke is very colorful.",
        "status": "new",
        "priority": "",
        "assignee_id": 0,
        "tags": ["printer", "fire", "printer"],
    })

    tickets.create_ticket(d, client)

    sent = client.calls[0][1][0]
    assert sent.priority is None
    assert sent.assignee_id is None
    assert sent.tags == ["printer", "fire"]
    assert d.id == "35436"
    assert d.get("url") == "https://example/tickets/35436.json"
    assert d.get("status") == "new"


def test_ticket_read_parses_id():
    client = recording_client(get_ticket=lambda i: Ticket(id=i, subject="Hi", tags=["a"]))
    d = ResourceData(id="12")

    tickets.read_ticket(d, client)

    assert client.calls == [("get_ticket", (12,))]
    assert d.get("subject") == "Hi"
    assert d.get("tags") == ["a"]


def test_invalid_id_raises_validation_error():
    client = recording_client(get_ticket=lambda i: Ticket(id=i))

    with pytest.raises(ZendeskValidationError):
        tickets.read_ticket(ResourceData(id="abc"), client)
    assert client.calls == []


def test_user_update_sends_explicit_false_active():
    client = recording_client(update_user=lambda i, u: u.model_copy(update={"id": i, "verified": True}))
    d = ResourceData({"name": "Ann", "role": "agent", "active": False, "verified": False}, id="8")

    users.update_user(d, client)

    name, (user_id, sent) = client.calls[0]
    assert (name, user_id) == ("update_user", 8)
    assert sent.active is False
    assert "verified" not in sent.to_payload()
    assert d.get("verified") is True


def test_custom_role_configuration_round_trips_as_map():
    configuration = {"chat_access": True, "ticket_editing": False}
    client = recording_client(
        create_custom_role=lambda r: r.model_copy(update={"id": 3}),
        get_custom_role=lambda i: CustomRole(id=i, name="Lead", configuration=configuration),
    )
    d = ResourceData({"name": "Lead", "configuration": configuration, "role_type": 0})

    custom_roles.create_custom_role(d, client)
    custom_roles.read_custom_role(d, client)

    sent = client.calls[0][1][0]
    assert sent.role_type is None
    assert sent.configuration == configuration
    assert d.get("configuration") == configuration


def test_queue_definition_is_sent_as_object():
    definition = {"all": [{"field": "priority", "operator": "is", "value": "high"}], "any": []}
    client = recording_client(update_queue=lambda i, q: q.model_copy(update={"id": i}))
    d = ResourceData({"name": "High", "definition": definition}, id="01HG")

    with pytest.raises(ZendeskValidationError):
        queues.update_queue(d, client)

    d = ResourceData({"name": "High", "definition": definition}, id="41")
    queues.update_queue(d, client)
    sent = client.calls[0][1][1]
    assert isinstance(sent, Queue)
    assert sent.to_payload() == {"name": "High", "definition": definition}


def test_custom_status_flags_are_sent_when_false():
    client = recording_client(create_custom_status=lambda s: s.model_copy(update={"id": 77}))
    d = ResourceData({
        "status_category": "pending",
        "agent_label": "Waiting on vendor",
        "default": False,
        "active": True,
        "end_user_hidden": False,
    })

    custom_statuses.create_custom_status(d, client)

    sent = client.calls[0][1][0]
    assert isinstance(sent, CustomStatus)
    assert sent.to_payload() == {
        "status_category": "pending",
        "agent_label": "Waiting on vendor",
        "default": False,
        "active": True,
        "end_user_hidden": False,
    }
    assert d.id == "77"


def test_custom_status_delete_only_warns():
    client = recording_client()

    diagnostics = custom_statuses.delete_custom_status(ResourceData(id="77"), client)

    assert client.calls == []
    assert len(diagnostics) == 1
    assert diagnostics[0].severity == "warning"
    assert diagnostics[0].summary == "Custom statuses cannot be deleted via API"


def test_group_membership_update_is_a_read():
    client = recording_client(
        get_group_membership=lambda i: GroupMembership(id=i, user_id=1, group_id=2, default=True),
    )
    d = ResourceData({"user_id": 1, "group_id": 2, "default": False}, id="9")

    memberships.GROUP_MEMBERSHIP.update(d, client)

    assert client.calls == [("get_group_membership", (9,))]
    assert d.get("default") is True


def test_organization_membership_create():
    client = recording_client(
        create_organization_membership=lambda m: m.model_copy(update={"id": 4}),
    )
    d = ResourceData({"user_id": "29", "organization_id": 12, "default": False})

    memberships.create_organization_membership(d, client)

    sent = client.calls[0][1][0]
    assert isinstance(sent, OrganizationMembership)
    assert sent.to_payload() == {"user_id": 29, "organization_id": 12, "default": False}
    assert d.id == "4"
    assert d.get("organization_id") == 12


def test_membership_targets_force_replacement():
    for resource in (memberships.GROUP_MEMBERSHIP, memberships.ORGANIZATION_MEMBERSHIP):
        forced = sorted(name for name, attr in resource.attributes.items() if attr.force_new)
        assert "user_id" in forced
        assert len(forced) == 2


def test_user_defaults():
    schema = users.RESOURCE.attributes
    assert schema["role"].default == "end-user"
    assert schema["active"].default is True
    assert schema["verified"].computed and schema["verified"].optional
    assert User().to_payload() == {}
