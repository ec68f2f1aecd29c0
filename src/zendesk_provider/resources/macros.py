"""zendesk_macro resource.

Action values are strings in state. Multi-value actions (e.g. set_tags with
several tags, notification_user with [user, subject, body]) are kept as a
JSON array string (objects as a JSON object string) and decoded again
before they are sent.

ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/macros/
"""
import json
import logging
from typing import Any, Dict, List, Optional

from zendesk_provider.exceptions import ZendeskValidationError
from zendesk_provider.models import Macro, MacroAction
from zendesk_provider.resource_data import ResourceData, atoi64, set_schema_fields
from zendesk_provider.schema import (
    Attribute,
    Resource,
    bool_attr,
    computed_string,
    int_attr,
    string_attr,
)

logger = logging.getLogger("zendesk-provider")


def action_value_to_state(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    if isinstance(value, dict):
        return json.dumps(value)
    if value is None:
        return ""
    return str(value)


def action_value_from_state(value: Any) -> Any:
    if isinstance(value, str) and value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except ValueError as e:
            raise ZendeskValidationError(f"invalid macro action value {value!r}: {e}")
    return value


def restriction_ids(restriction: Optional[Dict[str, Any]]) -> Optional[List[int]]:
    if not restriction:
        return None
    ids = restriction.get("ids")
    if ids is None:
        return None
    return [int(i) for i in ids]


def marshal_macro(macro: Macro, d: ResourceData) -> None:
    set_schema_fields(d, {
        "url": macro.url,
        "title": macro.title,
        "description": macro.description,
        "position": macro.position,
        "active": macro.active,
        "action": [
            {"field": a.field, "value": action_value_to_state(a.value)}
            for a in macro.actions
        ],
        "restrictions": restriction_ids(macro.restriction),
    })


def unmarshal_macro(d: ResourceData) -> Macro:
    macro = Macro()
    if d.id:
        macro.id = atoi64(d.id)

    for key in ("url", "title", "description"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(macro, key, value)
    position, ok = d.get_ok("position")
    if ok:
        macro.position = int(position)
    active = d.get("active")
    if active is not None:
        macro.active = bool(active)

    actions, ok = d.get_ok("action")
    if ok:
        for item in actions:
            if not isinstance(item, dict) or "field" not in item:
                raise ZendeskValidationError(f"could not parse action {item!r} for macro {macro.title!r}")
            macro.actions.append(
                MacroAction(field=item["field"], value=action_value_from_state(item.get("value")))
            )

    restrictions, ok = d.get_ok("restrictions")
    if ok:
        macro.restriction = {"type": "Group", "ids": [int(i) for i in restrictions]}

    return macro


def create_macro(d: ResourceData, client) -> None:
    macro = client.create_macro(unmarshal_macro(d))
    d.set_id(str(macro.id))
    logger.info(f"Created macro {macro.id} ({macro.title})")
    marshal_macro(macro, d)


def read_macro(d: ResourceData, client) -> None:
    marshal_macro(client.get_macro(atoi64(d.id)), d)


def update_macro(d: ResourceData, client) -> None:
    macro = unmarshal_macro(d)
    macro = client.update_macro(atoi64(d.id), macro)
    marshal_macro(macro, d)


def delete_macro(d: ResourceData, client) -> None:
    client.delete_macro(atoi64(d.id))


RESOURCE = Resource(
    name="zendesk_macro",
    description="Provides a macro resource.",
    schema={
        "url": computed_string("The API url of this macro."),
        "title": string_attr("The title of the macro.", required=True),
        "description": string_attr("The description of the macro.", optional=True),
        "position": int_attr("The position of the macro.", optional=True, computed=True),
        "active": bool_attr("Whether the macro is active.", optional=True, default=True),
        "action": Attribute(
            type="set",
            description="What the macro will do.",
            required=True,
            elem={
                "field": string_attr("The name of a ticket field to modify.", required=True),
                "value": string_attr(
                    "The new value of the field. Multiple values are given as a JSON array.",
                    required=True,
                ),
            },
        ),
        "restrictions": Attribute(
            type="set", description="Allowed group ids.", optional=True, elem="int"
        ),
    },
    create=create_macro,
    read=read_macro,
    update=update_macro,
    delete=delete_macro,
)
