"""zendesk_view resource.

The API reads a view as `conditions` + `execution` and writes it as `all`/`any`
+ `output` (see View.to_payload). State keeps the flat attribute layout below:

* `columns` is a list of strings; digit-only entries are custom field ids and
  travel to the API as integers.
* `restrictions` holds the group ids of a Group restriction.
* `position` only changes through the bulk position endpoint, which the
  client calls before every field update.

ref: https://developer.zendesk.com/api-reference/ticketing/business-rules/views/
"""
import json
import logging
from typing import Any, Dict, List, Union

from zendesk_provider.exceptions import ZendeskValidationError
from zendesk_provider.models import (
    View,
    ViewColumn,
    ViewCondition,
    ViewConditions,
    ViewExecution,
    ViewRestriction,
)
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


def view_condition_schema(description: str) -> Attribute:
    return Attribute(
        type="set",
        description=description,
        optional=True,
        elem={
            "field": string_attr("The name of a ticket field.", required=True),
            "operator": string_attr("A comparison operator.", required=True),
            "value": string_attr("The value of a ticket field.", required=True),
        },
    )


def column_id_to_state(column_id: Union[int, float, str]) -> str:
    if isinstance(column_id, float) and column_id.is_integer():
        return str(int(column_id))
    return str(column_id)


def column_id_from_state(column: Any) -> Union[int, str]:
    if isinstance(column, bool):
        raise ZendeskValidationError(f"invalid view column {column!r}")
    if isinstance(column, (int, float)):
        return int(column)
    column = str(column)
    return int(column) if column.isdigit() else column


def _condition_value_to_state(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _condition_value_from_state(value: Any) -> Any:
    if isinstance(value, str) and value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except ValueError as e:
            raise ZendeskValidationError(f"invalid view condition value {value!r}: {e}")
    return value


def _conditions_to_state(conditions: List[ViewCondition]) -> List[Dict[str, str]]:
    return [
        {
            "field": c.field,
            "operator": c.operator,
            "value": _condition_value_to_state(c.value),
        }
        for c in conditions
    ]


def _conditions_from_state(raw: Any, kind: str, title: Any) -> List[ViewCondition]:
    conditions = []
    for item in raw:
        if not isinstance(item, dict):
            raise ZendeskValidationError(f"could not parse '{kind}' conditions for view {title!r}")
        try:
            conditions.append(ViewCondition(
                field=item["field"],
                operator=item["operator"],
                value=_condition_value_from_state(item["value"]),
            ))
        except KeyError as e:
            raise ZendeskValidationError(
                f"could not parse '{kind}' conditions for view {title!r}: missing {e}"
            )
    return conditions


def marshal_view(view: View, d: ResourceData) -> None:
    execution = view.execution
    fields: Dict[str, Any] = {
        "url": view.url,
        "title": view.title,
        "description": view.description,
        "position": view.position,
        "active": view.active,
        "group_by": execution.group_by,
        "sort_by": execution.sort_by,
        "group_order": execution.group_order,
        "sort_order": execution.sort_order,
        "group_title": (execution.group or {}).get("title"),
        "sort_title": (execution.sort or {}).get("title"),
        "columns": [column_id_to_state(c.id) for c in execution.columns],
        "all": _conditions_to_state(view.conditions.all),
        "any": _conditions_to_state(view.conditions.any),
    }

    if view.restriction is None:
        fields["restrictions"] = None
    else:
        fields["restrictions"] = list(view.restriction.ids)

    set_schema_fields(d, fields)


def unmarshal_view(d: ResourceData) -> View:
    view = View()
    if d.id:
        view.id = atoi64(d.id)

    url, ok = d.get_ok("url")
    if ok:
        view.url = url

    title, ok = d.get_ok("title")
    if ok:
        view.title = title
    description, ok = d.get_ok("description")
    if ok:
        view.description = description
    position, ok = d.get_ok("position")
    if ok:
        view.position = int(position)
    active = d.get("active")
    if active is not None:
        view.active = bool(active)

    execution = ViewExecution()
    for key in ("group_by", "sort_by", "group_order", "sort_order"):
        value, ok = d.get_ok(key)
        if ok:
            setattr(execution, key, value)
    columns, ok = d.get_ok("columns")
    if ok:
        execution.columns = [ViewColumn(id=column_id_from_state(c)) for c in columns]
    view.execution = execution

    restrictions, ok = d.get_ok("restrictions")
    if ok:
        view.restriction = ViewRestriction(type="Group", ids=[int(i) for i in restrictions])
    else:
        view.restriction = None

    conditions = ViewConditions()
    for kind in ("all", "any"):
        raw, ok = d.get_ok(kind)
        if ok:
            setattr(conditions, kind, _conditions_from_state(raw, kind, view.title))
    view.conditions = conditions

    return view


def create_view(d: ResourceData, client) -> None:
    view = client.create_view(unmarshal_view(d))
    d.set_id(str(view.id))
    logger.info(f"Created view {view.id} ({view.title})")
    marshal_view(view, d)


def read_view(d: ResourceData, client) -> None:
    marshal_view(client.get_view(atoi64(d.id)), d)


def update_view(d: ResourceData, client) -> None:
    view = unmarshal_view(d)
    view = client.update_view(atoi64(d.id), view)
    marshal_view(view, d)


def delete_view(d: ResourceData, client) -> None:
    client.delete_view(atoi64(d.id))


RESOURCE = Resource(
    name="zendesk_view",
    description="Provides a view resource.",
    schema={
        "url": computed_string("The API url of this view."),
        "title": string_attr("The title of the view.", required=True),
        "description": string_attr(
            "Describes the purpose of the view.", optional=True, computed=True
        ),
        "position": int_attr(
            "The position of the view. Applied through the bulk position update on every update.",
            optional=True,
            computed=True,
        ),
        "active": bool_attr("Whether the view is active.", optional=True, default=True),
        # at least one of all/any is expected by Zendesk
        "all": view_condition_schema("Logical AND. All the conditions must be met."),
        "any": view_condition_schema("Logical OR. Any condition can be met."),
        "group_title": string_attr("Title of the grouping column.", optional=True, computed=True),
        "sort_title": string_attr("Title of the sorting column.", optional=True, computed=True),
        "group_by": string_attr("Group the tickets by a column in the View columns table.", optional=True),
        "group_order": string_attr("asc or desc", optional=True),
        "sort_by": string_attr("Sort the tickets by a column in the View columns table.", optional=True),
        "sort_order": string_attr("asc or desc", optional=True),
        "columns": Attribute(
            type="list",
            description="Column ids; custom field ids are given as digit strings.",
            optional=True,
            elem="string",
        ),
        "restrictions": Attribute(
            type="set", description="Allowed group ids.", optional=True, elem="int"
        ),
    },
    create=create_view,
    read=read_view,
    update=update_view,
    delete=delete_view,
)
