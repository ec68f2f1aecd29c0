"""Pydantic models for the Zendesk payloads the provider reads and writes."""
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ZendeskModel(BaseModel):
    """Base model: unknown response keys are ignored, unset keys are never sent."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    READ_ONLY: ClassVar[frozenset[str]] = frozenset({"id", "url", "created_at", "updated_at"})

    def to_payload(self) -> Dict[str, Any]:
        """Request body for POST/PUT, without read-only and unset attributes."""
        return self.model_dump(mode="json", exclude_none=True, exclude=set(self.READ_ONLY))


class Ticket(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    external_id: Optional[str] = None
    type: Optional[str] = None  # question, incident, problem, task
    subject: Optional[str] = None
    raw_subject: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None  # urgent, high, normal, low
    status: Optional[str] = None  # new, open, pending, hold, solved, closed
    recipient: Optional[str] = None
    requester_id: Optional[int] = None
    submitter_id: Optional[int] = None
    assignee_id: Optional[int] = None
    organization_id: Optional[int] = None
    group_id: Optional[int] = None
    collaborator_ids: Optional[List[int]] = None
    follower_ids: Optional[List[int]] = None
    problem_id: Optional[int] = None
    due_at: Optional[str] = None
    tags: Optional[List[str]] = None
    custom_fields: Optional[List[Dict[str, Any]]] = None
    ticket_form_id: Optional[int] = None
    brand_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class User(ZendeskModel):
    READ_ONLY: ClassVar[frozenset[str]] = frozenset(
        {"id", "url", "created_at", "updated_at", "last_login_at", "verified"}
    )

    id: Optional[int] = None
    url: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    active: Optional[bool] = None
    verified: Optional[bool] = None
    shared: Optional[bool] = None
    locale_id: Optional[int] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    last_login_at: Optional[str] = None
    phone: Optional[str] = None
    signature: Optional[str] = None
    details: Optional[str] = None
    notes: Optional[str] = None
    organization_id: Optional[int] = None
    role: Optional[str] = None  # end-user, agent, admin
    custom_role_id: Optional[int] = None
    moderator: Optional[bool] = None
    ticket_restriction: Optional[str] = None
    only_private_comments: Optional[bool] = None
    tags: Optional[List[str]] = None
    external_id: Optional[str] = None
    alias: Optional[str] = None
    user_fields: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CustomRole(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    role_type: Optional[int] = None
    configuration: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CustomStatus(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    status_category: Optional[str] = None  # new, open, pending, hold, solved
    agent_label: Optional[str] = None
    end_user_label: Optional[str] = None
    description: Optional[str] = None
    default: Optional[bool] = None
    active: Optional[bool] = None
    end_user_hidden: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Queue(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    definition: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class GroupMembership(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    user_id: Optional[int] = None
    group_id: Optional[int] = None
    default: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OrganizationMembership(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    user_id: Optional[int] = None
    organization_id: Optional[int] = None
    default: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Locale(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    locale: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Tag(ZendeskModel):
    name: str
    count: Optional[int] = None


class SatisfactionRating(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    assignee_id: Optional[int] = None
    group_id: Optional[int] = None
    requester_id: Optional[int] = None
    ticket_id: Optional[int] = None
    score: Optional[str] = None  # offered, unoffered, good, bad
    reason: Optional[str] = None
    reason_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OAuthClient(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    name: Optional[str] = None
    identifier: Optional[str] = None
    secret: Optional[str] = None
    redirect_uri: Optional[Union[List[str], str]] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class WebhookAuthentication(ZendeskModel):
    type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    add_position: Optional[str] = None


class Webhook(ZendeskModel):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    endpoint: Optional[str] = None
    http_method: Optional[str] = None
    request_format: Optional[str] = None
    status: Optional[str] = None
    subscriptions: List[str] = Field(default_factory=list)
    authentication: Optional[WebhookAuthentication] = None
    created_at: Optional[str] = None
    created_by: Optional[str] = None
    updated_at: Optional[str] = None
    updated_by: Optional[str] = None


class MacroAction(ZendeskModel):
    field: str
    value: Any = None  # a string, or a list for multi-value actions


class Macro(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    position: Optional[int] = None
    active: Optional[bool] = None
    restriction: Optional[Dict[str, Any]] = None
    actions: List[MacroAction] = Field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# Views are read in one shape and written in another:
# GET returns conditions/execution, POST and PUT expect all/any/output.

class ViewCondition(ZendeskModel):
    field: str
    operator: str
    value: Any = None


class ViewColumn(ZendeskModel):
    # integer for custom fields, string for standard fields
    id: Union[int, str]
    title: Optional[str] = None


class ViewRestriction(ZendeskModel):
    type: str = "Group"
    ids: List[int] = Field(default_factory=list)
    id: Optional[int] = None


class ViewConditions(ZendeskModel):
    all: List[ViewCondition] = Field(default_factory=list)
    any: List[ViewCondition] = Field(default_factory=list)


class ViewExecution(ZendeskModel):
    columns: List[ViewColumn] = Field(default_factory=list)
    group_by: Optional[str] = None
    sort_by: Optional[str] = None
    group_order: Optional[str] = None
    sort_order: Optional[str] = None
    # read-only descriptions of the grouping/sorting column: {id, title, order}
    group: Optional[Dict[str, Any]] = None
    sort: Optional[Dict[str, Any]] = None


class View(ZendeskModel):
    id: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    position: Optional[int] = None
    active: bool = True
    restriction: Optional[ViewRestriction] = None
    conditions: ViewConditions = Field(default_factory=ViewConditions)
    execution: ViewExecution = Field(default_factory=ViewExecution)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Write shape: flattened conditions, execution renamed to output."""
        output: Dict[str, Any] = {"columns": [column.id for column in self.execution.columns]}
        for key in ("group_by", "sort_by", "group_order", "sort_order"):
            value = getattr(self.execution, key)
            if value:
                output[key] = value

        payload: Dict[str, Any] = {
            "title": self.title,
            "description": self.description or "",
            "active": self.active,
            "all": [c.model_dump(mode="json") for c in self.conditions.all],
            "any": [c.model_dump(mode="json") for c in self.conditions.any],
            "output": output,
            "restriction": (
                self.restriction.model_dump(mode="json", exclude_none=True)
                if self.restriction is not None else None
            ),
        }
        if self.position is not None:
            payload["position"] = self.position
        return payload


class ViewPosition(ZendeskModel):
    id: int
    position: int
