from __future__ import annotations

from typing import Any, Generic

from pydantic import Field

from jira_issue_api.schemas.base import JiraModel, RequestBody
from jira_issue_api.schemas.jira.user import UserT
from jira_issue_api.schemas.jira.values import ServerIssueKeyField
from jira_issue_api.schemas.jira.worklog import JiraWorklog


class JiraStatusCategory(JiraModel):
    id: int
    self_ref: str | None = Field(default=None, alias="self")
    key: str | None = None
    colorName: str | None = None
    name: str | None = None


class JiraStatus(JiraModel):
    id: str
    self_ref: str | None = Field(default=None, alias="self")
    description: str | None = None
    iconUrl: str | None = None
    name: str | None = None
    statusCategory: JiraStatusCategory | None = None


class JiraIssueType(JiraModel):
    id: str
    self_ref: str | None = Field(default=None, alias="self")
    description: str | None = None
    iconUrl: str | None = None
    name: str | None = None
    subtask: bool | None = None
    avatarId: int | None = None


class JiraComponent(JiraModel):
    id: str
    name: str | None = None
    self_ref: str | None = Field(default=None, alias="self")


# ─── Subtasks ─────────────────────────────────────────────────────────


class JiraSubtaskFields(JiraModel):
    summary: str | None = None
    status: JiraStatus | None = None
    issuetype: JiraIssueType | None = None


class JiraSubtask(JiraModel):
    id: str | None = None
    key: str
    self_ref: str | None = Field(default=None, alias="self")
    fields: JiraSubtaskFields | None = None


# ─── Issue Fields & Issue ─────────────────────────────────────────────


class JiraIssueFields(JiraModel, Generic[UserT]):
    """All fields are optional: callers choose which fields a query returns.

    Custom fields (``customfield_10020`` etc.) are not declared and end up in
    :attr:`customfields`.
    """

    assignee: UserT | None = None
    components: list[JiraComponent] | None = None
    created: str | None = None
    creator: UserT | None = None
    description: str | None = None
    duedate: str | None = None  # ISO date string "YYYY-MM-DD"
    labels: list[str] | None = None
    lastViewed: str | None = None
    reporter: UserT | None = None
    resolutiondate: str | None = None
    summary: str | None = None
    timeestimate: int | None = None
    timeoriginalestimate: int | None = None
    timespent: int | None = None
    updated: str | None = None
    workratio: int | None = None
    status: JiraStatus | None = None
    subtasks: list[JiraSubtask] | None = None
    worklog: JiraWorklog[UserT] | None = None

    @property
    def customfields(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class JiraIssue(JiraModel, Generic[UserT]):
    key: ServerIssueKeyField
    id: str | int | None = None
    self_ref: str | None = Field(default=None, alias="self")
    expand: str | None = None
    fields: JiraIssueFields[UserT] | None = None
    # Present when expanding "names"
    names: dict[str, str] | None = None

    @property
    def remainder(self) -> dict[str, Any]:
        """Top-level keys the model does not declare (e.g. ``changelog``, ``renderedFields``)."""
        return dict(self.model_extra or {})

    def get_custom_field(self, field_id: str) -> Any:
        if self.fields is None:
            return None
        return self.fields.customfields.get(field_id)

    def __str__(self) -> str:
        summary = self.fields.summary if self.fields else None
        if summary is None:
            summary = "summary is None or missing from query response"
        return f"{self.key} {summary}"


# ─── Search ───────────────────────────────────────────────────────────


class PostIssueQueryBody(RequestBody):
    """Body for ``POST search``. ``expand`` values are camelCase and case-sensitive."""

    jql: str
    start_at: int = 0
    max_results: int
    fields: list[str] | None = None
    expand: list[str] | None = None


class JiraSearchResponse(JiraModel, Generic[UserT]):
    expand: str | None = None
    issues: list[JiraIssue[UserT]] | None = None
    maxResults: int | None = None
    startAt: int | None = None
    total: int | None = None
    # Present when expanding "names"
    names: dict[str, str] | None = None
