from typing import Generic

from pydantic import Field

from jira_issue_api.schemas.base import JiraModel, RequestBody
from jira_issue_api.schemas.jira.user import UserT
from jira_issue_api.schemas.jira.values import WorkDurationField


class PostWorklogBody(RequestBody):
    """Body for ``POST issue/{key}/worklog``.

    Exactly one of ``time_spent`` (Jira duration notation, e.g. ``"3h 20m"``) or
    ``time_spent_seconds`` must be set; the client rejects anything else before sending.
    """

    comment: str
    started: str  # e.g. "2024-01-31T09:00:00.000+0000"
    time_spent: str | None = None
    time_spent_seconds: WorkDurationField | None = None


class JiraWorklogItem(JiraModel, Generic[UserT]):
    id: str
    self_ref: str | None = Field(default=None, alias="self")
    author: UserT | None = None
    updateAuthor: UserT | None = None
    comment: str | None = None
    created: str | None = None
    updated: str | None = None
    started: str | None = None
    timeSpent: str | None = None
    timeSpentSeconds: int | None = None
    issueId: str | None = None


class JiraWorklog(JiraModel, Generic[UserT]):
    """Worklog container embedded in issue fields."""

    startAt: int | None = None
    maxResults: int | None = None
    total: int | None = None
    worklogs: list[JiraWorklogItem[UserT]] | None = None
