from typing import Generic

from pydantic import Field

from jira_issue_api.schemas.base import JiraModel, RequestBody
from jira_issue_api.schemas.jira.user import UserT


class PostCommentBody(RequestBody):
    body: str


class JiraComment(JiraModel, Generic[UserT]):
    id: str
    self_ref: str | None = Field(default=None, alias="self")
    body: str | None = None
    author: UserT | None = None
    updateAuthor: UserT | None = None
    created: str | None = None
    updated: str | None = None
