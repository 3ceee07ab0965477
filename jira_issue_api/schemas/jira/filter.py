from typing import Generic

from pydantic import Field

from jira_issue_api.schemas.base import JiraModel
from jira_issue_api.schemas.jira.user import UserT


class JiraFilterSharedUsers(JiraModel, Generic[UserT]):
    """Paged list of users a filter is shared with. Jira uses kebab-case keys here."""

    size: int | None = None
    max_results: int | None = Field(default=None, alias="max-results")
    start_index: int | None = Field(default=None, alias="start-index")
    end_index: int | None = Field(default=None, alias="end-index")
    items: list[UserT] | None = None


class JiraFilter(JiraModel, Generic[UserT]):
    id: str
    self_ref: str | None = Field(default=None, alias="self")
    name: str | None = None
    description: str | None = None
    owner: UserT | None = None
    jql: str | None = None
    viewUrl: str | None = None
    searchUrl: str | None = None
    favourite: bool | None = None
    sharedUsers: JiraFilterSharedUsers[UserT] | None = None

    def __str__(self) -> str:
        return f"{self.name}: {self.jql}"


class JiraFilterSearchResponse(JiraModel, Generic[UserT]):
    """Page of ``GET filter/search`` (Cloud only)."""

    maxResults: int | None = None
    startAt: int | None = None
    total: int | None = None
    isLast: bool | None = None
    filters: list[JiraFilter[UserT]] | None = Field(default=None, alias="values")
