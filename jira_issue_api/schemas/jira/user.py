from typing import TypeVar

from pydantic import Field

from jira_issue_api.core.constants import DEFAULT_ASSIGNABLE_MAX_RESULTS
from jira_issue_api.schemas.base import JiraModel, RequestBody, RequestModel
from jira_issue_api.schemas.jira.values import IssueKeyField


class HostedUser(JiraModel):
    """Jira Server / Data Center user. Identified by ``name``."""

    active: bool
    displayName: str
    deleted: bool | None = None
    name: str
    key: str | None = None
    emailAddress: str | None = None
    avatarUrls: dict[str, str] | None = None
    timeZone: str | None = None

    def __str__(self) -> str:
        return f"{self.displayName} ({self.name})"


class CloudUser(JiraModel):
    """Jira Cloud user. Identified by ``accountId``."""

    active: bool
    displayName: str
    accountId: str
    # Hidden by Cloud profile visibility settings for most callers.
    emailAddress: str | None = None
    accountType: str | None = None
    avatarUrls: dict[str, str] | None = None
    timeZone: str | None = None

    def __str__(self) -> str:
        return f"{self.displayName} ({self.accountId})"

    @property
    def avatar_48(self) -> str | None:
        if self.avatarUrls:
            return self.avatarUrls.get("48x48")
        return None


JiraUser = HostedUser | CloudUser
UserT = TypeVar("UserT", HostedUser, CloudUser)


class HostedAssignBody(RequestBody):
    name: str


class CloudAssignBody(RequestBody):
    account_id: str


class GetAssignableUserParams(RequestModel):
    """Query for ``user/assignable/search``. Either project or issue_key is required."""

    username: str | None = None
    project: str | None = None
    issue_key: IssueKeyField | None = None
    max_results: int = Field(default=DEFAULT_ASSIGNABLE_MAX_RESULTS, gt=0)
