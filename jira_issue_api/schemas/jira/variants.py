"""Per-deployment wire shapes.

Jira Server / Data Center and Jira Cloud expose the same logical operations with
incompatible user payloads: hosted users are keyed by ``name``, cloud users by
``accountId``. Each variant is a :class:`JiraSchema` picked once when the client is
built; operations never branch on the variant themselves.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from jira_issue_api.core.constants import SchemaVariant
from jira_issue_api.core.exceptions.domain import RequestValidationError
from jira_issue_api.schemas.base import RequestBody
from jira_issue_api.schemas.jira.comment import JiraComment
from jira_issue_api.schemas.jira.filter import JiraFilter, JiraFilterSearchResponse
from jira_issue_api.schemas.jira.issue import JiraIssue, JiraSearchResponse
from jira_issue_api.schemas.jira.user import (
    CloudAssignBody,
    CloudUser,
    HostedAssignBody,
    HostedUser,
    JiraUser,
)
from jira_issue_api.schemas.jira.worklog import JiraWorklogItem


class JiraSchema(ABC):
    variant: ClassVar[SchemaVariant]

    # Decode targets, parametrized with the variant's user model
    user_model: ClassVar[type[JiraUser]]
    issue_model: ClassVar[type[JiraIssue]]
    search_response_model: ClassVar[type[JiraSearchResponse]]
    comment_model: ClassVar[type[JiraComment]]
    worklog_model: ClassVar[type[JiraWorklogItem]]
    filter_model: ClassVar[type[JiraFilter]]
    filter_search_model: ClassVar[type[JiraFilterSearchResponse] | None] = None

    # Query parameter naming the user in GET user and user/assignable/search
    user_lookup_param: ClassVar[str]
    assignable_user_param: ClassVar[str]

    def _check_user(self, user: JiraUser) -> None:
        if not isinstance(user, self.user_model):
            raise RequestValidationError(
                f"{type(user).__name__} cannot be used with a {self.variant} Jira deployment"
            )

    @abstractmethod
    def user_key(self, user: JiraUser) -> str:
        """Identifier Jira uses to look this user up."""

    @abstractmethod
    def assign_body(self, user: JiraUser) -> RequestBody:
        """Body for ``PUT issue/{key}/assignee``."""

    @abstractmethod
    def filter_search_params(self, filter_name: str | None, max_results: int) -> dict[str, str | int]:
        """Query for ``GET filter/search``."""


class HostedSchema(JiraSchema):
    variant = SchemaVariant.HOSTED

    user_model = HostedUser
    issue_model = JiraIssue[HostedUser]
    search_response_model = JiraSearchResponse[HostedUser]
    comment_model = JiraComment[HostedUser]
    worklog_model = JiraWorklogItem[HostedUser]
    filter_model = JiraFilter[HostedUser]

    user_lookup_param = "username"
    assignable_user_param = "username"

    def user_key(self, user: JiraUser) -> str:
        self._check_user(user)
        return user.name

    def assign_body(self, user: JiraUser) -> HostedAssignBody:
        return HostedAssignBody(name=self.user_key(user))

    def filter_search_params(self, filter_name: str | None, max_results: int) -> dict[str, str | int]:
        raise RequestValidationError("Filter search is only available on Jira Cloud")


class CloudSchema(JiraSchema):
    variant = SchemaVariant.CLOUD

    user_model = CloudUser
    issue_model = JiraIssue[CloudUser]
    search_response_model = JiraSearchResponse[CloudUser]
    comment_model = JiraComment[CloudUser]
    worklog_model = JiraWorklogItem[CloudUser]
    filter_model = JiraFilter[CloudUser]
    filter_search_model = JiraFilterSearchResponse[CloudUser]

    user_lookup_param = "accountId"
    assignable_user_param = "query"

    def user_key(self, user: JiraUser) -> str:
        self._check_user(user)
        return user.accountId

    def assign_body(self, user: JiraUser) -> CloudAssignBody:
        return CloudAssignBody(account_id=self.user_key(user))

    def filter_search_params(self, filter_name: str | None, max_results: int) -> dict[str, str | int]:
        params: dict[str, str | int] = {"expand": "jql", "maxResults": max_results}
        if filter_name:
            params["filterName"] = filter_name
        return params


_SCHEMAS: dict[SchemaVariant, JiraSchema] = {
    SchemaVariant.HOSTED: HostedSchema(),
    SchemaVariant.CLOUD: CloudSchema(),
}


def get_schema(variant: SchemaVariant) -> JiraSchema:
    return _SCHEMAS[SchemaVariant(variant)]
