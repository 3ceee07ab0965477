from functools import lru_cache
from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from jira_issue_api.core.config import JiraClientConfig
from jira_issue_api.core.constants import DEFAULT_TRANSITIONS_EXPAND
from jira_issue_api.core.exceptions.domain import (
    AuthenticationError,
    RequestValidationError,
    ResponseDecodeError,
    TransportError,
)
from jira_issue_api.core.logger import sanitize_dict
from jira_issue_api.core.security import AnonymousCredential, build_headers, is_anonymous_downgrade
from jira_issue_api.schemas.base import RequestBody
from jira_issue_api.schemas.jira.comment import JiraComment, PostCommentBody
from jira_issue_api.schemas.jira.field import JiraField
from jira_issue_api.schemas.jira.filter import JiraFilter, JiraFilterSearchResponse
from jira_issue_api.schemas.jira.issue import JiraIssue, JiraSearchResponse, PostIssueQueryBody
from jira_issue_api.schemas.jira.transition import JiraTransitionsResponse, PostTransitionBody
from jira_issue_api.schemas.jira.user import GetAssignableUserParams, JiraUser
from jira_issue_api.schemas.jira.values import IssueKey
from jira_issue_api.schemas.jira.variants import get_schema
from jira_issue_api.schemas.jira.worklog import JiraWorklogItem, PostWorklogBody
from jira_issue_api.services.endpoints import endpoint, expand_query, normalize_base_url


@lru_cache
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class JiraClient:
    """Async client for the Jira REST API, hosted (Server / Data Center) or Cloud.

    The client holds no per-request state and can be shared by concurrent tasks.
    Wire differences between deployments are resolved once, from ``config.variant``.

    Example:
        async with JiraClient(config) as jira:
            page = await jira.search_issues("project = PROJ ORDER BY updated DESC")
    """

    def __init__(
        self,
        config: JiraClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = normalize_base_url(config.url, https_only=config.https_only)
        self.schema = get_schema(config.variant)
        self.max_results = config.max_query_results
        self.anonymous_access = isinstance(config.credential, AnonymousCredential)

        headers = build_headers(config.credential)
        self._client = httpx.AsyncClient(
            headers=headers,
            timeout=httpx.Timeout(float(config.timeout)),
            verify=not config.tls_accept_invalid_certs,
            transport=transport,
        )
        if config.tls_accept_invalid_certs:
            logger.warning(f"TLS certificate validation disabled for {self.base_url}")
        logger.debug(
            f"JiraClient initialized: base_url={self.base_url}, variant={self.schema.variant}, "
            f"headers={sanitize_dict(headers)}"
        )

    async def close(self) -> None:
        if not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ─── Transport ────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        url: httpx.URL,
        *,
        body: RequestBody | None = None,
    ) -> httpx.Response:
        """Send one request. Transport failures are not retried."""
        logger.debug(f"{method} {url}")
        try:
            return await self._client.request(
                method,
                url,
                json=body.to_wire() if body is not None else None,
            )
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e!r}") from e

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return

        error_msg = f"Jira API error: {response.status_code}"
        try:
            error_body = response.json()
            messages = error_body.get("errorMessages") if isinstance(error_body, dict) else None
            if isinstance(messages, list) and messages:
                error_msg += f" - {', '.join(map(str, messages))}"
            elif isinstance(messages, str) and messages:
                error_msg += f" - {messages}"
            elif isinstance(error_body, dict) and error_body.get("errors"):
                error_msg += f" - {error_body['errors']}"
        except ValueError:
            error_msg += f" - {response.text[:200]}"

        logger.warning(f"{response.request.method} {response.request.url}: {error_msg}")
        raise ResponseDecodeError(error_msg, status_code=response.status_code)

    def _decode(self, response: httpx.Response, target: Any) -> Any:
        self._raise_for_status(response)
        try:
            return _adapter(target).validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError(
                f"Unable to parse response: {e}", status_code=response.status_code
            ) from e

    @staticmethod
    def _issue_path(issue_key: IssueKey, suffix: str = "") -> str:
        if not isinstance(issue_key, IssueKey):
            raise RequestValidationError(
                f"Expected an IssueKey, got {type(issue_key).__name__}; use IssueKey.parse()"
            )
        return f"issue/{issue_key}{suffix}"

    # ─── Issues ───────────────────────────────────────────────────────

    async def search_issues(
        self,
        jql: str,
        *,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
    ) -> JiraSearchResponse:
        """Fetch one page of issues matching ``jql``.

        Page size is the client's ``max_query_results``; callers page with ``start_at``.
        """
        url = endpoint(self.base_url, "search")
        body = PostIssueQueryBody(
            jql=jql,
            start_at=start_at,
            max_results=self.max_results,
            fields=fields,
            expand=expand,
        )
        response = await self._request("POST", url, body=body)

        if not self.anonymous_access and is_anonymous_downgrade(response.headers):
            logger.warning("Jira served the search as anonymous - credentials were rejected")
            raise AuthenticationError()

        return self._decode(response, self.schema.search_response_model)

    async def get_issue(self, issue_key: IssueKey, expand: str | None = None) -> JiraIssue:
        """Fetch one issue. ``expand`` may be ``"names,changelog"`` or ``"expand=names"``."""
        url = endpoint(self.base_url, self._issue_path(issue_key), raw_query=expand_query(expand))
        response = await self._request("GET", url)
        return self._decode(response, self.schema.issue_model)

    # ─── Comments & Worklogs ──────────────────────────────────────────

    async def post_comment(self, issue_key: IssueKey, body: PostCommentBody) -> JiraComment:
        url = endpoint(self.base_url, self._issue_path(issue_key, "/comment"))
        response = await self._request("POST", url, body=body)
        return self._decode(response, self.schema.comment_model)

    async def post_worklog(self, issue_key: IssueKey, body: PostWorklogBody) -> JiraWorklogItem:
        """Log work on an issue. Exactly one of time_spent / time_spent_seconds must be set."""
        if (body.time_spent is None) == (body.time_spent_seconds is None):
            raise RequestValidationError(
                "time_spent and time_spent_seconds are both set or both unset"
            )

        url = endpoint(self.base_url, self._issue_path(issue_key, "/worklog"))
        response = await self._request("POST", url, body=body)
        return self._decode(response, self.schema.worklog_model)

    # ─── Transitions ──────────────────────────────────────────────────

    async def get_transitions(
        self,
        issue_key: IssueKey,
        expand: str | None = DEFAULT_TRANSITIONS_EXPAND,
    ) -> JiraTransitionsResponse:
        """List transitions available on an issue.

        Field metadata is expanded by default; pass ``expand=None`` to skip it.
        """
        url = endpoint(
            self.base_url, self._issue_path(issue_key, "/transitions"), raw_query=expand_query(expand)
        )
        response = await self._request("GET", url)
        return self._decode(response, JiraTransitionsResponse)

    async def post_transition(self, issue_key: IssueKey, body: PostTransitionBody) -> None:
        url = endpoint(self.base_url, self._issue_path(issue_key, "/transitions"))
        response = await self._request("POST", url, body=body)
        self._raise_for_status(response)

    # ─── Users ────────────────────────────────────────────────────────

    async def get_assignable_users(self, params: GetAssignableUserParams) -> list[JiraUser]:
        if params.project is None and params.issue_key is None:
            raise RequestValidationError(
                "Both project and issue_key are None, define either to query for assignable users."
            )

        query: dict[str, str | int] = {"maxResults": params.max_results}
        if params.issue_key is not None:
            query["issueKey"] = str(params.issue_key)
        if params.username is not None:
            query[self.schema.assignable_user_param] = params.username
        if params.project is not None:
            query["project"] = params.project

        url = endpoint(self.base_url, "user/assignable/search", params=query)
        response = await self._request("GET", url)
        return self._decode(response, list[self.schema.user_model])

    async def assign_user(self, issue_key: IssueKey, user: JiraUser) -> None:
        body = self.schema.assign_body(user)
        url = endpoint(self.base_url, self._issue_path(issue_key, "/assignee"))
        response = await self._request("PUT", url, body=body)
        self._raise_for_status(response)

    async def get_user(self, user: str) -> JiraUser:
        """Look a user up by username (hosted) or account id (cloud)."""
        url = endpoint(self.base_url, "user", params={self.schema.user_lookup_param: user})
        response = await self._request("GET", url)
        return self._decode(response, self.schema.user_model)

    # ─── Fields & Filters ─────────────────────────────────────────────

    async def get_fields(self) -> list[JiraField]:
        url = endpoint(self.base_url, "field")
        response = await self._request("GET", url)
        return self._decode(response, list[JiraField])

    async def get_filter(self, filter_id: str | int) -> JiraFilter:
        filter_id = str(filter_id)
        if not filter_id.isdigit():
            raise RequestValidationError(f"Filter id must be numeric, got {filter_id!r}")

        url = endpoint(self.base_url, f"filter/{filter_id}")
        response = await self._request("GET", url)
        return self._decode(response, self.schema.filter_model)

    async def search_filters(self, filter_name: str | None = None) -> JiraFilterSearchResponse:
        """Search saved filters by name, with their JQL expanded. Jira Cloud only."""
        params = self.schema.filter_search_params(filter_name, self.max_results)
        url = endpoint(self.base_url, "filter/search", params=params)
        response = await self._request("GET", url)
        return self._decode(response, self.schema.filter_search_model)
