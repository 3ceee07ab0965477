"""Shared fixtures: a recording fake Jira server and ready-made client configs.

If pytest is invoked outside the project's virtualenv we still add the project root
to sys.path so ``import jira_issue_api`` works.
"""

from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jira_issue_api.core.config import JiraClientConfig  # noqa: E402
from jira_issue_api.core.constants import SchemaVariant  # noqa: E402
from jira_issue_api.core.security import (  # noqa: E402
    AnonymousCredential,
    ApiTokenCredential,
)
from jira_issue_api.services.jira_client import JiraClient  # noqa: E402

from payloads import API, BASE_URL  # noqa: E402


class FakeJira:
    """Records every request and answers from a (method, path) route table."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response | Exception] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: object = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if content is not None:
            response = httpx.Response(status, content=content, headers=headers)
        elif json is not None:
            response = httpx.Response(status, json=json, headers=headers)
        else:
            response = httpx.Response(status, headers=headers)
        self._routes[(method, f"{API}/{path}")] = response

    def fail(self, method: str, path: str, error: Exception) -> None:
        self._routes[(method, f"{API}/{path}")] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"errorMessages": ["No route"], "errors": {}})
        if isinstance(route, Exception):
            raise route
        return route

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fake_jira() -> FakeJira:
    return FakeJira()


@pytest.fixture
def api_token() -> ApiTokenCredential:
    return ApiTokenCredential(login="jdoe@example.com", token="s3cr3t")


@pytest.fixture
def hosted_client(fake_jira: FakeJira, api_token: ApiTokenCredential) -> JiraClient:
    config = JiraClientConfig(credential=api_token, url=BASE_URL, variant=SchemaVariant.HOSTED)
    return JiraClient(config, transport=fake_jira.transport)


@pytest.fixture
def cloud_client(fake_jira: FakeJira, api_token: ApiTokenCredential) -> JiraClient:
    config = JiraClientConfig(credential=api_token, url=BASE_URL, variant=SchemaVariant.CLOUD)
    return JiraClient(config, transport=fake_jira.transport)


@pytest.fixture
def anonymous_client(fake_jira: FakeJira) -> JiraClient:
    config = JiraClientConfig(credential=AnonymousCredential(), url=BASE_URL)
    return JiraClient(config, transport=fake_jira.transport)
