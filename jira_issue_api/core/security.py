from base64 import b64encode
from collections.abc import Mapping
from typing import Annotated, Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from jira_issue_api.core.constants import (
    ANONYMOUS_USERNAME,
    AUSERNAME_HEADER,
    JSON_MEDIA_TYPE,
    SERAPH_LOGIN_FAILED,
    SERAPH_LOGIN_REASON_HEADER,
)


class AnonymousCredential(BaseModel):
    """No Authorization header is sent."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["anonymous"] = "anonymous"


class ApiTokenCredential(BaseModel):
    """User email/username and API token, sent as Basic auth."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["api_token"] = "api_token"
    login: str
    token: SecretStr


class PersonalAccessTokenCredential(BaseModel):
    """Personal access token, sent as Bearer auth."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["personal_access_token"] = "personal_access_token"
    token: SecretStr


Credential = Annotated[
    AnonymousCredential | ApiTokenCredential | PersonalAccessTokenCredential,
    Field(discriminator="kind"),
]


def encode_basic_auth(login: str, token: str) -> str:
    """Standard base64 of ``login:token`` without trailing padding."""
    return b64encode(f"{login}:{token}".encode()).decode().rstrip("=")


def build_auth_header(credential: Credential) -> str | None:
    if isinstance(credential, ApiTokenCredential):
        return f"Basic {encode_basic_auth(credential.login, credential.token.get_secret_value())}"
    if isinstance(credential, PersonalAccessTokenCredential):
        return f"Bearer {credential.token.get_secret_value()}"
    return None


def build_headers(credential: Credential) -> dict[str, str]:
    """Default header set for every request issued with this credential."""
    headers = {
        "Accept": JSON_MEDIA_TYPE,
        "Content-Type": JSON_MEDIA_TYPE,
    }
    auth_header = build_auth_header(credential)
    if auth_header is not None:
        headers["Authorization"] = auth_header
    return headers


def is_anonymous_downgrade(headers: Mapping[str, str]) -> bool:
    """Detect a response Jira served as anonymous even though credentials were sent.

    Jira accepts invalid credentials on some endpoints and answers as the anonymous
    user instead of returning 401. The session state is only visible in the
    ``X-Seraph-LoginReason`` and ``X-AUSERNAME`` response headers.
    """
    headers = httpx.Headers(headers)
    return (
        headers.get(SERAPH_LOGIN_REASON_HEADER) == SERAPH_LOGIN_FAILED
        or headers.get(AUSERNAME_HEADER) == ANONYMOUS_USERNAME
    )
