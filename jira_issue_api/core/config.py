from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_issue_api.core.constants import (
    DEFAULT_MAX_QUERY_RESULTS,
    DEFAULT_TIMEOUT_SECONDS,
    SchemaVariant,
)
from jira_issue_api.core.security import (
    AnonymousCredential,
    ApiTokenCredential,
    Credential,
    PersonalAccessTokenCredential,
)


class JiraClientConfig(BaseModel):
    """Immutable settings consumed once by JiraClient.

    Example:
        config = JiraClientConfig(
            credential=ApiTokenCredential(login="user@example.com", token="xxxxxxx"),
            url="https://domain.atlassian.net",
            variant=SchemaVariant.CLOUD,
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    credential: Credential = Field(default_factory=AnonymousCredential)
    url: str
    max_query_results: PositiveInt = DEFAULT_MAX_QUERY_RESULTS
    timeout: PositiveInt = Field(default=DEFAULT_TIMEOUT_SECONDS, description="Request timeout in seconds")
    tls_accept_invalid_certs: bool = Field(
        default=False,
        description="Skip TLS certificate validation. Explicit opt-in only.",
    )
    https_only: bool = True
    variant: SchemaVariant = SchemaVariant.HOSTED


class Settings(BaseSettings):
    """Environment-driven settings for applications embedding the client."""

    model_config = SettingsConfigDict(
        env_prefix="JIRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(description="Jira base URL, e.g. https://domain.atlassian.net")
    variant: SchemaVariant = SchemaVariant.HOSTED

    # Credentials
    login: str | None = None
    token: SecretStr | None = None
    personal_access_token: SecretStr | None = None

    max_query_results: PositiveInt = DEFAULT_MAX_QUERY_RESULTS
    timeout: PositiveInt = DEFAULT_TIMEOUT_SECONDS
    tls_accept_invalid_certs: bool = False

    debug: bool = Field(default=False)

    @property
    def credential(self) -> Credential:
        if self.personal_access_token:
            return PersonalAccessTokenCredential(token=self.personal_access_token)
        if self.login and self.token:
            return ApiTokenCredential(login=self.login, token=self.token)
        return AnonymousCredential()

    def to_client_config(self) -> JiraClientConfig:
        return JiraClientConfig(
            credential=self.credential,
            url=self.url,
            max_query_results=self.max_query_results,
            timeout=self.timeout,
            tls_accept_invalid_certs=self.tls_accept_invalid_certs,
            variant=self.variant,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore
