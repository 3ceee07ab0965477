from jira_issue_api.core.exceptions.base import JiraClientError


class TransportError(JiraClientError):
    """Raised when the request never produced a response (connection, TLS, timeout)."""

    def __init__(self, message: str = "Request to Jira failed"):
        super().__init__(message)


class UrlBuildError(JiraClientError):
    """Raised when the base URL or a joined endpoint URL cannot be parsed."""

    def __init__(self, message: str = "Unable to build Jira URL"):
        super().__init__(message)


class RequestValidationError(JiraClientError):
    """Raised before sending when caller-supplied data violates a precondition."""

    def __init__(self, message: str = "Request body malformed or invalid"):
        super().__init__(message)


class DomainValueParseError(RequestValidationError, ValueError):
    """Raised when an issue key or worklog duration does not match its grammar."""

    def __init__(self, message: str = "Unable to parse value"):
        super().__init__(message)


class AuthenticationError(JiraClientError):
    """Raised when Jira accepted the request but served it as the anonymous user."""

    def __init__(
        self, message: str = "Jira authentication failed - request was served as anonymous"
    ):
        super().__init__(message)


class ResponseDecodeError(JiraClientError):
    """Raised when a response is not a success or its body does not match the expected shape."""

    def __init__(self, message: str = "Unable to parse Jira response", status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
