from enum import StrEnum


class SchemaVariant(StrEnum):
    """Deployment flavour of the Jira service. Selected once per client."""

    HOSTED = "hosted"  # Server / Data Center
    CLOUD = "cloud"


API_VERSION = "latest"
API_PREFIX = f"rest/api/{API_VERSION}"

JSON_MEDIA_TYPE = "application/json"

DEFAULT_MAX_QUERY_RESULTS = 50
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_ASSIGNABLE_MAX_RESULTS = 1000

DEFAULT_TRANSITIONS_EXPAND = "transitions.fields"


class DurationSeconds:
    """Seconds per worklog duration unit. Days and weeks are working days/weeks."""

    MINUTE = 60
    HOUR = 60 * 60
    DAY = 8 * HOUR
    WEEK = 5 * DAY


# Headers Jira sets when it silently serves a request as the anonymous user.
SERAPH_LOGIN_REASON_HEADER = "x-seraph-loginreason"
SERAPH_LOGIN_FAILED = "AUTHENTICATED_FAILED"
AUSERNAME_HEADER = "x-ausername"
ANONYMOUS_USERNAME = "anonymous"
