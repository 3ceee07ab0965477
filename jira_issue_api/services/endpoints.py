from collections.abc import Mapping

import httpx

from jira_issue_api.core.constants import API_PREFIX
from jira_issue_api.core.exceptions.domain import UrlBuildError

QueryParams = Mapping[str, str | int]


def normalize_base_url(raw_url: str, *, https_only: bool = True) -> httpx.URL:
    """Reduce a user-supplied Jira URL to ``scheme://host[:port]/``.

    Any path, query or fragment is dropped; request paths are always built from the
    server root.
    """
    try:
        url = httpx.URL(raw_url.strip())
    except (httpx.InvalidURL, TypeError) as e:
        raise UrlBuildError(f"Unable to parse Jira URL {raw_url!r}: {e}") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise UrlBuildError(f"Jira URL must be absolute http(s), got {raw_url!r}")
    if https_only and url.scheme != "https":
        raise UrlBuildError(f"Jira URL must use https, got {raw_url!r}")

    return httpx.URL(scheme=url.scheme, host=url.host, port=url.port, path="/")


def endpoint(
    base_url: httpx.URL,
    path: str,
    *,
    params: QueryParams | None = None,
    raw_query: str | None = None,
) -> httpx.URL:
    """Build ``<base>/rest/api/latest/<path>`` with an optional query.

    ``raw_query`` is used verbatim (already encoded); ``params`` are encoded. The base
    URL never carries a query of its own, so nothing is merged.
    """
    try:
        url = base_url.join(f"{API_PREFIX}/{path}")
        if raw_query:
            url = url.copy_with(query=raw_query.encode())
        elif params:
            url = url.copy_with(params=dict(params))
    except httpx.InvalidURL as e:
        raise UrlBuildError(f"Unable to build URL for {path!r}: {e}") from e
    return url


def expand_query(expand: str | None) -> str | None:
    """Prefix ``expand=`` unless the caller already passed a query fragment."""
    if expand is None:
        return None
    if expand.startswith("expand="):
        return expand
    return f"expand={expand}"
