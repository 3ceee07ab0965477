"""Tests for base URL normalization and endpoint construction."""

import pytest

from jira_issue_api.core.exceptions.domain import UrlBuildError
from jira_issue_api.services.endpoints import endpoint, expand_query, normalize_base_url


class TestNormalizeBaseUrl:
    def test_strips_path_query_and_fragment(self):
        url = normalize_base_url("https://jira.example.com/secure/Dashboard.jspa?x=1#top")

        assert str(url) == "https://jira.example.com/"

    def test_keeps_port(self):
        url = normalize_base_url("https://jira.example.com:8443/jira")

        assert str(url) == "https://jira.example.com:8443/"

    def test_plain_http_rejected_by_default(self):
        with pytest.raises(UrlBuildError, match="https"):
            normalize_base_url("http://jira.example.com")

    def test_plain_http_allowed_when_opted_in(self):
        url = normalize_base_url("http://jira.example.com", https_only=False)

        assert str(url) == "http://jira.example.com/"

    @pytest.mark.parametrize("raw", ["jira.example.com", "ftp://jira.example.com", "https://"])
    def test_rejects_non_http_urls(self, raw):
        with pytest.raises(UrlBuildError):
            normalize_base_url(raw)


class TestEndpoint:
    BASE = normalize_base_url("https://jira.example.com/ignored/path")

    def test_joins_api_prefix(self):
        assert str(endpoint(self.BASE, "search")) == "https://jira.example.com/rest/api/latest/search"

    def test_raw_query_is_verbatim(self):
        url = endpoint(self.BASE, "issue/PROJ-1", raw_query="expand=names,changelog")

        assert str(url) == "https://jira.example.com/rest/api/latest/issue/PROJ-1?expand=names,changelog"

    def test_params_are_encoded_in_order(self):
        url = endpoint(self.BASE, "user", params={"username": "jdoe", "maxResults": 5})

        assert url.params["username"] == "jdoe"
        assert url.query == b"username=jdoe&maxResults=5"

    def test_no_query(self):
        assert endpoint(self.BASE, "field").query == b""


class TestExpandQuery:
    def test_none(self):
        assert expand_query(None) is None

    def test_adds_prefix(self):
        assert expand_query("names") == "expand=names"

    def test_keeps_existing_prefix(self):
        assert expand_query("expand=names") == "expand=names"
