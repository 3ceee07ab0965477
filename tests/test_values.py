"""Tests for jira_issue_api.schemas.jira.values."""

import pytest

from jira_issue_api.core.exceptions.domain import DomainValueParseError, RequestValidationError
from jira_issue_api.schemas.jira.values import IssueKey, WorkDuration


class TestIssueKey:
    """Tests for IssueKey parsing."""

    def test_parse_uppercase(self):
        assert str(IssueKey.parse("PROJ-123")) == "PROJ-123"

    def test_parse_lowercase_is_uppercased(self):
        """Normalizes lowercase keys to uppercase."""
        assert IssueKey.parse("jb-1") == IssueKey("JB-1")

    def test_parse_embedded_in_text(self):
        """Extracts the first key from free text."""
        assert str(IssueKey.parse("see jb-42 for details")) == "JB-42"

    def test_parse_first_of_many(self):
        assert str(IssueKey.parse("PROJ-12 blocks ABC-3")) == "PROJ-12"

    def test_parse_browse_url(self):
        assert str(IssueKey.parse("https://jira.example.com/browse/OPS-7")) == "OPS-7"

    @pytest.mark.parametrize("raw", ["", "123", "A-1", "PROJ-", "-12", "no key here"])
    def test_parse_rejects_text_without_key(self, raw):
        with pytest.raises(DomainValueParseError, match="Malformed issue key"):
            IssueKey.parse(raw)

    def test_direct_construction_requires_canonical_form(self):
        with pytest.raises(DomainValueParseError):
            IssueKey("proj-1")

    def test_parse_error_is_request_validation_error(self):
        """Parse failures are caught by both domain and ValueError handlers."""
        with pytest.raises(RequestValidationError):
            IssueKey.parse("nope")
        with pytest.raises(ValueError):
            IssueKey.parse("nope")

    def test_hashable(self):
        assert len({IssueKey.parse("jb-1"), IssueKey("JB-1")}) == 1

    @pytest.mark.parametrize("raw", ["MY_PROJ-7", "AB2-7"])
    def test_from_server_keeps_key_verbatim(self, raw):
        key = IssueKey.from_server(raw)

        assert str(key) == raw
        assert key == IssueKey.from_server(raw)

    def test_from_server_equals_parsed_key(self):
        assert IssueKey.from_server("PROJ-1") == IssueKey.parse("proj-1")

    def test_from_server_rejects_empty(self):
        with pytest.raises(DomainValueParseError):
            IssueKey.from_server("")


class TestWorkDuration:
    """Tests for WorkDuration parsing."""

    @pytest.mark.parametrize(
        "raw,seconds",
        [
            ("1", "60"),
            ("1m", "60"),
            ("1M", "60"),
            ("1h", "3600"),
            ("1H", "3600"),
            ("2H", "7200"),
            ("1d", "28800"),
            ("1D", "28800"),
            ("1w", "144000"),
            ("1W", "144000"),
            ("1.5h", "5400"),
            ("  30m  ", "1800"),
        ],
    )
    def test_parse_units(self, raw, seconds):
        assert str(WorkDuration.parse(raw)) == seconds

    def test_seconds_property(self):
        assert WorkDuration.parse("2h").seconds == 7200

    @pytest.mark.parametrize("raw", ["", "abc", "h", "-1h"])
    def test_parse_rejects_malformed(self, raw):
        with pytest.raises(DomainValueParseError, match="Malformed worklog duration"):
            WorkDuration.parse(raw)

    def test_direct_construction_requires_digits(self):
        with pytest.raises(DomainValueParseError):
            WorkDuration("1h")
