"""Validated value types parsed from loosely formatted user input."""

from __future__ import annotations

import re
from dataclasses import InitVar, dataclass
from typing import Annotated

from pydantic import PlainSerializer, PlainValidator

from jira_issue_api.core.constants import DurationSeconds
from jira_issue_api.core.exceptions.domain import DomainValueParseError

ISSUE_KEY_RE = re.compile(r"[A-Z]{2,}-[0-9]+")
WORK_DURATION_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)([WwDdHhMm]?)")

_UNIT_SECONDS: dict[str, int] = {
    "": DurationSeconds.MINUTE,  # unit omitted
    "m": DurationSeconds.MINUTE,
    "h": DurationSeconds.HOUR,
    "d": DurationSeconds.DAY,
    "w": DurationSeconds.WEEK,
}


@dataclass(frozen=True)
class IssueKey:
    """Jira issue key such as ``PROJ-123``.

    Caller input goes through :meth:`parse`. Keys returned by Jira are taken
    verbatim with :meth:`from_server`, since project keys may carry digits or
    underscores (``AB2-7``, ``MY_PROJ-7``).
    """

    value: str
    checked: InitVar[bool] = True

    def __post_init__(self, checked: bool) -> None:
        if checked and not ISSUE_KEY_RE.fullmatch(self.value):
            raise DomainValueParseError(f"Malformed issue key supplied: {self.value!r}")

    @classmethod
    def parse(cls, raw: str) -> IssueKey:
        """Extract the first issue key found in ``raw``, case-insensitively.

        Keys embedded in free text are accepted, so ``"see jb-42 for details"``
        parses to ``JB-42``.
        """
        match = ISSUE_KEY_RE.search(raw.upper())
        if match is None:
            raise DomainValueParseError(f"Malformed issue key supplied: {raw!r}")
        return cls(match.group(0))

    @classmethod
    def from_server(cls, raw: str) -> IssueKey:
        if not raw:
            raise DomainValueParseError("Issue key in response is empty")
        return cls(raw, checked=False)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkDuration:
    """Worklog duration in whole seconds, kept as text the way Jira expects it."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.isdigit():
            raise DomainValueParseError(f"Malformed worklog duration: {self.value!r}")

    @classmethod
    def parse(cls, raw: str) -> WorkDuration:
        """Convert ``<number>[m|h|d|w]`` to seconds. The unit defaults to minutes.

        A day is 8 hours and a week is 5 days, matching Jira's default time
        tracking settings.
        """
        match = WORK_DURATION_RE.match(raw.strip())
        if match is None:
            raise DomainValueParseError(f"Malformed worklog duration: {raw!r}")

        number, unit = match.groups()
        seconds = float(number) * _UNIT_SECONDS[unit.lower()]
        return cls(f"{seconds:.0f}")

    @property
    def seconds(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return self.value


def _coerce_issue_key(value: object) -> IssueKey:
    if isinstance(value, IssueKey):
        return value
    if not isinstance(value, str):
        raise DomainValueParseError(f"Issue key must be a string, got {type(value).__name__}")
    return IssueKey.parse(value)


def _issue_key_from_server(value: object) -> IssueKey:
    if isinstance(value, IssueKey):
        return value
    if not isinstance(value, str):
        raise DomainValueParseError(f"Issue key must be a string, got {type(value).__name__}")
    return IssueKey.from_server(value)


def _coerce_work_duration(value: object) -> WorkDuration:
    if isinstance(value, WorkDuration):
        return value
    # Only text is parsed; a bare number would otherwise be read as minutes.
    if not isinstance(value, str):
        raise DomainValueParseError(
            f"Worklog duration must be a string such as '60m' or a WorkDuration, got {type(value).__name__}"
        )
    return WorkDuration.parse(value)


# Field types for pydantic models; all serialize back to their plain string.
IssueKeyField = Annotated[
    IssueKey,
    PlainValidator(_coerce_issue_key),
    PlainSerializer(str, return_type=str),
]
# Response side: the server's key is kept exactly as sent.
ServerIssueKeyField = Annotated[
    IssueKey,
    PlainValidator(_issue_key_from_server),
    PlainSerializer(str, return_type=str),
]
WorkDurationField = Annotated[
    WorkDuration,
    PlainValidator(_coerce_work_duration),
    PlainSerializer(str, return_type=str),
]
