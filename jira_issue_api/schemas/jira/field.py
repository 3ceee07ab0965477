from enum import StrEnum

from pydantic import Field

from jira_issue_api.schemas.base import JiraModel


class FieldSchemaType(StrEnum):
    ANY = "any"
    ARRAY = "array"
    ATTACHMENT = "attachment"
    COMMENTS_PAGE = "comments-page"
    COMPONENT = "component"
    DATE = "date"
    DATETIME = "datetime"
    ISSUELINKS = "issuelinks"
    ISSUETYPE = "issuetype"
    NUMBER = "number"
    OPTION = "option"
    PRIORITY = "priority"
    PROGRESS = "progress"
    PROJECT = "project"
    RESOLUTION = "resolution"
    SECURITYLEVEL = "securitylevel"
    STATUS = "status"
    STRING = "string"
    TIMETRACKING = "timetracking"
    USER = "user"
    VERSION = "version"
    VOTES = "votes"
    WATCHES = "watches"
    WORKLOG = "worklog"


class JiraFieldSchema(JiraModel):
    """Schema of a field. Types outside :class:`FieldSchemaType` (plugin fields) are kept as plain strings."""

    type: str | None = None
    items: str | None = None
    system: str | None = None
    custom: str | None = None
    customId: int | None = None

    @property
    def schema_type(self) -> FieldSchemaType | str | None:
        if self.type is None:
            return None
        try:
            return FieldSchemaType(self.type)
        except ValueError:
            return self.type


class JiraField(JiraModel):
    """Field metadata from ``GET field``."""

    id: str
    name: str | None = None
    custom: bool | None = None
    orderable: bool | None = None
    navigable: bool | None = None
    searchable: bool | None = None
    clauseNames: list[str] | None = None
    schema_: JiraFieldSchema | None = Field(default=None, alias="schema")
