from typing import Any

from pydantic import Field

from jira_issue_api.schemas.base import JiraModel, RequestBody


class JiraTransitionAllowedValue(JiraModel):
    id: str | None = None
    self_ref: str | None = Field(default=None, alias="self")
    name: str | None = None
    value: str | None = None

    def __str__(self) -> str:
        return self.value or self.name or self.id or ""


class JiraTransitionFieldSchema(JiraModel):
    type: str | None = None
    items: str | None = None
    custom: str | None = None
    customId: int | None = None
    system: str | None = None


class JiraTransitionField(JiraModel):
    """Metadata of a field shown on a transition screen (``expand=transitions.fields``)."""

    required: bool | None = None
    name: str | None = None
    key: str | None = None
    operations: list[str] | None = None
    schema_: JiraTransitionFieldSchema | None = Field(default=None, alias="schema")
    allowedValues: list[str | JiraTransitionAllowedValue] | None = None
    hasDefaultValue: bool | None = None
    defaultValue: Any = None


class JiraTransition(JiraModel):
    id: str
    name: str | None = None
    fields: dict[str, JiraTransitionField] | None = None

    @property
    def required_fields(self) -> dict[str, JiraTransitionField]:
        return {k: v for k, v in (self.fields or {}).items() if v.required}

    def __str__(self) -> str:
        return self.name or self.id


class JiraTransitionsResponse(JiraModel):
    expand: str | None = None
    transitions: list[JiraTransition] | None = None


# ─── Request bodies ───────────────────────────────────────────────────


class PostTransitionIdBody(RequestBody):
    id: str


class PostTransitionFieldBody(RequestBody):
    name: str


class PostTransitionUpdateField(RequestBody):
    """Field update operations, keyed by field id."""

    add: dict[str, list[str]] | None = None
    copy_: dict[str, list[str]] | None = Field(default=None, alias="copy")
    edit: dict[str, list[str]] | None = None
    remove: dict[str, list[str]] | None = None
    set: dict[str, list[str]] | None = None


class PostTransitionBody(RequestBody):
    transition: PostTransitionIdBody
    fields: dict[str, PostTransitionFieldBody] | None = None
    update: PostTransitionUpdateField | None = None

    @classmethod
    def to(cls, transition_id: str, **kwargs) -> "PostTransitionBody":
        return cls(transition=PostTransitionIdBody(id=transition_id), **kwargs)
