from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from jira_issue_api.core.exceptions.domain import DomainValueParseError, RequestValidationError


class JiraModel(BaseModel):
    """Read-only snapshot of a Jira response entity.

    Unknown keys are kept in ``model_extra`` so server-defined fields survive decoding.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_wire(self) -> dict:
        """Dump back to the wire shape, omitting fields the response did not carry."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def as_request_error(error: ValidationError) -> RequestValidationError:
    """Map a pydantic error on caller input to the client's error taxonomy.

    A failed issue key or duration grammar surfaces as the original
    DomainValueParseError; anything else as RequestValidationError.
    """
    for detail in error.errors():
        cause = (detail.get("ctx") or {}).get("error")
        if isinstance(cause, DomainValueParseError):
            return cause
    return RequestValidationError(f"Invalid {error.title}: {error}")


class RequestModel(BaseModel):
    """Caller-built input. Construction failures raise RequestValidationError."""

    model_config = ConfigDict(frozen=True)

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise as_request_error(e) from e


class RequestBody(RequestModel):
    """JSON body sent to Jira. Attributes are snake_case, the wire is camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
