"""Author Schemas — request body, valid-record rules and the "summary" view.

Invariants:
    - AuthorPayload fields are all optional: on PUT only fields present in the
      body overwrite the entity (model_dump(exclude_unset=True))
    - AuthorRecord is what a persisted Author must satisfy: both names present,
      non-blank, at most NAME_MAX_LENGTH characters
    - AuthorSummary exposes exactly id, firstName, lastName (never books)
"""

from pydantic import Field, field_validator

from library_api.core.domain_types import NAME_MAX_LENGTH
from library_api.schemas.base import WireModel


class AuthorPayload(WireModel):
    """Body of POST/PUT /api/authors."""
    first_name: str | None = None
    last_name: str | None = None


class AuthorRecord(WireModel):
    """Valid Author state, checked against the entity before every commit."""
    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator("first_name", "last_name")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be blank or whitespace")
        return v


class AuthorSummary(WireModel):
    """Author "summary" view — also the nested projection inside BookSummary."""
    id: int
    first_name: str | None
    last_name: str | None
