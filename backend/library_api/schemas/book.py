"""Book Schemas — request body with an explicit author reference, valid-record
rules, and the "summary" view.

Invariants:
    - author_id is read from idAuthor (or authorId); absent, null and -1 all mean "no author"
    - author_id is never copied onto the entity by the generic field mapping;
      services resolve it through the author repository
    - BookRecord requires a non-blank title; coverText is free-form
    - BookSummary nests the author's summary view, or null
"""

from pydantic import AliasChoices, Field, field_validator

from library_api.core.domain_types import NAME_MAX_LENGTH
from library_api.schemas.author import AuthorSummary
from library_api.schemas.base import WireModel


class BookPayload(WireModel):
    """Body of POST/PUT /api/books."""
    title: str | None = None
    cover_text: str | None = None
    author_id: int | None = Field(
        None,
        validation_alias=AliasChoices("idAuthor", "authorId", "author_id"),
    )

    def scalar_fields(self) -> dict:
        """Fields present in the body that map 1:1 onto Book columns."""
        return self.model_dump(exclude_unset=True, exclude={"author_id"})


class BookRecord(WireModel):
    """Valid Book state, checked against the entity before every commit."""
    title: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    cover_text: str | None = None

    @field_validator("title")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title cannot be blank or whitespace")
        return v


class BookSummary(WireModel):
    """Book "summary" view."""
    id: int
    title: str | None
    cover_text: str | None
    author: AuthorSummary | None = None
