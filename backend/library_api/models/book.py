"""Book ORM — persists a title, optionally attributed to an Author.

Invariants:
    - author_id is nullable: a book with no (or an unknown) author is valid
    - FK is ON DELETE SET NULL so a raw DELETE on authors detaches, never cascades
    - title must be non-blank (schemas.book.BookRecord)

Design Decisions:
    - author loaded with selectin: serializing BookSummary reads book.author
      outside any lazy-load context
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.core.domain_types import NAME_MAX_LENGTH
from library_api.db.base import Base


class Book(Base):
    """Book entity — references at most one Author."""
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True,
    )
    cover_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("authors.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )

    author: Mapped[Optional["Author"]] = relationship(
        "Author", back_populates="books", lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} {self.title!r}>"
