"""Author ORM — persists a writer that books can be attributed to.

Invariants:
    - id is an integer primary key generated by the store, immutable after insert
    - first_name/last_name must be non-blank (schemas.author.AuthorRecord, not the DB)
    - Deleting an Author never deletes its Books; they are detached instead

Design Decisions:
    - Columns nullable at DB level: PUT can stage a null name, validation rejects
      it before commit, so the violation reaches the client as a 400, not an IntegrityError
    - books loaded with selectin: async sessions cannot lazy-load on attribute access
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.core.domain_types import NAME_MAX_LENGTH
from library_api.db.base import Base


class Author(Base):
    """Author entity — referenced by Book.author, never owns its books."""
    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True,
    )
    last_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True,
    )

    books: Mapped[list["Book"]] = relationship(
        "Book", back_populates="author", lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Author id={self.id} {self.first_name} {self.last_name}>"
