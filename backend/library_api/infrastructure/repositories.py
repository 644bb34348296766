"""SQL Repositories — read access and staging for Author and Book over an AsyncSession.

Invariants:
    - Repositories never commit; transaction() in the caller owns the boundary
    - find_by_id returns None for unknown ids (no exceptions for absence), and
      skips the query for ids outside 1..MAX_ROW_ID (out of INTEGER range)
    - find_all is ordered by primary key so list responses are stable

Design Decisions:
    - Thin wrappers over session.get/select: the ORM already is the unit of work,
      these exist so services depend on core.repository_protocols, not on SQLAlchemy
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.core.domain_types import AuthorId, BookId, is_storable_id
from library_api.models import Author, Book


class SqlAuthorRepository:
    """AuthorRepository backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_id(self, author_id: AuthorId) -> Author | None:
        if not is_storable_id(author_id):
            return None
        return await self._db.get(Author, author_id)

    async def find_all(self) -> Sequence[Author]:
        result = await self._db.execute(select(Author).order_by(Author.id))
        return result.scalars().all()

    def add(self, author: Author) -> None:
        self._db.add(author)

    async def remove(self, author: Author) -> None:
        await self._db.delete(author)


class SqlBookRepository:
    """BookRepository backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_id(self, book_id: BookId) -> Book | None:
        if not is_storable_id(book_id):
            return None
        return await self._db.get(Book, book_id)

    async def find_all(self) -> Sequence[Book]:
        result = await self._db.execute(select(Book).order_by(Book.id))
        return result.scalars().all()

    def add(self, book: Book) -> None:
        self._db.add(book)

    async def remove(self, book: Book) -> None:
        await self._db.delete(book)
