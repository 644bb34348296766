"""Book Handlers — list/get/create/update/delete orchestration for Book.

Invariants:
    - Every write runs inside one transaction(): commit on success, rollback on
      validation or persistence error
    - The author reference is resolved once per write from payload.author_id;
      absent, null, NO_AUTHOR and unknown ids all yield "no author" (never a 400)
    - PUT re-resolves the author unconditionally: omitting idAuthor clears it
    - Unknown book ids raise ResourceNotFoundError before any mutation

Design Decisions:
    - Scalar fields go through the generic payload mapping; the relationship goes
      through resolve_author, because a bare id cannot be mapped onto Book.author
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from library_api.core.domain_types import NO_AUTHOR, AuthorId, BookId
from library_api.core.errors import ResourceNotFoundError
from library_api.core.repository_protocols import AuthorRepository, BookRepository
from library_api.core.validation import ensure_valid
from library_api.infrastructure.database import transaction
from library_api.infrastructure.repositories import (
    SqlAuthorRepository, SqlBookRepository,
)
from library_api.models import Author, Book
from library_api.schemas.book import BookPayload, BookRecord

logger = logging.getLogger(__name__)


async def resolve_author(
    authors: AuthorRepository, author_id: int | None,
) -> Author | None:
    """Look up the referenced author; None when absent, NO_AUTHOR or unknown."""
    if author_id is None or author_id == NO_AUTHOR:
        return None
    author = await authors.find_by_id(AuthorId(author_id))
    if author is None:
        logger.debug(
            f"Author {author_id} not found, book left without author",
            extra={"author_id": author_id},
        )
    return author


async def list_books(db: AsyncSession) -> Sequence[Book]:
    return await SqlBookRepository(db).find_all()


async def find_book_or_404(books: BookRepository, book_id: BookId) -> Book:
    """Look up a book through any BookRepository or raise 404."""
    book = await books.find_by_id(book_id)
    if book is None:
        raise ResourceNotFoundError("Book", book_id)
    return book


async def get_book_or_404(db: AsyncSession, book_id: BookId) -> Book:
    """Get book or raise 404."""
    return await find_book_or_404(SqlBookRepository(db), book_id)


async def create_book(db: AsyncSession, payload: BookPayload) -> Book:
    """Build a book, attach its author (if any), validate and persist."""
    book = Book(**payload.scalar_fields())
    async with transaction(db):
        book.author = await resolve_author(SqlAuthorRepository(db), payload.author_id)
        ensure_valid(book, BookRecord)
        SqlBookRepository(db).add(book)
        await db.flush()
    logger.info(
        f"Book {book.id} created",
        extra={"book_id": book.id, "author_id": book.author_id},
    )
    return book


async def update_book(
    db: AsyncSession, book_id: BookId, payload: BookPayload,
) -> Book:
    """Overwrite present scalar fields, validate, then re-resolve the author."""
    book = await get_book_or_404(db, book_id)
    async with transaction(db):
        for name, value in payload.scalar_fields().items():
            setattr(book, name, value)
        ensure_valid(book, BookRecord)
        book.author = await resolve_author(SqlAuthorRepository(db), payload.author_id)
    logger.info(
        f"Book {book_id} updated",
        extra={"book_id": book_id, "author_id": book.author_id},
    )
    return book


async def delete_book(db: AsyncSession, book_id: BookId) -> None:
    books = SqlBookRepository(db)
    book = await find_book_or_404(books, book_id)
    async with transaction(db):
        await books.remove(book)
    logger.info(f"Book {book_id} deleted", extra={"book_id": book_id})
