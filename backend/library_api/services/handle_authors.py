"""Author Handlers — list/get/create/update/delete orchestration for Author.

Invariants:
    - Every write runs inside one transaction(): commit on success, rollback on
      validation or persistence error
    - Unknown ids raise ResourceNotFoundError before any mutation is attempted
    - Deleting an author detaches its books (book.author = None); books survive

Design Decisions:
    - Plain async functions taking the request's AsyncSession: routes stay thin,
      tests can call these directly with a test session
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from library_api.core.domain_types import AuthorId
from library_api.core.errors import ResourceNotFoundError
from library_api.core.validation import ensure_valid
from library_api.infrastructure.database import transaction
from library_api.infrastructure.repositories import SqlAuthorRepository
from library_api.models import Author
from library_api.schemas.author import AuthorPayload, AuthorRecord

logger = logging.getLogger(__name__)


async def list_authors(db: AsyncSession) -> Sequence[Author]:
    return await SqlAuthorRepository(db).find_all()


async def get_author_or_404(db: AsyncSession, author_id: AuthorId) -> Author:
    """Get author or raise 404."""
    author = await SqlAuthorRepository(db).find_by_id(author_id)
    if author is None:
        raise ResourceNotFoundError("Author", author_id)
    return author


async def create_author(db: AsyncSession, payload: AuthorPayload) -> Author:
    """Build, validate and persist a new author."""
    author = Author(**payload.model_dump(exclude_unset=True))
    async with transaction(db):
        ensure_valid(author, AuthorRecord)
        SqlAuthorRepository(db).add(author)
        await db.flush()
    logger.info(f"Author {author.id} created", extra={"author_id": author.id})
    return author


async def update_author(
    db: AsyncSession, author_id: AuthorId, payload: AuthorPayload,
) -> Author:
    """Overwrite the fields present in the payload, then validate and commit."""
    author = await get_author_or_404(db, author_id)
    async with transaction(db):
        for name, value in payload.model_dump(exclude_unset=True).items():
            setattr(author, name, value)
        ensure_valid(author, AuthorRecord)
    logger.info(f"Author {author_id} updated", extra={"author_id": author_id})
    return author


async def delete_author(db: AsyncSession, author_id: AuthorId) -> None:
    """Detach the author's books, then remove the author."""
    author = await get_author_or_404(db, author_id)
    async with transaction(db):
        detached = list(author.books)
        for book in detached:
            book.author = None
        await SqlAuthorRepository(db).remove(author)
    logger.info(
        f"Author {author_id} deleted, {len(detached)} book(s) detached",
        extra={"author_id": author_id},
    )
