"""Seed Data — populates an empty database with sample authors and books.

Invariants:
    - Every seeded book is linked to one of the authors seeded in the same call
    - Single commit at the end: either the whole sample set lands or nothing does
    - Deterministic when an rng is passed (tests pass random.Random(seed))

Design Decisions:
    - Runnable as `python -m library_api.db.seed` against DATABASE_URL, creating
      tables first when --create-schema is given (local dev without alembic)
"""

import argparse
import asyncio
import logging
import random

from sqlalchemy.ext.asyncio import AsyncSession

from library_api.config import get_settings
from library_api.db.base import Base
from library_api.db.session import create_session_factory
from library_api.infrastructure.observability import setup_logging
from library_api.models import Author, Book

logger = logging.getLogger(__name__)


async def seed(
    session: AsyncSession,
    authors: int = 10,
    books: int = 20,
    rng: random.Random | None = None,
) -> tuple[list[Author], list[Book]]:
    """Insert sample authors and books, each book linked to a random author."""
    if books and not authors:
        raise ValueError("cannot seed books without at least one author")
    rng = rng or random.Random()

    author_list = [
        Author(first_name=f"Firstname{i}", last_name=f"Lastname{i}")
        for i in range(authors)
    ]
    session.add_all(author_list)

    book_list = [
        Book(
            title=f"Title{i}",
            cover_text=f"Cover{i}",
            author=rng.choice(author_list),
        )
        for i in range(books)
    ]
    session.add_all(book_list)

    await session.commit()
    logger.info(f"Seeded {len(author_list)} authors and {len(book_list)} books")
    return author_list, book_list


async def _main(authors: int, books: int, create_schema: bool) -> None:
    settings = get_settings()
    engine, factory = create_session_factory(settings.database_url)
    try:
        if create_schema:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        async with factory() as session:
            await seed(session, authors=authors, books=books)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load sample authors and books.")
    parser.add_argument("--authors", type=int, default=10)
    parser.add_argument("--books", type=int, default=20)
    parser.add_argument("--create-schema", action="store_true")
    args = parser.parse_args()

    setup_logging(get_settings().log_level, "text")
    asyncio.run(_main(args.authors, args.books, args.create_schema))
