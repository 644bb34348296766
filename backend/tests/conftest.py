"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Sessions use expire_on_commit=False, same as DatabaseSessionManager

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for CRUD semantics
      (PostgreSQL-specific behavior such as FK enforcement is not exercised here)
"""

import os

# Never point tests at a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from library_api.db.base import Base  # noqa: E402
from library_api.models import Author, Book  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_author(test_db):
    """Insert one author directly into the test DB."""
    author = Author(first_name="Ursula", last_name="Le Guin")
    test_db.add(author)
    await test_db.commit()
    await test_db.refresh(author)
    return author


@pytest.fixture
async def seed_book(test_db, seed_author):
    """Insert one book linked to seed_author."""
    book = Book(
        title="The Dispossessed", cover_text="An ambiguous utopia",
        author=seed_author,
    )
    test_db.add(book)
    await test_db.commit()
    await test_db.refresh(book)
    return book
