"""transaction() — commits on clean exit, rolls back and re-raises on error."""

import pytest
from sqlalchemy import func, select

from library_api.infrastructure.database import transaction
from library_api.models import Author


async def _count(db) -> int:
    return await db.scalar(select(func.count()).select_from(Author))


async def test_transaction_commits_on_success(test_db, test_session_factory):
    async with transaction(test_db):
        test_db.add(Author(first_name="Octavia", last_name="Butler"))

    async with test_session_factory() as other:
        assert await _count(other) == 1


async def test_transaction_rolls_back_and_reraises(test_db):
    with pytest.raises(RuntimeError):
        async with transaction(test_db):
            test_db.add(Author(first_name="Octavia", last_name="Butler"))
            await test_db.flush()
            raise RuntimeError("abort")

    assert await _count(test_db) == 0
