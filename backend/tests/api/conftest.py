"""API test fixtures — FastAPI test client bound to the per-test database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager swapped for one sharing the test engine (readiness probe)

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so init_db never touches
      DATABASE_URL during tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from library_api.infrastructure.database import get_db, DatabaseSessionManager
import library_api.infrastructure.database as db_module
from library_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
