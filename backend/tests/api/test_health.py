"""Health Probes — liveness is unconditional, readiness checks database and schema."""

from sqlalchemy.ext.asyncio import create_async_engine

import library_api.infrastructure.database as db_module
from library_api.api.routes.health import REQUIRED_TABLES


async def test_liveness_returns_healthy(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_reports_database_and_schema(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ready",
        "checks": {"database": "healthy", "schema": "current"},
    }


async def test_readiness_returns_503_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_returns_503_when_tables_missing(client, monkeypatch):
    empty_engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(db_module.db_manager, "engine", empty_engine)
    try:
        res = await client.get("/api/health/ready")
    finally:
        await empty_engine.dispose()

    assert res.status_code == 503
    assert res.json() == {
        "status": "not_ready",
        "reason": "schema_missing",
        "missing_tables": ["authors", "books"],
    }


def test_required_tables_follow_models():
    assert REQUIRED_TABLES == ("authors", "books")
