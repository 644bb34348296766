"""Health & Readiness Probes — liveness, plus readiness that covers database and schema.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 when the database is unreachable, or
      reachable but missing any table the models map (migrations not applied)
    - A 503 body always names its reason; schema_missing also lists the tables

Design Decisions:
    - Required tables derived from Base.metadata, so a new model is covered
      without touching this route
    - db_manager read through the module at call time: it is assigned on startup
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from library_api.db.base import Base
from library_api.infrastructure import database
import library_api.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])

REQUIRED_TABLES = tuple(sorted(Base.metadata.tables))


def _not_ready(reason: str, **details) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **details},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "library-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database reachable and schema migrated."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return _not_ready("database_unavailable")

    missing = await manager.missing_tables(REQUIRED_TABLES)
    if missing:
        logger.warning(f"Not ready, missing tables: {', '.join(missing)}")
        return _not_ready("schema_missing", missing_tables=missing)

    return {"status": "ready", "checks": {"database": "healthy", "schema": "current"}}
