"""Health & Readiness: liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - A ready response reports how many deferred pixels await a flush
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import fireproof_login.infrastructure.database as database
from fireproof_login.core.errors import StoreError
from fireproof_login.infrastructure.pixel import count_pending_pixels

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "fireproof-login",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: database connectivity plus the deferred pixel backlog."""
    manager = database.db_manager
    if not manager or not await manager.health_check():
        return _not_ready("database_unavailable")
    try:
        async with manager.session() as db:
            pending = await count_pending_pixels(db)
    except StoreError as e:
        logger.error(f"Pixel queue unreadable: {e.message}")
        return _not_ready("schema_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "pending_pixels": pending},
    }
