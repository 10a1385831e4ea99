"""Fireproof Login API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FireproofLoginError → structured JSON responses
    - Database and the pixel HTTP client initialized on startup via lifespan
    - Pixels queued by a previous run are flushed once on startup
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fireproof_login.api.error_handlers import register_error_handlers
from fireproof_login.api.routes import (
    fireproof_dialogs, fireproof_websites, health, login_detection,
)
from fireproof_login.config import Settings, get_settings
from fireproof_login.core.errors import StoreError
from fireproof_login.infrastructure.database import DatabaseSessionManager, init_db
from fireproof_login.infrastructure.observability import setup_logging
from fireproof_login.services.factory import build_pixel

logger = logging.getLogger(__name__)


async def flush_pending_pixels(
    manager: DatabaseSessionManager,
    settings: Settings,
    http_client: httpx.AsyncClient,
) -> int:
    """Send pixels left queued by a previous run; 0 if the queue is unreadable."""
    try:
        async with manager.session() as db:
            sent = await build_pixel(db, settings, http_client).send_pending_pixels()
    except StoreError as e:
        logger.warning(
            f"Startup pixel flush skipped: {e.message}",
            extra={"error_code": e.code},
        )
        return 0
    if sent:
        logger.info(f"Flushed {sent} pending pixel(s) on startup")
    return sent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.pixel_timeout_seconds,
    )
    await flush_pending_pixels(manager, settings, app.state.http_client)
    logger.info("Fireproof login API started")
    yield
    await app.state.http_client.aclose()
    await manager.dispose()
    logger.info("Fireproof login API shutting down")


app = FastAPI(
    title="Fireproof Login API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(fireproof_dialogs.router)
app.include_router(fireproof_websites.router)
app.include_router(login_detection.router)

register_error_handlers(app)
