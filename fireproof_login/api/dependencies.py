"""Route Dependencies: per-request services built from app-scoped resources."""

import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from fireproof_login.config import Settings, get_settings
from fireproof_login.infrastructure.database import get_db
from fireproof_login.infrastructure.pixel import HttpPixel
from fireproof_login.infrastructure.fireproof_repository import (
    SqlFireproofWebsiteRepository,
)
from fireproof_login.services.factory import (
    build_fireproof_dialogs_event_handler,
    build_login_detection_settings,
    build_pixel,
)
from fireproof_login.services.fireproof_dialogs_event_handler import (
    FireproofDialogsEventHandler,
)
from fireproof_login.services.login_detection_settings import LoginDetectionSettings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_event_handler(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> FireproofDialogsEventHandler:
    return build_fireproof_dialogs_event_handler(db, settings, http_client)


def get_login_detection_settings(
    db: AsyncSession = Depends(get_db),
) -> LoginDetectionSettings:
    return build_login_detection_settings(db)


def get_pixel(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> HttpPixel:
    return build_pixel(db, settings, http_client)


def get_fireproof_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlFireproofWebsiteRepository:
    return SqlFireproofWebsiteRepository(db)
