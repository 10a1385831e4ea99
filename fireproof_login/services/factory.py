"""Factory: explicit construction of services from concrete collaborators.

Invariants:
    - The only module in services/ that imports infrastructure classes
    - Every call returns fresh instances bound to the given DB session
"""

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from fireproof_login.config import Settings
from fireproof_login.infrastructure.experiment import ConfigExperimentToggle
from fireproof_login.infrastructure.fireproof_repository import (
    SqlFireproofWebsiteRepository,
)
from fireproof_login.infrastructure.pixel import HttpPixel
from fireproof_login.infrastructure.settings_store import SqlSettingsDataStore
from fireproof_login.infrastructure.user_events_store import SqlUserEventsStore
from fireproof_login.services.fireproof_dialogs_event_handler import (
    FireproofDialogsEventHandler,
)
from fireproof_login.services.login_detection_settings import LoginDetectionSettings


def build_pixel(
    db: AsyncSession, settings: Settings, http_client: httpx.AsyncClient,
) -> HttpPixel:
    return HttpPixel(
        http_client,
        db,
        base_url=settings.pixel_base_url,
        flush_batch_size=settings.pixel_flush_batch_size,
    )


def build_fireproof_dialogs_event_handler(
    db: AsyncSession, settings: Settings, http_client: httpx.AsyncClient,
) -> FireproofDialogsEventHandler:
    return FireproofDialogsEventHandler(
        user_events_store=SqlUserEventsStore(db),
        pixel=build_pixel(db, settings, http_client),
        fireproof_website_repository=SqlFireproofWebsiteRepository(db),
        app_settings=SqlSettingsDataStore(db),
        experiment=ConfigExperimentToggle(settings),
    )


def build_login_detection_settings(db: AsyncSession) -> LoginDetectionSettings:
    return LoginDetectionSettings(SqlUserEventsStore(db), SqlSettingsDataStore(db))
