"""Boundary Protocols: contracts between the dialog flow and its collaborators.

Invariants:
    - Core NEVER imports from the shell; implementations are injected
    - Store and registry methods are async because implementations do IO
    - Store failures raise StoreError; pixel failures raise TelemetryError
    - FireproofWebsiteRepository returns None on decline, it never raises for it
"""

from typing import Mapping, Protocol

from fireproof_login.core.domain_types import (
    FireproofWebsite, PixelName, PixelParameter, UserEvent, UserEventKey,
)


class UserEventsStore(Protocol):
    """Durable set of user event keys."""
    async def register_user_event(self, key: UserEventKey) -> None: ...
    async def remove_user_event(self, key: UserEventKey) -> None: ...
    async def get_user_event(self, key: UserEventKey) -> UserEvent | None: ...
    async def has_user_event(self, key: UserEventKey) -> bool: ...


class FireproofWebsiteRepository(Protocol):
    """Registry of fireproofed domains."""
    async def fireproof_website(self, domain: str) -> FireproofWebsite | None: ...
    async def is_website_fireproofed(self, domain: str) -> bool: ...
    async def get_fireproof_websites(self) -> list[FireproofWebsite]: ...
    async def remove_fireproof_website(self, domain: str) -> bool: ...


class SettingsDataStore(Protocol):
    """Holds the app-wide login detection switch."""
    async def get_app_login_detection(self) -> bool: ...
    async def set_app_login_detection(self, enabled: bool) -> None: ...


class ExperimentToggle(Protocol):
    """Cached experiment cohort membership."""
    def login_detection_experiment_enabled(self) -> bool: ...


class Pixel(Protocol):
    """Telemetry sink.

    fire() reports now and raises on failure; enqueue_fire() stores the
    pixel for a later flush and returns without waiting for the network.
    """
    async def fire(
        self, pixel_name: PixelName,
        parameters: Mapping[PixelParameter, str] | None = None,
    ) -> None: ...
    async def enqueue_fire(
        self, pixel_name: PixelName,
        parameters: Mapping[PixelParameter, str] | None = None,
    ) -> None: ...
