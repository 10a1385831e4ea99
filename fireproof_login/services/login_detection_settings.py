"""Login Detection Settings: user-driven changes to the login detection switch.

Invariants:
    - Only a real off -> on change registers USER_ENABLED_LOGIN_DETECTION,
      which permanently removes the user from the disable-prompt path
    - Re-saving the current value writes nothing
    - Disabling only writes the setting
    - Using the fire button registers FIRE_BUTTON_EXECUTED (idempotent)
"""

import logging

from fireproof_login.core.domain_types import UserEventKey
from fireproof_login.core.repository_protocols import (
    SettingsDataStore, UserEventsStore,
)

logger = logging.getLogger(__name__)


class LoginDetectionSettings:
    """Settings-screen and fire-button side of the user event facts."""

    def __init__(self, user_events_store: UserEventsStore, app_settings: SettingsDataStore):
        self.user_events_store = user_events_store
        self.app_settings = app_settings

    async def is_login_detection_enabled(self) -> bool:
        return await self.app_settings.get_app_login_detection()

    async def on_login_detection_toggled(self, enabled: bool) -> None:
        was_enabled = await self.app_settings.get_app_login_detection()
        if was_enabled == enabled:
            return
        await self.app_settings.set_app_login_detection(enabled)
        if enabled:
            await self.user_events_store.register_user_event(
                UserEventKey.USER_ENABLED_LOGIN_DETECTION,
            )
        logger.info(f"Login detection set to {enabled}")

    async def on_fire_button_executed(self) -> None:
        await self.user_events_store.register_user_event(
            UserEventKey.FIRE_BUTTON_EXECUTED,
        )
