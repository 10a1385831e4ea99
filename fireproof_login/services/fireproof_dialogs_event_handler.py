"""Fireproof Dialogs Event Handler: decides each step of the login fireproof dialog flow.

Invariants:
    - No state of its own between calls; all memory lives in UserEventsStore
    - At most one notification published per call, on the `event` slot
    - Every pixel carries fire_executed = "true" | "false"
      (FIRE_BUTTON_EXECUTED registered or not, read at emission time)
    - Disable prompt only when: experiment on, USER_ENABLED_LOGIN_DETECTION
      absent, DISABLE_DIALOG_DISMISSED absent, and LOGIN_DIALOG_DISMISSED
      already registered (second or later dismissal)
    - Login dialog pixels fire immediately and propagate TelemetryError;
      disable dialog pixels are enqueued and their failures only logged
    - StoreError always propagates; nothing is retried

Design Decisions:
    - Eligibility reads and the LOGIN_DIALOG_DISMISSED write are separate
      store calls, not one transaction: two overlapping dismissals can both
      see the flag absent and neither prompts
"""

import logging

from fireproof_login.core.domain_types import (
    PixelName, PixelParameter, UserEventKey,
)
from fireproof_login.core.errors import TelemetryError
from fireproof_login.core.event_channel import SingleSlotChannel
from fireproof_login.core.fireproof_events import (
    AskToDisableLoginDetection, FireproofEvent, FireproofWebsiteSuccess,
)
from fireproof_login.core.repository_protocols import (
    ExperimentToggle, FireproofWebsiteRepository, Pixel,
    SettingsDataStore, UserEventsStore,
)

logger = logging.getLogger(__name__)


class FireproofDialogsEventHandler:
    """Life-cycle callbacks for the fireproof login and disable-detection dialogs."""

    def __init__(
        self,
        user_events_store: UserEventsStore,
        pixel: Pixel,
        fireproof_website_repository: FireproofWebsiteRepository,
        app_settings: SettingsDataStore,
        experiment: ExperimentToggle,
    ):
        self.user_events_store = user_events_store
        self.pixel = pixel
        self.fireproof_website_repository = fireproof_website_repository
        self.app_settings = app_settings
        self.experiment = experiment
        self.event: SingleSlotChannel[FireproofEvent] = SingleSlotChannel()

    # ─── Fireproof login dialog ─────────────────────────────────

    async def on_fireproof_login_dialog_shown(self) -> None:
        await self.pixel.fire(
            PixelName.FIREPROOF_LOGIN_DIALOG_SHOWN,
            await self._fire_executed_parameters(),
        )

    async def on_user_confirmed_fireproof_dialog(self, domain: str) -> None:
        await self.user_events_store.remove_user_event(
            UserEventKey.LOGIN_DIALOG_DISMISSED,
        )
        website = await self.fireproof_website_repository.fireproof_website(domain)
        if website is None:
            logger.info(
                "Fireproof declined by registry", extra={"domain": domain},
            )
            return
        await self.pixel.fire(
            PixelName.FIREPROOF_WEBSITE_LOGIN_ADDED,
            await self._fire_executed_parameters(),
        )
        self._publish(FireproofWebsiteSuccess(fireproof_website=website))

    async def on_user_dismissed_fireproof_login_dialog(self) -> None:
        await self.pixel.fire(
            PixelName.FIREPROOF_WEBSITE_LOGIN_DISMISS,
            await self._fire_executed_parameters(),
        )
        if not await self._allow_user_to_disable_fireproof_login():
            return
        if await self._should_ask_to_disable_fireproof_login():
            self._publish(AskToDisableLoginDetection())
        else:
            await self.user_events_store.register_user_event(
                UserEventKey.LOGIN_DIALOG_DISMISSED,
            )
            logger.debug(
                "First fireproof dismissal recorded",
                extra={"user_event": UserEventKey.LOGIN_DIALOG_DISMISSED.value},
            )

    # ─── Disable login detection dialog ─────────────────────────

    async def on_disable_login_detection_dialog_shown(self) -> None:
        await self._enqueue_pixel(PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_SHOWN)

    async def on_user_confirmed_disable_login_detection_dialog(self) -> None:
        await self.app_settings.set_app_login_detection(False)
        await self._enqueue_pixel(PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_DISABLE)

    async def on_user_dismissed_disable_login_detection_dialog(self) -> None:
        await self.app_settings.set_app_login_detection(True)
        await self.user_events_store.remove_user_event(
            UserEventKey.LOGIN_DIALOG_DISMISSED,
        )
        await self.user_events_store.register_user_event(
            UserEventKey.DISABLE_DIALOG_DISMISSED,
        )
        await self._enqueue_pixel(PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_CANCEL)

    # ─── Helpers ────────────────────────────────────────────────

    async def _user_tried_fire_button(self) -> bool:
        return await self.user_events_store.has_user_event(
            UserEventKey.FIRE_BUTTON_EXECUTED,
        )

    async def _fire_executed_parameters(self) -> dict[PixelParameter, str]:
        tried = await self._user_tried_fire_button()
        return {PixelParameter.FIRE_EXECUTED: str(tried).lower()}

    async def _allow_user_to_disable_fireproof_login(self) -> bool:
        if not self.experiment.login_detection_experiment_enabled():
            return False
        if await self.user_events_store.has_user_event(
            UserEventKey.USER_ENABLED_LOGIN_DETECTION,
        ):
            return False
        if await self.user_events_store.has_user_event(
            UserEventKey.DISABLE_DIALOG_DISMISSED,
        ):
            return False
        return True

    async def _should_ask_to_disable_fireproof_login(self) -> bool:
        return await self.user_events_store.has_user_event(
            UserEventKey.LOGIN_DIALOG_DISMISSED,
        )

    async def _enqueue_pixel(self, pixel_name: PixelName) -> None:
        parameters = await self._fire_executed_parameters()
        try:
            await self.pixel.enqueue_fire(pixel_name, parameters)
        except TelemetryError as e:
            logger.warning(
                f"Deferred pixel dropped: {e.message}",
                extra={"pixel_name": pixel_name.value, "error_code": e.code},
            )

    def _publish(self, event: FireproofEvent) -> None:
        logger.info(f"Publishing {type(event).__name__}")
        self.event.publish(event)
