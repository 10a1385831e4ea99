"""Fireproof Dialog Routes: one POST per dialog life-cycle callback.

Invariants:
    - Each request builds a fresh handler (the handler keeps no state)
    - Response carries the notification published during this request, or null
    - TelemetryError from an immediate pixel is logged, never returned to the client
    - StoreError propagates to the global handler (503)
"""

import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends

from fireproof_login.api.dependencies import get_event_handler
from fireproof_login.core.errors import TelemetryError
from fireproof_login.schemas.fireproof import (
    DialogEventResponse, FireproofConfirmRequest,
)
from fireproof_login.services.fireproof_dialogs_event_handler import (
    FireproofDialogsEventHandler,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["fireproof-dialogs"])


async def _run_step(
    handler: FireproofDialogsEventHandler,
    step: Callable[[], Awaitable[None]],
) -> DialogEventResponse:
    version = handler.event.version
    try:
        await step()
    except TelemetryError as e:
        logger.warning(
            f"Pixel failed during dialog step: {e.message}",
            extra={"pixel_name": e.pixel_name, "error_code": e.code},
        )
    event = handler.event.published_since(version)
    return DialogEventResponse(event=event.to_payload() if event else None)


@router.post("/fireproof-dialog/shown", response_model=DialogEventResponse)
async def fireproof_dialog_shown(
    handler: FireproofDialogsEventHandler = Depends(get_event_handler),
):
    return await _run_step(handler, handler.on_fireproof_login_dialog_shown)


@router.post("/fireproof-dialog/confirm", response_model=DialogEventResponse)
async def fireproof_dialog_confirm(
    body: FireproofConfirmRequest,
    handler: FireproofDialogsEventHandler = Depends(get_event_handler),
):
    return await _run_step(
        handler, lambda: handler.on_user_confirmed_fireproof_dialog(body.domain),
    )


@router.post("/fireproof-dialog/dismiss", response_model=DialogEventResponse)
async def fireproof_dialog_dismiss(
    handler: FireproofDialogsEventHandler = Depends(get_event_handler),
):
    return await _run_step(handler, handler.on_user_dismissed_fireproof_login_dialog)


@router.post(
    "/disable-login-detection-dialog/shown", response_model=DialogEventResponse,
)
async def disable_dialog_shown(
    handler: FireproofDialogsEventHandler = Depends(get_event_handler),
):
    return await _run_step(handler, handler.on_disable_login_detection_dialog_shown)


@router.post(
    "/disable-login-detection-dialog/confirm", response_model=DialogEventResponse,
)
async def disable_dialog_confirm(
    handler: FireproofDialogsEventHandler = Depends(get_event_handler),
):
    return await _run_step(
        handler, handler.on_user_confirmed_disable_login_detection_dialog,
    )


@router.post(
    "/disable-login-detection-dialog/dismiss", response_model=DialogEventResponse,
)
async def disable_dialog_dismiss(
    handler: FireproofDialogsEventHandler = Depends(get_event_handler),
):
    return await _run_step(
        handler, handler.on_user_dismissed_disable_login_detection_dialog,
    )
