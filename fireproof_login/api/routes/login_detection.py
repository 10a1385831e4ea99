"""Login Detection Routes: the settings switch, fire button and pixel flush."""

from fastapi import APIRouter, Depends, status

from fireproof_login.api.dependencies import (
    get_login_detection_settings, get_pixel,
)
from fireproof_login.infrastructure.pixel import HttpPixel
from fireproof_login.schemas.fireproof import LoginDetectionSetting, PixelFlushResponse
from fireproof_login.services.login_detection_settings import LoginDetectionSettings

router = APIRouter(prefix="/api/v1", tags=["login-detection"])


@router.get("/settings/login-detection", response_model=LoginDetectionSetting)
async def get_login_detection(
    service: LoginDetectionSettings = Depends(get_login_detection_settings),
):
    return LoginDetectionSetting(enabled=await service.is_login_detection_enabled())


@router.put("/settings/login-detection", response_model=LoginDetectionSetting)
async def put_login_detection(
    body: LoginDetectionSetting,
    service: LoginDetectionSettings = Depends(get_login_detection_settings),
):
    await service.on_login_detection_toggled(body.enabled)
    return body


@router.post("/fire-button", status_code=status.HTTP_204_NO_CONTENT)
async def fire_button_executed(
    service: LoginDetectionSettings = Depends(get_login_detection_settings),
):
    await service.on_fire_button_executed()


@router.post("/pixels/flush", response_model=PixelFlushResponse)
async def flush_pixels(pixel: HttpPixel = Depends(get_pixel)):
    return PixelFlushResponse(sent=await pixel.send_pending_pixels())
