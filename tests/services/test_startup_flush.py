"""Startup Flush: pixels queued before a restart are sent when the app starts."""

from fireproof_login.core.domain_types import PixelName, PixelParameter
from fireproof_login.infrastructure.pixel import HttpPixel, count_pending_pixels
from fireproof_login.main import flush_pending_pixels


async def test_startup_sends_pixels_left_by_previous_run(
    test_manager, test_settings, http_client, pixel_requests, test_session_factory,
):
    async with test_session_factory() as db:
        pixel = HttpPixel(http_client, db, base_url=test_settings.pixel_base_url)
        await pixel.enqueue_fire(
            PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_CANCEL,
            {PixelParameter.FIRE_EXECUTED: "false"},
        )

    sent = await flush_pending_pixels(test_manager, test_settings, http_client)

    assert sent == 1
    assert [r.url.path for r in pixel_requests] == [
        "/t/m_fireproof_login_disable_dialog_cancel",
    ]
    async with test_session_factory() as db:
        assert await count_pending_pixels(db) == 0


async def test_startup_flush_with_empty_queue_sends_nothing(
    test_manager, test_settings, http_client, pixel_requests,
):
    assert await flush_pending_pixels(test_manager, test_settings, http_client) == 0
    assert pixel_requests == []


async def test_startup_flush_keeps_pixels_when_endpoint_fails(
    test_manager, test_settings, http_client, pixel_status, test_session_factory,
):
    async with test_session_factory() as db:
        pixel = HttpPixel(http_client, db, base_url=test_settings.pixel_base_url)
        await pixel.enqueue_fire(PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_SHOWN)
    pixel_status["code"] = 503

    assert await flush_pending_pixels(test_manager, test_settings, http_client) == 0
    async with test_session_factory() as db:
        assert await count_pending_pixels(db) == 1


async def test_startup_flush_survives_missing_queue_table(
    test_manager, test_settings, http_client, test_engine,
):
    async with test_engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE pending_pixels")

    assert await flush_pending_pixels(test_manager, test_settings, http_client) == 0
