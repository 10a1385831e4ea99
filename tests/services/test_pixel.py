"""HTTP Pixel: immediate sends, durable queue and flushing.

Tests cover:
    - fire() URL and query string
    - fire() failure mapping to TelemetryError
    - enqueue_fire() never hits the network
    - send_pending_pixels() ordering, batching and stop-on-failure
"""

import pytest
from sqlalchemy import select

from fireproof_login.core.domain_types import PixelName, PixelParameter
from fireproof_login.core.errors import TelemetryError
from fireproof_login.infrastructure.pixel import HttpPixel
from fireproof_login.models.pending_pixel import PendingPixel


@pytest.fixture
def pixel(http_client, test_db):
    return HttpPixel(
        http_client, test_db, base_url="https://pixels.test/t/", flush_batch_size=2,
    )


async def _pending_names(db):
    result = await db.execute(select(PendingPixel).order_by(PendingPixel.id))
    return [p.name for p in result.scalars().all()]


async def test_fire_sends_get_with_parameters(pixel, pixel_requests):
    await pixel.fire(
        PixelName.FIREPROOF_LOGIN_DIALOG_SHOWN,
        {PixelParameter.FIRE_EXECUTED: "true"},
    )

    assert len(pixel_requests) == 1
    request = pixel_requests[0]
    assert request.method == "GET"
    assert request.url.path == "/t/m_fireproof_login_dialog_shown"
    assert request.url.params["fire_executed"] == "true"


async def test_fire_raises_telemetry_error_on_server_error(
    pixel, pixel_status,
):
    pixel_status["code"] = 500

    with pytest.raises(TelemetryError) as exc_info:
        await pixel.fire(PixelName.FIREPROOF_WEBSITE_LOGIN_ADDED)
    assert exc_info.value.pixel_name == "m_fireproof_website_login_added"


async def test_enqueue_does_not_send(pixel, pixel_requests, test_db):
    await pixel.enqueue_fire(
        PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_SHOWN,
        {PixelParameter.FIRE_EXECUTED: "false"},
    )

    assert pixel_requests == []
    assert await _pending_names(test_db) == [
        "m_fireproof_login_disable_dialog_shown",
    ]


async def test_flush_sends_all_in_order_across_batches(
    pixel, pixel_requests, test_db,
):
    names = [
        PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_SHOWN,
        PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_DISABLE,
        PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_CANCEL,
    ]
    for name in names:
        await pixel.enqueue_fire(name, {PixelParameter.FIRE_EXECUTED: "true"})

    sent = await pixel.send_pending_pixels()

    assert sent == 3
    assert [r.url.path.rsplit("/", 1)[-1] for r in pixel_requests] == [
        n.value for n in names
    ]
    assert all(r.url.params["fire_executed"] == "true" for r in pixel_requests)
    assert await _pending_names(test_db) == []


async def test_flush_stops_at_first_failure_and_keeps_rest(
    pixel, pixel_status, test_db,
):
    await pixel.enqueue_fire(PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_SHOWN)
    await pixel.enqueue_fire(PixelName.FIREPROOF_LOGIN_DISABLE_DIALOG_CANCEL)
    pixel_status["code"] = 503

    assert await pixel.send_pending_pixels() == 0
    assert len(await _pending_names(test_db)) == 2

    pixel_status["code"] = 200
    assert await pixel.send_pending_pixels() == 2


async def test_flush_with_empty_queue(pixel, pixel_requests):
    assert await pixel.send_pending_pixels() == 0
    assert pixel_requests == []
