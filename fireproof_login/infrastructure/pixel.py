"""HTTP Pixel: sends telemetry pixels now, or queues them for a later flush.

Invariants:
    - fire() issues GET {base_url}{pixel_name}?{parameters}; any transport
      error or non-2xx status raises TelemetryError
    - enqueue_fire() only writes a pending_pixels row; it never touches the network
    - send_pending_pixels() sends oldest first, deletes each row after it was
      sent, and stops at the first failure so the remainder survives
    - count_pending_pixels() only reads; readiness reports it
"""

import logging
from typing import Mapping

import httpx
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fireproof_login.core.domain_types import PixelName, PixelParameter
from fireproof_login.core.errors import TelemetryError
from fireproof_login.infrastructure.database import store_operation
from fireproof_login.models.pending_pixel import PendingPixel

logger = logging.getLogger(__name__)


def _query(parameters: Mapping[PixelParameter, str] | None) -> dict[str, str]:
    return {
        (k.value if isinstance(k, PixelParameter) else str(k)): v
        for k, v in (parameters or {}).items()
    }


async def count_pending_pixels(db: AsyncSession) -> int:
    async with store_operation(db, "count_pending_pixels"):
        result = await db.execute(select(func.count()).select_from(PendingPixel))
        return result.scalar_one()


class HttpPixel:
    """Pixel sink over httpx, with a durable queue for deferred pixels."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        db: AsyncSession,
        base_url: str,
        flush_batch_size: int = 50,
    ):
        self.http_client = http_client
        self.db = db
        self.base_url = base_url
        self.flush_batch_size = flush_batch_size

    async def fire(
        self, pixel_name: PixelName,
        parameters: Mapping[PixelParameter, str] | None = None,
    ) -> None:
        await self._send(pixel_name.value, _query(parameters))

    async def enqueue_fire(
        self, pixel_name: PixelName,
        parameters: Mapping[PixelParameter, str] | None = None,
    ) -> None:
        self.db.add(PendingPixel(name=pixel_name.value, parameters=_query(parameters)))
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise TelemetryError(f"could not queue ({e})", pixel_name.value) from e
        logger.debug("Pixel queued", extra={"pixel_name": pixel_name.value})

    async def send_pending_pixels(self) -> int:
        """Flush queued pixels; returns how many were sent."""
        sent = 0
        while True:
            async with store_operation(self.db, "load_pending_pixels"):
                result = await self.db.execute(
                    select(PendingPixel)
                    .order_by(PendingPixel.id)
                    .limit(self.flush_batch_size),
                )
                batch = result.scalars().all()
            if not batch:
                return sent
            for pending in batch:
                try:
                    await self._send(pending.name, pending.parameters)
                except TelemetryError as e:
                    logger.warning(
                        f"Pixel flush stopped: {e.message}",
                        extra={"pixel_name": pending.name, "error_code": e.code},
                    )
                    return sent
                async with store_operation(self.db, "delete_pending_pixel"):
                    await self.db.execute(
                        delete(PendingPixel).where(PendingPixel.id == pending.id),
                    )
                    await self.db.commit()
                sent += 1

    async def _send(self, name: str, query: dict[str, str]) -> None:
        try:
            response = await self.http_client.get(
                f"{self.base_url}{name}", params=query,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TelemetryError(str(e), name) from e
        logger.debug("Pixel sent", extra={"pixel_name": name})
