"""SQL User Events Store: durable presence set of UserEventKey.

Invariants:
    - register is idempotent (re-registering only refreshes the timestamp),
      including when another session inserts the same key concurrently
    - remove is idempotent (removing an absent key is a no-op)
    - Each write commits on its own; failures raise StoreError
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fireproof_login.core.domain_types import UserEvent, UserEventKey
from fireproof_login.core.errors import ErrorContext
from fireproof_login.infrastructure.database import store_operation
from fireproof_login.models.user_event import UserEventRow

logger = logging.getLogger(__name__)


class SqlUserEventsStore:
    """UserEventsStore backed by the user_events table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register_user_event(self, key: UserEventKey) -> None:
        now = datetime.now(timezone.utc)
        async with store_operation(
            self.db, "register_user_event", ErrorContext(user_event=key.value),
        ):
            row = await self._find(key)
            if row is None:
                self.db.add(UserEventRow(key=key.value, timestamp=now))
            else:
                row.timestamp = now
            try:
                await self.db.commit()
            except IntegrityError:
                # registered concurrently by another session
                await self.db.rollback()
        logger.debug("User event registered", extra={"user_event": key.value})

    async def remove_user_event(self, key: UserEventKey) -> None:
        async with store_operation(
            self.db, "remove_user_event", ErrorContext(user_event=key.value),
        ):
            await self.db.execute(
                delete(UserEventRow).where(UserEventRow.key == key.value),
            )
            await self.db.commit()
        logger.debug("User event removed", extra={"user_event": key.value})

    async def get_user_event(self, key: UserEventKey) -> UserEvent | None:
        async with store_operation(
            self.db, "get_user_event", ErrorContext(user_event=key.value),
        ):
            row = await self._find(key)
        if row is None:
            return None
        return UserEvent(key=key, timestamp=row.timestamp)

    async def has_user_event(self, key: UserEventKey) -> bool:
        return await self.get_user_event(key) is not None

    async def _find(self, key: UserEventKey) -> UserEventRow | None:
        result = await self.db.execute(
            select(UserEventRow).where(UserEventRow.key == key.value),
        )
        return result.scalar_one_or_none()
