"""SQL Fireproof Website Repository: registry of fireproofed domains.

Invariants:
    - Domains stored normalized (lowercase, no trailing dot)
    - fireproof_website returns None for invalid or already-fireproofed
      domains, including a concurrent insert of the same domain
    - Other failures raise StoreError
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fireproof_login.core.domain_types import FireproofWebsite
from fireproof_login.core.domains import is_valid_domain, normalize_domain
from fireproof_login.core.errors import ErrorContext
from fireproof_login.infrastructure.database import store_operation
from fireproof_login.models.fireproof_website import FireproofWebsiteRow

logger = logging.getLogger(__name__)


class SqlFireproofWebsiteRepository:
    """FireproofWebsiteRepository backed by the fireproof_websites table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fireproof_website(self, domain: str) -> FireproofWebsite | None:
        domain = normalize_domain(domain)
        if not is_valid_domain(domain):
            return None
        async with store_operation(
            self.db, "fireproof_website", ErrorContext(domain=domain),
        ):
            if await self._find(domain) is not None:
                return None
            self.db.add(FireproofWebsiteRow(domain=domain))
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                return None
        logger.info("Website fireproofed", extra={"domain": domain})
        return FireproofWebsite(domain=domain)

    async def is_website_fireproofed(self, domain: str) -> bool:
        domain = normalize_domain(domain)
        async with store_operation(
            self.db, "is_website_fireproofed", ErrorContext(domain=domain),
        ):
            return await self._find(domain) is not None

    async def get_fireproof_websites(self) -> list[FireproofWebsite]:
        async with store_operation(self.db, "get_fireproof_websites"):
            result = await self.db.execute(
                select(FireproofWebsiteRow).order_by(FireproofWebsiteRow.domain),
            )
            rows = result.scalars().all()
        return [FireproofWebsite(domain=r.domain) for r in rows]

    async def remove_fireproof_website(self, domain: str) -> bool:
        """Remove domain; False if it was not fireproofed."""
        domain = normalize_domain(domain)
        async with store_operation(
            self.db, "remove_fireproof_website", ErrorContext(domain=domain),
        ):
            result = await self.db.execute(
                delete(FireproofWebsiteRow)
                .where(FireproofWebsiteRow.domain == domain),
            )
            await self.db.commit()
        return result.rowcount > 0

    async def _find(self, domain: str) -> FireproofWebsiteRow | None:
        result = await self.db.execute(
            select(FireproofWebsiteRow).where(FireproofWebsiteRow.domain == domain),
        )
        return result.scalar_one_or_none()
