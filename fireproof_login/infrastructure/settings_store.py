"""SQL Settings Data Store: the app_login_detection preference.

Invariants:
    - Unset preference reads as enabled (True)
    - Writes commit immediately; failures raise StoreError
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fireproof_login.infrastructure.database import store_operation
from fireproof_login.models.app_setting import AppSetting

APP_LOGIN_DETECTION = "app_login_detection"


class SqlSettingsDataStore:
    """SettingsDataStore backed by the app_settings table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_app_login_detection(self) -> bool:
        async with store_operation(self.db, "get_app_login_detection"):
            row = await self._find(APP_LOGIN_DETECTION)
        return True if row is None else row.value

    async def set_app_login_detection(self, enabled: bool) -> None:
        async with store_operation(self.db, "set_app_login_detection"):
            row = await self._find(APP_LOGIN_DETECTION)
            if row is None:
                self.db.add(AppSetting(key=APP_LOGIN_DETECTION, value=enabled))
            else:
                row.value = enabled
            await self.db.commit()

    async def _find(self, key: str) -> AppSetting | None:
        result = await self.db.execute(
            select(AppSetting).where(AppSetting.key == key),
        )
        return result.scalar_one_or_none()
