"""App Setting ORM: boolean key/value preferences."""

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from fireproof_login.db.base import Base


class AppSetting(Base):
    __tablename__ = "app_settings"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[bool] = mapped_column(Boolean, nullable=False)
