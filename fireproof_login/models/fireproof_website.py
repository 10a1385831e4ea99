"""Fireproof Website ORM: domains that survive the fire button."""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from fireproof_login.db.base import Base


class FireproofWebsiteRow(Base):
    __tablename__ = "fireproof_websites"

    domain: Mapped[str] = mapped_column(String(253), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
