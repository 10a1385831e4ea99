"""User Event ORM: one row per registered user event key.

Invariants:
    - key is the primary key: a key is either present or absent
    - timestamp refreshed on every registration
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from fireproof_login.db.base import Base


class UserEventRow(Base):
    __tablename__ = "user_events"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
