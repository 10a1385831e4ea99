"""Pending Pixel ORM: pixels enqueued for a later flush.

Invariants:
    - Rows are deleted only after the pixel was sent successfully
    - Flush order is id ascending (oldest first)
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from fireproof_login.db.base import Base


class PendingPixel(Base):
    __tablename__ = "pending_pixels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    parameters: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
