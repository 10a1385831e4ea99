"""ORM Models: SQLAlchemy declarative models for every persisted fact.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all
"""

from fireproof_login.models.user_event import UserEventRow  # noqa: F401
from fireproof_login.models.fireproof_website import FireproofWebsiteRow  # noqa: F401
from fireproof_login.models.app_setting import AppSetting  # noqa: F401
from fireproof_login.models.pending_pixel import PendingPixel  # noqa: F401
