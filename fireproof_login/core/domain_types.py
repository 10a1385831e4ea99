"""Domain Types: enums and value objects shared across the fireproof login flow.

Invariants:
    - User events are presence facts: only existence of a key is meaningful
      to the dialog flow; the timestamp is informational
    - Pixel names and parameters are str Enums, never raw strings
    - Pixel parameter values are strings ("true" / "false" for booleans)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class UserEventKey(str, Enum):
    """Durable facts remembered about the user. Not mutually exclusive."""
    FIRE_BUTTON_EXECUTED = "fire_button_executed"
    LOGIN_DIALOG_DISMISSED = "fireproof_login_dialog_dismissed"
    DISABLE_DIALOG_DISMISSED = "fireproof_disable_dialog_dismissed"
    USER_ENABLED_LOGIN_DETECTION = "user_enabled_fireproof_login"


class PixelName(str, Enum):
    """Telemetry events emitted by the dialog flow."""
    FIREPROOF_LOGIN_DIALOG_SHOWN = "m_fireproof_login_dialog_shown"
    FIREPROOF_WEBSITE_LOGIN_ADDED = "m_fireproof_website_login_added"
    FIREPROOF_WEBSITE_LOGIN_DISMISS = "m_fireproof_website_login_dismiss"
    FIREPROOF_LOGIN_DISABLE_DIALOG_SHOWN = "m_fireproof_login_disable_dialog_shown"
    FIREPROOF_LOGIN_DISABLE_DIALOG_DISABLE = "m_fireproof_login_disable_dialog_disable"
    FIREPROOF_LOGIN_DISABLE_DIALOG_CANCEL = "m_fireproof_login_disable_dialog_cancel"


class PixelParameter(str, Enum):
    """Query parameters attached to pixels."""
    FIRE_EXECUTED = "fire_executed"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class FireproofWebsite:
    """A domain whose cookies and storage survive the fire button."""
    domain: str


@dataclass(frozen=True)
class UserEvent:
    """A registered user event as stored."""
    key: UserEventKey
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
