"""Fireproof Events: one-shot notifications from the dialog flow to the UI.

Invariants:
    - Exactly two notification kinds exist
    - FireproofWebsiteSuccess carries the registry record unchanged
    - to_payload() is the JSON shape returned by the API
"""

from dataclasses import dataclass
from typing import Union

from fireproof_login.core.domain_types import FireproofWebsite


@dataclass(frozen=True)
class FireproofWebsiteSuccess:
    """The domain was fireproofed."""
    fireproof_website: FireproofWebsite

    def to_payload(self) -> dict:
        return {
            "type": "fireproof_website_success",
            "domain": self.fireproof_website.domain,
        }


@dataclass(frozen=True)
class AskToDisableLoginDetection:
    """The UI should show the "disable login detection" dialog now."""

    def to_payload(self) -> dict:
        return {"type": "ask_to_disable_login_detection"}


FireproofEvent = Union[FireproofWebsiteSuccess, AskToDisableLoginDetection]
