"""Fireproof Schemas: request/response models for the dialog and settings routes.

Invariants:
    - FireproofConfirmRequest.domain stripped, 1-253 chars
    - DialogEventResponse.event is None when nothing was published
"""

from pydantic import BaseModel, Field, field_validator
from typing import Literal


class FireproofConfirmRequest(BaseModel):
    """Body of POST /fireproof-dialog/confirm."""
    domain: str = Field(min_length=1, max_length=253)

    @field_validator("domain")
    @classmethod
    def strip_domain(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("domain cannot be empty or whitespace")
        return v


class DialogEvent(BaseModel):
    type: Literal["fireproof_website_success", "ask_to_disable_login_detection"]
    domain: str | None = None


class DialogEventResponse(BaseModel):
    event: DialogEvent | None = None


class FireproofWebsiteResponse(BaseModel):
    domain: str


class LoginDetectionSetting(BaseModel):
    enabled: bool


class PixelFlushResponse(BaseModel):
    sent: int
