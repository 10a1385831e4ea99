"""Error Hierarchy: typed, categorized exceptions for the fireproof login service.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - StoreError is the only failure the dialog flow surfaces to the UI
    - TelemetryError from a deferred pixel never leaves the dialog handler
    - to_response() never leaks internal details
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    domain: str | None = None
    pixel_name: str | None = None
    user_event: str | None = None
    debug_info: dict[str, Any] | None = None


class FireproofLoginError(Exception):
    """Base exception for all fireproof-login errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidDomainError(FireproofLoginError):
    """Domain is not a fireproofable host name."""
    def __init__(self, domain: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.domain = domain
        super().__init__(
            f"'{domain}' is not a valid domain",
            "INVALID_DOMAIN", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.domain = domain


class ResourceNotFoundError(FireproofLoginError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(FireproofLoginError):
    """A read or write against durable storage failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class TelemetryError(FireproofLoginError):
    """A pixel could not be sent or queued."""
    def __init__(
        self, message: str, pixel_name: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.pixel_name = pixel_name
        super().__init__(
            f"Pixel '{pixel_name}' failed: {message}",
            "TELEMETRY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, ctx, 502,
        )
        self.pixel_name = pixel_name
