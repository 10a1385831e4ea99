"""Structured Logging: JSON formatter, setup and error log fields.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (pixel_name, user_event, domain, operation, error_code,
      method, path) surfaced when present
    - Error log level follows ErrorSeverity: WARNING/INFO severities never log as ERROR
    - JSON format in production, human-readable in development
"""

import logging
import json
from datetime import datetime, timezone

from fireproof_login.core.errors import ErrorSeverity, FireproofLoginError

_EXTRA_KEYS = (
    "pixel_name", "user_event", "domain", "operation", "error_code",
    "method", "path",
)

_SEVERITY_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def log_level_for(exc: FireproofLoginError) -> int:
    return _SEVERITY_LEVELS.get(exc.severity, logging.ERROR)


def error_log_extra(
    exc: FireproofLoginError, method: str | None = None, path: str | None = None,
) -> dict:
    """Log `extra` for an error: its code, context fields and the request line."""
    ctx = exc.context
    extra = {
        "error_code": exc.code,
        "domain": ctx.domain,
        "pixel_name": ctx.pixel_name,
        "user_event": ctx.user_event,
        "operation": getattr(exc, "operation", None),
        "method": method,
        "path": path,
    }
    return {k: v for k, v in extra.items() if v is not None}


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
