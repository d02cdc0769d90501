"""Logging setup with redaction of credential material."""
from __future__ import annotations

import logging
import re
import sys
from typing import Final, Optional, Pattern

_SENSITIVE_PATTERNS: Final[list[Pattern[str]]] = [
    re.compile(r'(?i)\b(password|passwd|pwd|salt|hash)\s*[=:]\s*["\']?[^\s"\',)]+["\']?'),
    # bcrypt salts and digests
    re.compile(r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{22,53}"),
]

_REDACTED_TEXT: Final[str] = "[REDACTED]"

_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class RedactingFilter(logging.Filter):
    """Masks passwords, salts and hashes in log records.

    The record is always kept; only its message is rewritten.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _redact(text: str) -> str:
    for pattern in _SENSITIVE_PATTERNS:
        text = pattern.sub(_REDACTED_TEXT, text)
    return text


def configure_logging(level: str = "INFO", stream: Optional[object] = None) -> logging.Logger:
    """Attach a redacting stream handler to the ``credstore`` logger.

    Calling this more than once replaces the handler instead of stacking them.
    """
    logger = logging.getLogger("credstore")
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_credstore_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler.addFilter(RedactingFilter())
    handler._credstore_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
