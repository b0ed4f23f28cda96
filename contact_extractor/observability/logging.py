"""
Structured logging for contact extraction.

Uses Python's standard ``logging`` module with a JSON-structured formatter
so logs are consumable by any structured-log aggregator without fragile
text parsing.
"""
from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, Dict, List, Optional

# Standard LogRecord attributes; anything else on a record was passed via ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


# ---------------------------------------------------------------------------
# JSON formatter
# ---------------------------------------------------------------------------


class _JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": time.strftime(
                "%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


# ---------------------------------------------------------------------------
# Logger factory
# ---------------------------------------------------------------------------


def get_logger(name: str = "contact_extractor") -> logging.Logger:
    """
    Return a logger that emits JSON-structured output to stdout.

    Idempotent: repeated calls with the same *name* return the same logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_JSONFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    return logger


# ---------------------------------------------------------------------------
# Context-enriched log helper
# ---------------------------------------------------------------------------


class ExtractionLogger:
    """
    Thin wrapper around :class:`logging.Logger` that attaches the request id
    to every log record.

    Usage::

        log = ExtractionLogger("REQ-001")
        log.info("step_complete", step="emails", found=3)
    """

    def __init__(
        self,
        request_id: str,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or get_logger()
        self._ctx: Dict[str, str] = {"request_id": request_id}

    def _log(self, level: int, event: str, **extra: Any) -> None:
        extra.update(self._ctx)
        self._logger.log(level, event, extra=extra)

    def debug(self, event: str, **kw: Any) -> None:
        self._log(logging.DEBUG, event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._log(logging.INFO, event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._log(logging.WARNING, event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._log(logging.ERROR, event, **kw)

    def log_result_summary(self, emails: List[str], phones: List[str]) -> None:
        """Log a compact summary of one extraction call."""
        self.info(
            "contact_extraction_complete",
            email_count=len(emails),
            phone_count=len(phones),
        )

    def log_fallback(self, component: str, reason: str) -> None:
        """Log a skipped engine in a structured way."""
        self.warning(
            "engine_skipped",
            component=component,
            reason=reason,
        )
