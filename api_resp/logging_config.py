"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: level, timestamp, logger, message. Failures mapped into an envelope
add err_log and error_code.

The package never calls configure_logging on import; applications opt in.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

from api_resp.config.settings import get_settings

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|passwd|token|credential|authorization)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        # Outcome-transform fields
        if hasattr(record, "err_log"):
            entry["err_log"] = self._sanitize(str(getattr(record, "err_log")))
        if hasattr(record, "error_code"):
            entry["error_code"] = getattr(record, "error_code")

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str, ensure_ascii=False)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
        ``API_RESP_LOG_LEVEL``.
    json_output:
        Use JsonFormatter when true, a plain text format otherwise. Defaults
        to ``API_RESP_LOG_JSON``.
    """
    settings = get_settings()
    level = level or settings.log_level
    if json_output is None:
        json_output = settings.log_json

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(_PLAIN_FORMAT))
    root.addHandler(handler)
