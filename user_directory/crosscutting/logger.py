# user_directory/crosscutting/logger.py
"""
===============================================================================
MODULE: Structured (JSON) logger with call context
===============================================================================

Goal
----
Operational log lines for the directory core that are:
- Parseable (one JSON object per line)
- Correlatable (request_id / operation)
- Free of roster personal data (masked by key)

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Component:
  JSONFormatter + setup_logger()

Responsibilities:
  - Format records as JSON
  - Enrich with context (request_id, operation)
  - Mask personal fields and cap string sizes

Collaborators:
  - user_directory/context.py (ContextVars)
  - crosscutting/config.py (level and format)
===============================================================================
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else arrived through `extra=`.
# Logger.makeRecord refuses `extra` keys that collide with these.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


class _Redactor:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      _Redactor

    Responsibilities:
      - Mask User / AuditLogEntry fields that hold personal data
      - Trim oversized strings
    ----------------------------------------------------------------------------
    """

    # Field names of User and AuditLogEntry whose values identify a person.
    PERSONAL_KEYS = frozenset(
        {"email", "date_of_birth", "previous_value", "new_value"}
    )
    MASK = "***REDACTED***"

    def __init__(self, max_str: int = 2_000, max_depth: int = 3):
        self._max_str = max_str
        self._max_depth = max_depth

    def sanitize(self, value: Any, *, depth: int = 0, key: str | None = None) -> Any:
        if key and key.lower() in self.PERSONAL_KEYS:
            return self.MASK

        if depth > self._max_depth:
            return "***TRUNCATED***"

        if isinstance(value, str):
            if len(value) <= self._max_str:
                return value
            return value[: self._max_str] + "…(truncated)"

        if isinstance(value, dict):
            return {
                str(k): self.sanitize(v, depth=depth + 1, key=str(k))
                for k, v in value.items()
            }

        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.sanitize(v, depth=depth + 1, key=key) for v in value]

        # ints, bools, None and enums serialize as-is (default=str on dump)
        return value


class JSONFormatter(logging.Formatter):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Class:
      JSONFormatter

    Responsibilities:
      - Convert LogRecord -> JSON
      - Merge call context and `extra=` fields (masked)
      - Attach the stacktrace when there is an exception

    Collaborators:
      - user_directory/context.get_context_dict()
      - _Redactor
    ----------------------------------------------------------------------------
    """

    def __init__(self):
        super().__init__()
        self._redactor = _Redactor()

    def format(self, record: logging.LogRecord) -> str:
        from ..context import get_context_dict

        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }
        payload.update(get_context_dict())

        for k, v in vars(record).items():
            if k not in _RECORD_ATTRS:
                payload[k] = self._redactor.sanitize(v, key=k)

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc, tb = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc),
                "stacktrace": traceback.format_exception(exc_type, exc, tb),
            }

        return json.dumps(
            payload, ensure_ascii=False, default=str, separators=(",", ":")
        )


def setup_logger(name: str = "user-directory") -> logging.Logger:
    """
    Create and configure the service logger.

    - Avoids duplicate handlers on re-import
    - Honors log_level / log_json from Settings
    """
    from .config import get_settings

    s = get_settings()
    log = logging.getLogger(name)
    log.setLevel(getattr(logging, s.log_level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            JSONFormatter()
            if s.log_json
            else logging.Formatter("%(levelname)s %(name)s %(message)s")
        )
        log.addHandler(handler)

    return log


# Global instance (import-friendly)
logger = setup_logger()
