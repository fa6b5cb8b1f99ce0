"""Logging setup for applications and scripts embedding the Balanced client.

The library itself only creates module loggers; nothing is configured on
import. Call :func:`configure_logging` from an entry point.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

__all__ = ["JsonFormatter", "configure_logging", "REQUEST_FIELDS"]

# extras attached by balanced.http to request log records
REQUEST_FIELDS = ("method", "url", "status", "request_id")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, request extras included when present."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in REQUEST_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


def configure_logging(fmt: str | None = None, *, level: str | int | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Args:
        fmt: 'json' or 'text'. Defaults to LOG_FORMAT env or 'text'.
        level: log level name or number. Defaults to LOG_LEVEL env or INFO.
    """
    fmt = (fmt or os.getenv("LOG_FORMAT", "text")).lower()
    level = level or os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        )
    root.addHandler(handler)
