"""Logging setup.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

HANDLER_NAME = "pathmatch"
TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(
    level: str = "INFO",
    fmt: str = "text",
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Attach a stream handler with the given level and format.

    Configures the root logger unless ``logger_name`` is given. A handler
    added by an earlier call is replaced, not duplicated.
    """
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger = logging.getLogger(logger_name)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
    logger.setLevel(level.upper())
    logger.addHandler(handler)
    return logger


__all__ = [
    "JSONFormatter",
    "configure_logging",
]
