"""
HolidayPack Configuration

Settings are read from environment variables:

- HOLIDAYPACK_DEFAULT_LOCALE: locale used when a caller gives none (en_US)
- HOLIDAYPACK_LOG_LEVEL: level for the "holidaypack" logger (WARNING)
- HOLIDAYPACK_LOG_JSON: "true" for structured JSON log lines (false)
- HOLIDAYPACK_PACKS_DIR: extra directory of YAML provider packs (unset)

The library installs no log handlers unless configure_logging() is called.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .models import DEFAULT_LOCALE

LOGGER_NAME = "holidaypack"

# Extra LogRecord attributes copied into JSON output
_EXTRA_FIELDS = ("provider_id", "year", "holiday_id", "pack_path")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for HolidayPack."""
    default_locale: str = DEFAULT_LOCALE
    log_level: str = "WARNING"
    log_json: bool = False
    packs_dir: Optional[Path] = None

    @classmethod
    def from_env(cls) -> Settings:
        packs_dir = os.getenv("HOLIDAYPACK_PACKS_DIR")
        return cls(
            default_locale=os.getenv("HOLIDAYPACK_DEFAULT_LOCALE", DEFAULT_LOCALE),
            log_level=os.getenv("HOLIDAYPACK_LOG_LEVEL", "WARNING").upper(),
            log_json=os.getenv("HOLIDAYPACK_LOG_JSON", "false").lower() == "true",
            packs_dir=Path(packs_dir) if packs_dir else None,
        )


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a stream handler to the "holidaypack" logger.

    Calling it again replaces the handler installed by the previous call.
    """
    settings = settings or Settings.from_env()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))

    for existing in list(logger.handlers):
        if getattr(existing, "_holidaypack", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._holidaypack = True
    if settings.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    return logger
