"""Logging helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_LOG_LEVEL, LOG_FILE_BACKUP_COUNT, LOG_FILE_MAX_BYTES


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line for log files."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _numeric_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def setup_logging(level: Union[str, int] = DEFAULT_LOG_LEVEL, log_file: Optional[Path] = None) -> None:
    """Configure console logging and, optionally, a rotating JSON log file."""
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(_numeric_level(level))
    root_logger.handlers.clear()
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonLogFormatter())
        root_logger.addHandler(file_handler)
