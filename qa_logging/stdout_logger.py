# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Stdout logger implementation with structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class StdoutLogger(Logger):
    """Logger that outputs structured JSON logs to stdout."""

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            name: Optional logger name for identification

        Raises:
            ValueError: If level is not a known level name
        """
        self.level = level.upper()
        self.name = name or "qa-chunking"

        if self.level not in LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(LEVELS.keys())}")

        # Mirror records into stdlib logging so caplog and handlers can capture them
        self._stdlib_logger = logging.getLogger(self.name)
        self._stdlib_logger.setLevel(logging.NOTSET)

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Print one record as a JSON line and mirror it to stdlib logging.

        Records below the configured level are dropped. An ``exc_info``
        keyword is forwarded to stdlib logging rather than serialized.
        """
        if LEVELS[level] < LEVELS[self.level]:
            return

        exc_info = kwargs.pop("exc_info", None)

        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            log_entry["extra"] = kwargs

        try:
            print(json.dumps(log_entry, default=str), file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": kwargs} if kwargs else None
        self._stdlib_logger.log(LEVELS[level], message, exc_info=exc_info, extra=extra)

    def exception(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self.log("ERROR", message, **kwargs)
