# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""In-memory logger for tests."""

from typing import Any

from .logger import Logger


class SilentLogger(Logger):
    """Logger that keeps every record in memory and prints nothing.

    Records are dicts with "level", "message" and, when keyword fields were
    given, "extra". No level filtering is applied.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or "qa-chunking"
        self.logs: list[dict[str, Any]] = []

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        record: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            record["extra"] = kwargs
        self.logs.append(record)

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Records in emission order, optionally only those at level."""
        return [record for record in self.logs if level is None or record["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Whether any record (at level, if given) contains message."""
        return any(message in record["message"] for record in self.get_logs(level))

    def clear_logs(self) -> None:
        self.logs.clear()
