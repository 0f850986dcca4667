# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Abstract logger interface."""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for structured loggers.

    Backends implement log(); the level methods take a human readable message
    plus arbitrary keyword fields that are attached to the record as
    structured data.
    """

    @abstractmethod
    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """Emit one record at level (DEBUG, INFO, WARNING or ERROR)."""
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message from inside an exception handler."""
        self.log("ERROR", message, **kwargs)
