# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Base configuration provider interface."""

from abc import ABC, abstractmethod
from typing import Any

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def parse_bool(value: Any, default: bool) -> bool:
    """Interpret a raw setting as a boolean, falling back to default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value_lower = value.strip().lower()
        if value_lower in _TRUE_VALUES:
            return True
        if value_lower in _FALSE_VALUES:
            return False
    return default


class ConfigProvider(ABC):
    """Abstract base class for configuration providers."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        raise NotImplementedError

    @abstractmethod
    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean configuration value."""
        raise NotImplementedError

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int:
        """Get an integer configuration value."""
        raise NotImplementedError

    @abstractmethod
    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get a floating point configuration value."""
        raise NotImplementedError
