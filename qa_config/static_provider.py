# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Static/dictionary-backed configuration provider."""

from typing import Any

from .base import ConfigProvider, parse_bool


class StaticConfigProvider(ConfigProvider):
    """Configuration provider with static values (useful for tests)."""

    def __init__(self, config: dict[str, Any] | None = None):
        self._config = config if config is not None else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        return parse_bool(self._config.get(key), default)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._config.get(key)
        if value is None:
            return default
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._config.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except (ValueError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        self._config[key] = value
