# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Factory functions for creating logger instances."""

import os

from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

_default_logger: Logger | None = None
_logger_registry: dict[str, Logger] = {}


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return value or os.getenv(env_var) or fallback


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Args:
        logger_type: Type of logger to create. Options: "stdout", "silent".
            Defaults to LOG_TYPE env or "stdout".
        level: Logging level. Options: DEBUG, INFO, WARNING, ERROR.
            Defaults to LOG_LEVEL env or "INFO".
        name: Logger name for identification. Defaults to LOG_NAME env or "qa-chunking".

    Returns:
        Logger instance

    Raises:
        ValueError: If logger_type is not recognized

    Example:
        >>> logger = create_logger(logger_type="stdout", level="DEBUG", name="analyzer")
        >>> logger = create_logger(logger_type="silent")
    """
    logger_type = _default(logger_type, "LOG_TYPE", "stdout").lower()
    level = _default(level, "LOG_LEVEL", "INFO").upper()
    name = _default(name, "LOG_NAME", "qa-chunking")

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    elif logger_type == "silent":
        return SilentLogger(level=level, name=name)
    else:
        raise ValueError(
            f"Unknown logger_type: {logger_type}. "
            f"Must be one of: stdout, silent"
        )


def create_stdout_logger(level: str | None = None, name: str | None = None) -> Logger:
    """Shortcut for create_logger(logger_type="stdout", ...)."""
    return create_logger(logger_type="stdout", level=level, name=name)


def set_default_logger(logger: Logger) -> None:
    """Install the process-wide logger returned by get_logger()."""
    global _default_logger
    _default_logger = logger
    _logger_registry.clear()


def get_logger(name: str | None = None) -> Logger:
    """Return the default logger, creating a stdout fallback if none is set.

    Args:
        name: Module name; loggers are cached per name

    Returns:
        The default logger when one has been set, otherwise a cached
        stdout logger for the given name
    """
    if _default_logger is not None:
        return _default_logger

    key = name or ""
    if key not in _logger_registry:
        _logger_registry[key] = create_stdout_logger(name=name)
    return _logger_registry[key]
