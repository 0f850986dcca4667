# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Exceptions raised by the chunking pipeline."""

from typing import Any

MIN_CHUNK_SIZE = 1
MAX_CHUNK_SIZE = 500


class ChunkingServiceError(Exception):
    """Base exception for chunking errors."""
    pass


class InvalidChunkSizeError(ChunkingServiceError):
    """Raised when the target chunk size is outside the accepted range.

    Attributes:
        size: The rejected target size
        min_size: Smallest accepted size
        max_size: Largest accepted size
    """

    def __init__(self, size: Any, min_size: int = MIN_CHUNK_SIZE, max_size: int = MAX_CHUNK_SIZE):
        self.size = size
        self.min_size = min_size
        self.max_size = max_size
        super().__init__(f"Invalid chunk size: {size} (must be between {min_size} and {max_size})")


class ChunkingError(ChunkingServiceError):
    """Raised when a chunking precondition fails.

    Attributes:
        reason: Why chunking could not proceed
        message_count: Number of messages that were supplied
    """

    def __init__(self, reason: str, message_count: int):
        self.reason = reason
        self.message_count = message_count
        super().__init__(f"Chunking failed: {reason} ({message_count} messages)")


class InvalidConfigurationError(ChunkingServiceError):
    """Raised when a chunking setting has an unusable value."""

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid configuration for {key}: {reason}")


class InvalidMessageError(ChunkingServiceError):
    """Raised when raw message records fail validation.

    Attributes:
        errors: Human-readable validation errors
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Message validation failed: {'; '.join(errors)}")


class InsufficientDataError(ChunkingServiceError):
    """Raised when fewer messages than required were supplied."""

    def __init__(self, count: int, minimum: int):
        self.count = count
        self.minimum = minimum
        super().__init__(f"Insufficient data: found {count} messages, need at least {minimum}")


def format_error(error: BaseException) -> str:
    """Format an error for user-facing display.

    Args:
        error: Any exception raised while loading or chunking messages

    Returns:
        A one-line description; validation errors are listed one per line
    """
    if isinstance(error, InvalidMessageError):
        return "Message validation failed:\n" + "\n".join(error.errors)
    if isinstance(error, ChunkingServiceError):
        return str(error)
    return "Unknown error occurred"


def is_retryable_error(error: BaseException) -> bool:
    """Return whether retrying the same call could succeed.

    Chunking is deterministic over its inputs, so none of its failures are
    transient.
    """
    return False
