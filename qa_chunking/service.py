# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Chunking orchestration: validation, strategy dispatch and statistics."""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from qa_logging import Logger, get_logger
from qa_metrics import MetricsCollector

from .chunkers import create_chunker
from .errors import (
    MAX_CHUNK_SIZE,
    MIN_CHUNK_SIZE,
    ChunkingError,
    InvalidChunkSizeError,
    InvalidConfigurationError,
    InvalidMessageError,
)
from .models import ChunkingConfig, ChunkingResult, Message
from .validation import validate_message_collection

_stdlib_logger = logging.getLogger(__name__)


def _validate_config(config: ChunkingConfig) -> None:
    if not MIN_CHUNK_SIZE <= config.target_size <= MAX_CHUNK_SIZE:
        raise InvalidChunkSizeError(config.target_size, MIN_CHUNK_SIZE, MAX_CHUNK_SIZE)
    if not 0 <= config.min_relationship_score <= 100:
        raise InvalidConfigurationError(
            "min_relationship_score",
            config.min_relationship_score,
            "Relationship score must be between 0 and 100",
        )
    if not config.max_chunk_overflow > 0:
        raise InvalidConfigurationError(
            "max_chunk_overflow",
            config.max_chunk_overflow,
            "Chunk overflow multiplier must be greater than 0",
        )


def _validate_timestamps(messages: Sequence[Message]) -> None:
    errors: List[str] = []
    for message in messages:
        try:
            message.sent_at
        except InvalidMessageError as e:
            errors.extend(e.errors)
    if errors:
        raise InvalidMessageError(errors)


def _average_chunk_size(total_messages: int, chunk_count: int) -> int:
    """total_messages / chunk_count rounded half up, in integer arithmetic."""
    return (2 * total_messages + chunk_count) // (2 * chunk_count)


def _emit_diagnostics(
    result: ChunkingResult,
    duration: float,
    logger: Optional[Logger],
    metrics_collector: Optional[MetricsCollector],
) -> None:
    """Report a finished run. Never raises.

    The process default logger is resolved here, inside the guard, because
    building it from LOG_* environment settings can fail.
    """
    try:
        if logger is None:
            logger = get_logger(__name__)
        logger.info(
            "Chunking complete",
            total_messages=result.total_messages,
            chunk_count=result.chunk_count,
            average_chunk_size=result.average_chunk_size,
            strategy=result.strategy,
            chunk_sizes=result.chunk_sizes,
        )
    except Exception as e:
        _stdlib_logger.debug(f"Failed to emit chunking log event: {e}")

    if metrics_collector is None:
        return
    try:
        tags = {"strategy": result.strategy}
        metrics_collector.increment("chunking_runs_total", tags=tags)
        metrics_collector.increment("chunking_messages_total", float(result.total_messages), tags=tags)
        for size in result.chunk_sizes:
            metrics_collector.observe("chunking_chunk_size", float(size), tags=tags)
        metrics_collector.observe("chunking_duration_seconds", duration, tags=tags)
    except Exception as e:
        _stdlib_logger.debug(f"Failed to record chunking metrics: {e}")


def chunk_messages(
    messages: Sequence[Message],
    config: ChunkingConfig,
    logger: Optional[Logger] = None,
    metrics_collector: Optional[MetricsCollector] = None,
) -> ChunkingResult:
    """Chunk messages using the configured strategy.

    Args:
        messages: Validated messages in conversation order
        config: Chunking settings
        logger: Logger for the completion event (process default if omitted)
        metrics_collector: Optional metrics collector

    Returns:
        ChunkingResult with the chunks and summary statistics

    Raises:
        InvalidChunkSizeError: If config.target_size is outside [1, 500]
        InvalidConfigurationError: If another setting is out of range
        ChunkingError: If no messages were supplied
        InvalidMessageError: If smart chunking meets an unparsable timestamp
    """
    _validate_config(config)

    if len(messages) == 0:
        raise ChunkingError(reason="No messages to chunk", message_count=0)

    if config.use_smart_chunking:
        _validate_timestamps(messages)

    start_time = time.monotonic()
    strategy = "smart" if config.use_smart_chunking else "simple"
    chunker = create_chunker(strategy, config=config, chunk_size=config.target_size)
    chunks = chunker.chunk(messages)

    result = ChunkingResult(
        chunks=chunks,
        total_messages=len(messages),
        chunk_count=len(chunks),
        average_chunk_size=_average_chunk_size(len(messages), len(chunks)),
        strategy=strategy,
    )

    _emit_diagnostics(
        result,
        time.monotonic() - start_time,
        logger,
        metrics_collector,
    )
    return result


def chunk_messages_default(messages: Sequence[Message], **kwargs: Any) -> ChunkingResult:
    """Chunk messages with the default smart preset."""
    return chunk_messages(messages, ChunkingConfig.default(), **kwargs)


def chunk_messages_simple(messages: Sequence[Message], chunk_size: int, **kwargs: Any) -> ChunkingResult:
    """Chunk messages into fixed windows of chunk_size."""
    return chunk_messages(messages, ChunkingConfig.simple(chunk_size), **kwargs)


class ChunkingService:
    """Service wrapper around chunk_messages for long-lived callers.

    Holds the configuration and observability collaborators and keeps
    running totals across calls.
    """

    def __init__(
        self,
        config: Optional[ChunkingConfig] = None,
        logger: Optional[Logger] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ):
        """Initialize the chunking service.

        Args:
            config: Chunking configuration (default smart preset if omitted)
            logger: Logger for service events (process default, resolved per
                event, if omitted)
            metrics_collector: Metrics collector (optional)
        """
        self.config = config or ChunkingConfig.default()
        self.logger = logger
        self.metrics_collector = metrics_collector

        # Stats
        self.runs_completed = 0
        self.messages_chunked_total = 0
        self.chunks_created_total = 0

    def _log_failure(self, message: str, **kwargs: Any) -> None:
        # Called while an error propagates; a broken logger must not replace it
        try:
            (self.logger or get_logger(__name__)).error(message, **kwargs)
        except Exception as e:
            _stdlib_logger.debug(f"Failed to log \"{message}\": {e}")

    def chunk(self, messages: Sequence[Message]) -> ChunkingResult:
        """Chunk validated messages with the service configuration."""
        try:
            result = chunk_messages(
                messages,
                self.config,
                logger=self.logger,
                metrics_collector=self.metrics_collector,
            )
        except Exception as e:
            self._log_failure(
                "Chunking failed",
                error=str(e),
                error_type=type(e).__name__,
                message_count=len(messages),
            )
            raise

        self.runs_completed += 1
        self.messages_chunked_total += result.total_messages
        self.chunks_created_total += result.chunk_count
        return result

    def chunk_records(self, data: Any) -> ChunkingResult:
        """Validate a raw message collection and chunk it.

        Args:
            data: Either ``{"messages": [...]}`` or a bare list of raw records

        Raises:
            InvalidMessageError: If the records fail validation
        """
        if isinstance(data, list):
            data = {"messages": data}
        try:
            messages = validate_message_collection(data)
        except InvalidMessageError as e:
            self._log_failure("Message validation failed", errors=e.errors)
            raise
        return self.chunk(messages)

    def get_strategy_info(self) -> Dict[str, Any]:
        """Get information about the current chunking strategy."""
        return {
            "strategy": "smart" if self.config.use_smart_chunking else "simple",
            "target_size": self.config.target_size,
            "min_relationship_score": self.config.min_relationship_score,
            "max_chunk_overflow": self.config.max_chunk_overflow,
            "runs_completed": self.runs_completed,
            "messages_chunked_total": self.messages_chunked_total,
            "chunks_created_total": self.chunks_created_total,
        }
