# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""QA-Chunking.

Splits an ordered chat conversation into bounded-size chunks for downstream
summarization while keeping question/answer exchanges in the same chunk.

Example:
    >>> from qa_chunking import ChunkingConfig, chunk_messages, load_messages
    >>>
    >>> messages = load_messages("discord-export.json")
    >>> result = chunk_messages(messages, ChunkingConfig.default())
    >>>
    >>> for index, chunk in enumerate(result.chunks):
    ...     print(f"Chunk {index}: {len(chunk)} messages")
    >>>
    >>> # Fixed windows of 20 messages
    >>> result = chunk_messages(messages, ChunkingConfig.simple(20))
"""

__version__ = "0.1.0"

from .chunkers import (
    FixedSizeChunker,
    MessageChunker,
    SmartChunker,
    annotate,
    create_chunker,
    simple_chunk,
    smart_chunk,
)
from .classifier import classify
from .config import load_chunking_config
from .errors import (
    ChunkingError,
    ChunkingServiceError,
    InsufficientDataError,
    InvalidChunkSizeError,
    InvalidConfigurationError,
    InvalidMessageError,
    format_error,
    is_retryable_error,
)
from .models import (
    DEFAULT_CHUNKING_CONFIG,
    AnnotatedMessage,
    Author,
    ChunkingConfig,
    ChunkingResult,
    Message,
)
from .scorer import score
from .service import (
    ChunkingService,
    chunk_messages,
    chunk_messages_default,
    chunk_messages_simple,
)
from .validation import (
    load_messages,
    validate_json,
    validate_message_collection,
    validate_message_count,
)

__all__ = [
    # Version
    "__version__",
    # Data classes
    "Author",
    "Message",
    "AnnotatedMessage",
    "ChunkingConfig",
    "ChunkingResult",
    "DEFAULT_CHUNKING_CONFIG",
    # Pipeline
    "classify",
    "score",
    "annotate",
    "smart_chunk",
    "simple_chunk",
    "chunk_messages",
    "chunk_messages_default",
    "chunk_messages_simple",
    # Strategies
    "MessageChunker",
    "SmartChunker",
    "FixedSizeChunker",
    "create_chunker",
    # Service
    "ChunkingService",
    # Configuration
    "load_chunking_config",
    # Validation
    "load_messages",
    "validate_json",
    "validate_message_collection",
    "validate_message_count",
    # Errors
    "ChunkingServiceError",
    "ChunkingError",
    "InvalidChunkSizeError",
    "InvalidConfigurationError",
    "InvalidMessageError",
    "InsufficientDataError",
    "format_error",
    "is_retryable_error",
]
