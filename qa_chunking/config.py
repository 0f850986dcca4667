# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Load chunking configuration from a config provider.

Environment variables:
    CHUNK_SIZE: Target chunk size in messages, 1-500 (default: 50)
    SMART_CHUNKING: Use relationship-aware chunking (default: true)
    MIN_RELATIONSHIP_SCORE: Soft break threshold, 0-100 (default: 75)
    MAX_CHUNK_OVERFLOW: Hard ceiling as a multiple of CHUNK_SIZE (default: 1.5)
"""

from typing import Optional

from qa_config import ConfigProvider, EnvConfigProvider

from .errors import MAX_CHUNK_SIZE, MIN_CHUNK_SIZE, InvalidConfigurationError
from .models import DEFAULT_CHUNKING_CONFIG, ChunkingConfig


def load_chunking_config(provider: Optional[ConfigProvider] = None) -> ChunkingConfig:
    """Build a ChunkingConfig from provider settings.

    Args:
        provider: Source of settings (environment if omitted)

    Returns:
        ChunkingConfig with defaults for unset keys

    Raises:
        InvalidConfigurationError: If a value is out of range
    """
    provider = provider or EnvConfigProvider()

    chunk_size = provider.get_int("CHUNK_SIZE", DEFAULT_CHUNKING_CONFIG.target_size)
    if not MIN_CHUNK_SIZE <= chunk_size <= MAX_CHUNK_SIZE:
        raise InvalidConfigurationError(
            "CHUNK_SIZE", chunk_size,
            f"Chunk size must be between {MIN_CHUNK_SIZE} and {MAX_CHUNK_SIZE}",
        )

    min_score = provider.get_int("MIN_RELATIONSHIP_SCORE", DEFAULT_CHUNKING_CONFIG.min_relationship_score)
    if not 0 <= min_score <= 100:
        raise InvalidConfigurationError(
            "MIN_RELATIONSHIP_SCORE", min_score,
            "Relationship score must be between 0 and 100",
        )

    overflow = provider.get_float("MAX_CHUNK_OVERFLOW", DEFAULT_CHUNKING_CONFIG.max_chunk_overflow)
    if not overflow > 0:
        raise InvalidConfigurationError(
            "MAX_CHUNK_OVERFLOW", overflow,
            "Chunk overflow multiplier must be greater than 0",
        )

    return ChunkingConfig(
        target_size=chunk_size,
        use_smart_chunking=provider.get_bool("SMART_CHUNKING", DEFAULT_CHUNKING_CONFIG.use_smart_chunking),
        min_relationship_score=min_score,
        max_chunk_overflow=overflow,
    )
