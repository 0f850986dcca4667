# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Chunk builders for ordered chat messages.

Two strategies are provided:

- smart: walks the conversation once and only cuts a chunk where the
  relationship score between neighbours is low, so question/answer exchanges
  stay together even if the chunk grows past its target size.
- simple: fixed windows of N messages.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Sequence

from .classifier import classify
from .models import AnnotatedMessage, ChunkingConfig, Message
from .scorer import score

# Below this score a chunk that has outgrown its overflow ceiling is cut
FORCE_BREAK_SCORE = 50


def annotate(messages: Sequence[Message]) -> Iterator[AnnotatedMessage]:
    """Classify and score messages in one left-to-right pass.

    Yields a fresh AnnotatedMessage per input message; the first carries a
    score of 0, every later one its score against the message before it.
    """
    previous: Optional[AnnotatedMessage] = None
    for message in messages:
        current = classify(message)
        if previous is not None:
            current = current.with_score(score(current, previous))
        yield current
        previous = current


def smart_chunk(messages: Sequence[Message], config: ChunkingConfig) -> List[List[Message]]:
    """Split messages into chunks that keep related messages together.

    A chunk is cut before a message when either:

    - the chunk already holds target_size messages and the message scores
      below min_relationship_score, or
    - the chunk holds more than target_size * max_chunk_overflow messages and
      the message scores below 50.

    Otherwise the message joins the current chunk, even past target_size.

    Args:
        messages: Messages in conversation order
        config: Chunking settings

    Returns:
        Ordered chunks whose concatenation is the input
    """
    if not messages:
        return []
    if len(messages) <= config.target_size:
        return [list(messages)]

    max_overflow = config.target_size * config.max_chunk_overflow
    chunks: List[List[Message]] = []
    current_chunk: List[Message] = []

    for annotated in annotate(messages):
        if not current_chunk:
            current_chunk.append(annotated.message)
            continue

        relationship_score = annotated.relationship_score
        at_target_size = len(current_chunk) >= config.target_size
        low_relationship = relationship_score < config.min_relationship_score
        should_break = at_target_size and low_relationship

        way_over_size = len(current_chunk) > max_overflow
        force_break = way_over_size and relationship_score < FORCE_BREAK_SCORE

        if should_break or force_break:
            chunks.append(current_chunk)
            current_chunk = [annotated.message]
        else:
            current_chunk.append(annotated.message)

    if current_chunk:
        chunks.append(current_chunk)

    return chunks


def simple_chunk(messages: Sequence[Message], chunk_size: int) -> List[List[Message]]:
    """Split messages into consecutive windows of chunk_size.

    The last window may be shorter. No classification is performed.

    Raises:
        ValueError: If chunk_size is less than 1
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    return [list(messages[i:i + chunk_size]) for i in range(0, len(messages), chunk_size)]


class MessageChunker(ABC):
    """Abstract base class for message chunking strategies."""

    strategy: str

    @abstractmethod
    def chunk(self, messages: Sequence[Message]) -> List[List[Message]]:
        """Chunk ordered messages.

        Args:
            messages: Messages in conversation order

        Returns:
            Ordered chunks whose concatenation is the input
        """
        pass


class SmartChunker(MessageChunker):
    """Relationship-aware chunking strategy."""

    strategy = "smart"

    def __init__(self, config: Optional[ChunkingConfig] = None):
        self.config = config or ChunkingConfig.default()

    def chunk(self, messages: Sequence[Message]) -> List[List[Message]]:
        return smart_chunk(messages, self.config)


class FixedSizeChunker(MessageChunker):
    """Chunking strategy with a fixed number of messages per chunk."""

    strategy = "simple"

    def __init__(self, chunk_size: int = 50):
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self.chunk_size = chunk_size

    def chunk(self, messages: Sequence[Message]) -> List[List[Message]]:
        return simple_chunk(messages, self.chunk_size)


def create_chunker(strategy: str, config: Optional[ChunkingConfig] = None,
                   chunk_size: Optional[int] = None) -> MessageChunker:
    """Factory method to create a chunker based on strategy name.

    Args:
        strategy: "smart" or "simple"
        config: Settings for the smart strategy (default preset if omitted)
        chunk_size: Window size for the simple strategy; falls back to
            config.target_size, then 50

    Returns:
        MessageChunker instance

    Raises:
        ValueError: If strategy is unknown
    """
    strategy_lower = strategy.lower()

    if strategy_lower == "smart":
        return SmartChunker(config)
    elif strategy_lower == "simple":
        if chunk_size is None:
            chunk_size = config.target_size if config is not None else 50
        return FixedSizeChunker(chunk_size)
    else:
        raise ValueError(
            f"Unknown chunking strategy: {strategy}. "
            f"Valid options: smart, simple"
        )
