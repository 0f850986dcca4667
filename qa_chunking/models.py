# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Data classes shared by the chunking pipeline."""

import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from functools import cached_property
from typing import Any, Dict, List, Literal

from .errors import InvalidMessageError

Strategy = Literal["smart", "simple"]

# Forms fromisoformat does not read on every supported Python: a fraction
# that is not 3 or 6 digits, a Z suffix, and offsets without a colon.
_TIMESTAMP_PATTERN = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)?$"
)


def _normalize_timestamp(raw: str) -> str:
    match = _TIMESTAMP_PATTERN.match(raw)
    if match is None:
        return raw
    normalized = match["base"]
    if match["fraction"]:
        normalized += "." + match["fraction"][:6].ljust(6, "0")
    offset = match["offset"]
    if offset:
        if offset in ("Z", "z"):
            offset = "+00:00"
        else:
            digits = offset[1:].replace(":", "")
            offset = f"{offset[0]}{digits[:2]}:{digits[2:] or '00'}"
        normalized += offset
    return normalized


def parse_timestamp(timestamp: str, message_id: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Naive values are read as UTC.

    Raises:
        InvalidMessageError: If the timestamp is not ISO-8601
    """
    try:
        parsed = datetime.fromisoformat(_normalize_timestamp(str(timestamp).strip()))
    except ValueError as e:
        raise InvalidMessageError(
            [f"Invalid timestamp '{timestamp}' for message {message_id}"]
        ) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Author:
    """Message author.

    Attributes:
        id: Stable author identifier (compared for authorship signals)
        name: Display name
    """
    id: str
    name: str


@dataclass(frozen=True)
class Message:
    """A single chat message, already validated by the caller.

    Attributes:
        sequence_id: Position in the source conversation; increasing but
            not necessarily contiguous
        id: Opaque unique identifier
        content: Raw message text
        author: Message author
        timestamp: ISO-8601 instant
    """
    sequence_id: int
    id: str
    content: str
    author: Author
    timestamp: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        """Build a message from a raw record.

        The record uses the export shape ``{"seqId", "id", "content",
        "author": {"id", "name"}, "timestamp"}``; ``sequence_id`` is accepted
        in place of ``seqId``.

        Raises:
            InvalidMessageError: If a required field is missing
        """
        try:
            sequence_id = data["seqId"] if "seqId" in data else data["sequence_id"]
            author = data["author"]
            return cls(
                sequence_id=sequence_id,
                id=data["id"],
                content=data["content"],
                author=Author(id=author["id"], name=author["name"]),
                timestamp=data["timestamp"],
            )
        except (KeyError, TypeError) as e:
            raise InvalidMessageError([f"Missing or malformed field: {e}"]) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert the message back to its raw record shape."""
        return {
            "seqId": self.sequence_id,
            "id": self.id,
            "content": self.content,
            "author": {"id": self.author.id, "name": self.author.name},
            "timestamp": self.timestamp,
        }

    @cached_property
    def sent_at(self) -> datetime:
        """The timestamp as an aware datetime, parsed on first access.

        Raises:
            InvalidMessageError: If the timestamp is not ISO-8601
        """
        return parse_timestamp(self.timestamp, self.id)


@dataclass(frozen=True)
class AnnotatedMessage:
    """A message plus the signals derived for chunking.

    Instances are never mutated; the chunking pass produces a new instance
    carrying the relationship score via with_score().

    Attributes:
        message: The wrapped message
        is_likely_question: Text heuristics flag this as a question
        is_likely_answer: Text heuristics flag this as an answer
        relationship_score: Affinity with the preceding message (0 for the first)
    """
    message: Message
    is_likely_question: bool
    is_likely_answer: bool
    relationship_score: int = 0

    def with_score(self, score: int) -> "AnnotatedMessage":
        return replace(self, relationship_score=score)


@dataclass(frozen=True)
class ChunkingConfig:
    """Chunking strategy settings.

    Attributes:
        target_size: Desired chunk length in messages (1-500)
        use_smart_chunking: Use the relationship-aware builder instead of
            fixed-size windows
        min_relationship_score: Scores below this allow a cut once a chunk
            has reached target_size (0-100)
        max_chunk_overflow: Multiplier of target_size past which a chunk is
            cut whenever the score drops below 50
    """
    target_size: int
    use_smart_chunking: bool = True
    min_relationship_score: int = 75
    max_chunk_overflow: float = 1.5

    @classmethod
    def default(cls) -> "ChunkingConfig":
        """Smart chunking preset used by the analyzer."""
        return cls(
            target_size=50,
            use_smart_chunking=True,
            min_relationship_score=75,
            max_chunk_overflow=1.5,
        )

    @classmethod
    def simple(cls, chunk_size: int) -> "ChunkingConfig":
        """Fixed-size windows of chunk_size messages."""
        return cls(
            target_size=chunk_size,
            use_smart_chunking=False,
            min_relationship_score=0,
            max_chunk_overflow=1.0,
        )


DEFAULT_CHUNKING_CONFIG = ChunkingConfig.default()


@dataclass(frozen=True)
class ChunkingResult:
    """Chunks produced by one run plus summary statistics.

    Attributes:
        chunks: Ordered partition of the input messages
        total_messages: Number of input messages
        chunk_count: Number of chunks
        average_chunk_size: total_messages / chunk_count, rounded half up
        strategy: "smart" or "simple"
    """
    chunks: List[List[Message]]
    total_messages: int
    chunk_count: int
    average_chunk_size: int
    strategy: Strategy

    @property
    def chunk_sizes(self) -> List[int]:
        return [len(chunk) for chunk in self.chunks]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the result with messages in their raw record shape."""
        return {
            "chunks": [[message.to_dict() for message in chunk] for chunk in self.chunks],
            "totalMessages": self.total_messages,
            "chunkCount": self.chunk_count,
            "averageChunkSize": self.average_chunk_size,
            "strategy": self.strategy,
            "chunkSizes": self.chunk_sizes,
        }
