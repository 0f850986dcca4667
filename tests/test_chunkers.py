# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Tests for the smart and simple chunk builders."""

from unittest.mock import patch

import pytest

from qa_chunking import (
    ChunkingConfig,
    FixedSizeChunker,
    MessageChunker,
    SmartChunker,
    annotate,
    create_chunker,
    simple_chunk,
    smart_chunk,
)
from tests.fixtures import create_conversation, create_message


def _flatten(chunks):
    return [message for chunk in chunks for message in chunk]


def _ids(chunks):
    return [[message.sequence_id for message in chunk] for chunk in chunks]


class TestSimpleChunk:
    """Tests for fixed-size windows."""

    def test_ten_messages_by_three(self):
        """Test windows of three with a short final window."""
        messages = [create_message(sequence_id=i) for i in range(1, 11)]

        chunks = simple_chunk(messages, 3)

        assert _ids(chunks) == [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10]]

    def test_exact_multiple(self):
        """Test that no empty trailing chunk is produced."""
        messages = [create_message(sequence_id=i) for i in range(1, 7)]

        assert _ids(simple_chunk(messages, 3)) == [[1, 2, 3], [4, 5, 6]]

    def test_empty_input(self):
        """Test that no messages produce no chunks."""
        assert simple_chunk([], 5) == []

    def test_does_not_classify(self):
        """Test that the simple strategy never classifies messages."""
        messages = create_conversation(12)

        with patch("qa_chunking.chunkers.classify") as mock_classify:
            simple_chunk(messages, 5)

        mock_classify.assert_not_called()

    def test_invalid_size(self):
        """Test that window sizes below one are rejected."""
        with pytest.raises(ValueError, match="at least 1"):
            simple_chunk([create_message()], 0)


class TestSmartChunkShortcuts:
    """Tests for the empty and short-input paths."""

    def test_empty_input(self):
        """Test that no messages produce no chunks."""
        assert smart_chunk([], ChunkingConfig.default()) == []

    def test_short_input_is_single_chunk(self):
        """Test pass-through without classification or scoring."""
        messages = create_conversation(5)
        config = ChunkingConfig(target_size=5)

        with patch("qa_chunking.chunkers.classify") as mock_classify, \
                patch("qa_chunking.chunkers.score") as mock_score:
            chunks = smart_chunk(messages, config)

        assert chunks == [messages]
        mock_classify.assert_not_called()
        mock_score.assert_not_called()


class TestSmartChunkBreaks:
    """Tests for the soft and hard break rules."""

    def test_related_messages_overflow_target(self):
        """Test that strongly related messages stay together past the target size."""
        # Same author, consecutive, one minute apart: every score is 155
        messages = [
            create_message(sequence_id=i, author_id="alice", minutes=i) for i in range(1, 31)
        ]
        config = ChunkingConfig(target_size=5, min_relationship_score=75, max_chunk_overflow=1.5)

        chunks = smart_chunk(messages, config)

        assert len(chunks) == 1
        assert len(chunks[0]) == 30

    def test_soft_break_at_target_size(self):
        """Test that scores below the threshold cut as soon as the target is reached."""
        # Different authors, one missing message between each, 20 minutes apart: every score is 50
        messages = [
            create_message(sequence_id=2 * i, author_id=f"user-{i % 2}", minutes=20 * i)
            for i in range(10)
        ]
        config = ChunkingConfig(target_size=5, min_relationship_score=75, max_chunk_overflow=1.5)

        chunks = smart_chunk(messages, config)

        assert [len(chunk) for chunk in chunks] == [5, 5]
        assert _flatten(chunks) == messages

    def test_hard_break_past_overflow(self):
        """Test the overflow escape valve when scores stay above the threshold but below 50."""
        # Different authors, sequence gaps of five, one minute apart: every score is 25
        messages = [
            create_message(sequence_id=5 * i, author_id=f"user-{i % 2}", minutes=i)
            for i in range(20)
        ]
        config = ChunkingConfig(target_size=4, min_relationship_score=10, max_chunk_overflow=1.5)

        chunks = smart_chunk(messages, config)

        # Ceiling is 4 * 1.5 = 6, so a chunk is cut once it holds 7 messages
        assert [len(chunk) for chunk in chunks] == [7, 7, 6]
        assert _flatten(chunks) == messages

    def test_hard_break_needs_score_below_fifty(self):
        """Test that overflow alone does not cut a chunk scoring 50 or more."""
        # Every score is exactly 50 and min_relationship_score is 0, so nothing breaks
        messages = [
            create_message(sequence_id=2 * i, author_id=f"user-{i % 2}", minutes=20 * i)
            for i in range(12)
        ]
        config = ChunkingConfig(target_size=3, min_relationship_score=0, max_chunk_overflow=1.0)

        assert len(smart_chunk(messages, config)) == 1

    def test_question_and_answer_kept_together(self):
        """Test that an answer is not split from its question at the target boundary."""
        messages = [
            create_message(sequence_id=1, author_id="alice", content="Morning all", minutes=0),
            create_message(sequence_id=2, author_id="bob", content="Morning", minutes=1),
            create_message(sequence_id=3, author_id="carol", content="How do I retry an effect?", minutes=2),
            create_message(
                sequence_id=4, author_id="dave", content="You can use Effect.retry with a schedule", minutes=3,
            ),
            create_message(sequence_id=8, author_id="erin", content="Release notes are out", minutes=120),
        ]
        config = ChunkingConfig(target_size=3, min_relationship_score=75, max_chunk_overflow=1.5)

        chunks = smart_chunk(messages, config)

        assert _ids(chunks) == [[1, 2, 3, 4], [8]]


class TestAnnotate:
    """Tests for the annotation pass."""

    def test_scores_against_previous(self):
        """Test that each record carries its score against its predecessor."""
        messages = [
            create_message(sequence_id=5, author_id="alice", minutes=0),
            create_message(sequence_id=6, author_id="alice", minutes=2),
            create_message(sequence_id=30, author_id="bob", minutes=90),
        ]

        annotated = list(annotate(messages))

        assert [a.relationship_score for a in annotated] == [0, 155, -20]
        assert [a.message for a in annotated] == messages


class TestOrderPreservation:
    """Chunk concatenation must reproduce the input for every configuration."""

    @pytest.mark.parametrize("target_size", [1, 2, 3, 7, 20, 100])
    @pytest.mark.parametrize("min_score", [0, 75, 100])
    @pytest.mark.parametrize("overflow", [1.0, 1.5, 3.0])
    def test_smart_preserves_order(self, target_size, min_score, overflow):
        """Test smart chunking over a mixed conversation."""
        messages = create_conversation(60)
        config = ChunkingConfig(
            target_size=target_size, min_relationship_score=min_score, max_chunk_overflow=overflow,
        )

        chunks = smart_chunk(messages, config)

        assert _flatten(chunks) == messages
        assert all(chunks)

    @pytest.mark.parametrize("chunk_size", [1, 4, 59, 60, 61])
    def test_simple_preserves_order(self, chunk_size):
        """Test simple chunking over a mixed conversation."""
        messages = create_conversation(60)

        chunks = simple_chunk(messages, chunk_size)

        assert _flatten(chunks) == messages
        assert all(len(chunk) <= chunk_size for chunk in chunks)


class TestChunkerFactory:
    """Tests for strategy objects and create_chunker()."""

    def test_create_smart_chunker(self):
        """Test creating the smart strategy."""
        config = ChunkingConfig(target_size=10)

        chunker = create_chunker("smart", config=config)

        assert isinstance(chunker, SmartChunker)
        assert isinstance(chunker, MessageChunker)
        assert chunker.config is config
        assert chunker.strategy == "smart"

    def test_smart_chunker_defaults_to_preset(self):
        """Test that the smart strategy falls back to the default preset."""
        assert SmartChunker().config == ChunkingConfig.default()

    def test_create_simple_chunker(self):
        """Test creating the simple strategy from an explicit size or a config."""
        assert create_chunker("simple", chunk_size=4).chunk_size == 4
        assert create_chunker("SIMPLE", config=ChunkingConfig(target_size=9)).chunk_size == 9
        assert create_chunker("simple").chunk_size == 50

    def test_fixed_size_chunker_chunks(self):
        """Test that the strategy object delegates to simple_chunk."""
        messages = [create_message(sequence_id=i) for i in range(1, 6)]

        assert _ids(FixedSizeChunker(2).chunk(messages)) == [[1, 2], [3, 4], [5]]

    def test_fixed_size_chunker_rejects_zero(self):
        """Test validation of the window size."""
        with pytest.raises(ValueError, match="at least 1"):
            FixedSizeChunker(0)

    def test_unknown_strategy(self):
        """Test that unknown strategy names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown chunking strategy"):
            create_chunker("semantic")
