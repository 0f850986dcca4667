# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Relationship scoring between consecutive messages.

Four independent signals are summed:

1. Sequence adjacency: +100 for the next sequence id, +50 when exactly one
   message is missing in between.
2. Q&A pattern: +50 when a likely answer from a different author follows a
   likely question.
3. Same author continuing: +30.
4. Timestamp proximity: +25 within 5 minutes, +10 within 15 minutes,
   -20 beyond 30 minutes.

The total is not clamped and can be negative. The default
min_relationship_score of 75 is calibrated against these constants.
"""

from .models import AnnotatedMessage

ADJACENT_SEQUENCE_SCORE = 100
SKIP_ONE_SEQUENCE_SCORE = 50
QA_PATTERN_SCORE = 50
SAME_AUTHOR_SCORE = 30
VERY_CLOSE_TIME_SCORE = 25
CLOSE_TIME_SCORE = 10
DISTANT_TIME_PENALTY = -20

VERY_CLOSE_MINUTES = 5
CLOSE_MINUTES = 15
DISTANT_MINUTES = 30


def sequence_score(current: AnnotatedMessage, previous: AnnotatedMessage) -> int:
    gap = current.message.sequence_id - previous.message.sequence_id
    if gap == 1:
        return ADJACENT_SEQUENCE_SCORE
    if gap == 2:
        return SKIP_ONE_SEQUENCE_SCORE
    return 0


def qa_pattern_score(current: AnnotatedMessage, previous: AnnotatedMessage) -> int:
    if (
        previous.is_likely_question
        and current.is_likely_answer
        and current.message.author.id != previous.message.author.id
    ):
        return QA_PATTERN_SCORE
    return 0


def same_author_score(current: AnnotatedMessage, previous: AnnotatedMessage) -> int:
    if current.message.author.id == previous.message.author.id:
        return SAME_AUTHOR_SCORE
    return 0


def minutes_between(current: AnnotatedMessage, previous: AnnotatedMessage) -> float:
    """Signed minutes from previous to current (negative if current is earlier)."""
    delta = current.message.sent_at - previous.message.sent_at
    return delta.total_seconds() / 60


def time_proximity_score(current: AnnotatedMessage, previous: AnnotatedMessage) -> int:
    # Signed: a timestamp earlier than the previous one lands in the closest band.
    minutes = minutes_between(current, previous)
    if minutes <= VERY_CLOSE_MINUTES:
        return VERY_CLOSE_TIME_SCORE
    if minutes <= CLOSE_MINUTES:
        return CLOSE_TIME_SCORE
    if minutes > DISTANT_MINUTES:
        return DISTANT_TIME_PENALTY
    return 0


def score(current: AnnotatedMessage, previous: AnnotatedMessage) -> int:
    """Score how strongly current belongs with the message before it.

    Args:
        current: The later message in walk order
        previous: The message immediately before it

    Returns:
        Sum of the four signal contributions

    Raises:
        InvalidMessageError: If either timestamp cannot be parsed
    """
    return (
        sequence_score(current, previous)
        + qa_pattern_score(current, previous)
        + same_author_score(current, previous)
        + time_proximity_score(current, previous)
    )
