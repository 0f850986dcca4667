# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Shared test fixtures for building chat messages.

Usage:
    from tests.fixtures import create_message, create_conversation

    message = create_message(sequence_id=3, content="How do I retry?")
    conversation = create_conversation(12)
"""

from .message_fixtures import (  # noqa: F401
    BASE_TIME,
    create_conversation,
    create_message,
    create_message_record,
    iso_at,
)

__all__ = [
    "BASE_TIME",
    "iso_at",
    "create_message",
    "create_message_record",
    "create_conversation",
]
