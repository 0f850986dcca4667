# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Question/answer classification of chat messages.

Plain, case-insensitive keyword matching.
"""

import re

from .models import AnnotatedMessage, Message

QUESTION_PATTERN = re.compile(
    r"how (do|to|can)|is there|what('s| is)|can i|why (does|is|are)",
    re.IGNORECASE,
)
ANSWER_PREFIX_PATTERN = re.compile(
    r"^(yes|no|you can|try|use|the answer|check out)",
    re.IGNORECASE,
)
CODE_FENCE = "```"
LONG_ANSWER_LENGTH = 100


def is_likely_question(content: str) -> bool:
    return "?" in content or QUESTION_PATTERN.search(content) is not None


def is_likely_answer(content: str) -> bool:
    return (
        len(content) > LONG_ANSWER_LENGTH
        or CODE_FENCE in content
        or ANSWER_PREFIX_PATTERN.match(content) is not None
    )


def classify(message: Message) -> AnnotatedMessage:
    """Annotate a message with question/answer signals.

    Args:
        message: Message to classify; non-string content is matched on its
            str() form

    Returns:
        AnnotatedMessage with a relationship score of 0
    """
    content = str(message.content)
    return AnnotatedMessage(
        message=message,
        is_likely_question=is_likely_question(content),
        is_likely_answer=is_likely_answer(content),
        relationship_score=0,
    )
