# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Validation of raw message records before chunking.

Records are checked against a JSON Schema first, then every timestamp is
parsed so malformed instants are rejected up front instead of skewing the
timestamp proximity signal.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from jsonschema import Draft202012Validator

from .errors import InsufficientDataError, InvalidMessageError
from .models import Message

logger = logging.getLogger(__name__)

_NON_EMPTY_STRING = {"type": "string", "minLength": 1}

AUTHOR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": _NON_EMPTY_STRING,
        "name": _NON_EMPTY_STRING,
    },
    "required": ["id", "name"],
}

MESSAGE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "seqId": {"type": "integer", "exclusiveMinimum": 0},
        "id": _NON_EMPTY_STRING,
        "content": _NON_EMPTY_STRING,
        "author": AUTHOR_SCHEMA,
        "timestamp": {"type": "string"},
    },
    "required": ["seqId", "id", "content", "author", "timestamp"],
}

MESSAGE_COLLECTION_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "messages": {
            "type": "array",
            "items": MESSAGE_SCHEMA,
            "minItems": 1,
        },
    },
    "required": ["messages"],
}


def validate_json(document: Any, schema: dict[str, Any]) -> tuple[bool, list[str]]:
    """Validate a JSON document against a JSON schema.

    Args:
        document: The JSON document to validate.
        schema: The JSON schema to validate against.

    Returns:
        Tuple of (is_valid, errors). errors holds one human-readable entry per
        violation, suffixed with its location when it is not the root.
    """
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: e.json_path)
    if not errors:
        return True, []

    messages: list[str] = []
    for err in errors:
        path = ".".join(str(p) for p in err.absolute_path)
        location = f" at '{path}'" if path else ""
        messages.append(f"{err.message}{location}")
    return False, messages


def validate_message_collection(data: Any) -> List[Message]:
    """Validate a raw ``{"messages": [...]}`` collection and build messages.

    Args:
        data: Decoded JSON payload

    Returns:
        Messages in the order supplied

    Raises:
        InvalidMessageError: With every schema and timestamp problem found
    """
    is_valid, errors = validate_json(data, MESSAGE_COLLECTION_SCHEMA)
    if not is_valid:
        logger.error(f"Schema validation failed: {len(errors)} error(s)")
        raise InvalidMessageError(errors)

    messages = [Message.from_dict(record) for record in data["messages"]]

    timestamp_errors: list[str] = []
    for message in messages:
        try:
            message.sent_at
        except InvalidMessageError as e:
            timestamp_errors.extend(e.errors)
    if timestamp_errors:
        raise InvalidMessageError(timestamp_errors)

    logger.debug(f"Validated {len(messages)} messages successfully")
    return messages


def validate_message_count(messages: Sequence[Message], minimum: int) -> Sequence[Message]:
    """Ensure at least minimum messages were supplied.

    Raises:
        InsufficientDataError: If there are fewer than minimum messages
    """
    if len(messages) < minimum:
        raise InsufficientDataError(count=len(messages), minimum=minimum)
    return messages


def load_messages(path: str | Path) -> List[Message]:
    """Read and validate a JSON message export.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidMessageError: If the file is not JSON or fails validation
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidMessageError([f"Invalid JSON in file {path}: {e.msg}"]) from e
    return validate_message_collection(data)
