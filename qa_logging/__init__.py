# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""QA-Chunking Logging Adapter.

Consistent, structured logging for the chunking pipeline and the services
that embed it.

Example:
    >>> from qa_logging import create_logger
    >>>
    >>> # Create a logger with structured output
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="qa-analyzer")
    >>> logger.info("Chunking complete", chunk_count=3, strategy="smart")
    >>>
    >>> # Create a silent logger for testing
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.info("Test message")
"""

__version__ = "0.1.0"

from .factory import create_logger, create_stdout_logger, get_logger, set_default_logger
from .logger import Logger
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "__version__",
    "Logger",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
    "create_stdout_logger",
    "get_logger",
    "set_default_logger",
]
