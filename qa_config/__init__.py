# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""QA-Chunking Configuration Adapter.

Small provider abstraction for reading settings from the environment or from
a static dictionary (useful in tests).

Example:
    >>> from qa_config import EnvConfigProvider, StaticConfigProvider
    >>>
    >>> provider = EnvConfigProvider()
    >>> chunk_size = provider.get_int("CHUNK_SIZE", 50)
    >>>
    >>> test_provider = StaticConfigProvider({"SMART_CHUNKING": "false"})
    >>> test_provider.get_bool("SMART_CHUNKING", True)
    False
"""

__version__ = "0.1.0"

from .base import ConfigProvider
from .env_provider import EnvConfigProvider
from .static_provider import StaticConfigProvider

__all__ = [
    "__version__",
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
]
