# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Root conftest.py: import path setup and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests.fixtures and the packages import from a checkout
_repo_root = Path(__file__).parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

from qa_logging import SilentLogger  # noqa: E402
from qa_metrics import NoOpMetricsCollector  # noqa: E402


@pytest.fixture
def silent_logger():
    """Logger that records entries in memory."""
    return SilentLogger(name="qa-chunking-test")


@pytest.fixture
def noop_metrics():
    """Metrics collector that records calls in memory."""
    return NoOpMetricsCollector()
