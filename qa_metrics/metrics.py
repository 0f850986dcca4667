# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Metrics collection abstraction for observability."""

import os
from abc import ABC, abstractmethod
from typing import Dict, Optional


class MetricsCollector(ABC):
    """Abstract base class for metrics collectors.

    Chunking records two kinds of metrics: counters (runs, messages) and
    distributions (chunk sizes, run durations). Tags become metric labels;
    one metric name must always be used with the same tag keys.
    """

    @abstractmethod
    def increment(self, name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
        """Add value to the counter name."""
        pass

    @abstractmethod
    def observe(self, name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
        """Record one sample of the distribution name."""
        pass


def create_metrics_collector(
    backend: Optional[str] = None,
    **kwargs
) -> MetricsCollector:
    """Factory function to create a metrics collector based on backend type.

    Args:
        backend: Type of metrics backend ("prometheus", "noop", or None to read
            METRICS_BACKEND from the environment, defaulting to "noop")
        **kwargs: Additional backend-specific arguments

    Returns:
        MetricsCollector instance

    Raises:
        ValueError: If backend type is unknown
    """
    if backend is None:
        backend = os.getenv("METRICS_BACKEND", "noop")

    backend = backend.lower()

    if backend == "prometheus":
        from .prometheus_metrics import PrometheusMetricsCollector
        return PrometheusMetricsCollector(**kwargs)
    elif backend == "noop":
        from .noop_metrics import NoOpMetricsCollector
        return NoOpMetricsCollector(**kwargs)
    else:
        raise ValueError(f"Unknown metrics backend: {backend}")
