# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""QA-Chunking Metrics Adapter.

Pluggable metrics collection for the chunking pipeline.

Example:
    >>> from qa_metrics import create_metrics_collector
    >>>
    >>> collector = create_metrics_collector("noop")
    >>> collector.increment("chunking_runs_total", tags={"strategy": "smart"})
"""

__version__ = "0.1.0"

from .metrics import MetricsCollector, create_metrics_collector
from .noop_metrics import MetricRecord, NoOpMetricsCollector
from .prometheus_metrics import PrometheusMetricsCollector

__all__ = [
    "__version__",
    "MetricsCollector",
    "MetricRecord",
    "NoOpMetricsCollector",
    "PrometheusMetricsCollector",
    "create_metrics_collector",
]
