# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""Prometheus metrics collector implementation."""

import logging
from typing import Dict, Optional, Sequence, Tuple

from prometheus_client import CollectorRegistry, Counter, Histogram

from .metrics import MetricsCollector

logger = logging.getLogger(__name__)

# Chunk sizes are message counts; the smart strategy may overflow the
# largest target size (500) by its overflow multiplier.
CHUNK_SIZE_BUCKETS = (1, 5, 10, 25, 50, 75, 100, 150, 250, 500, 750)

DEFAULT_BUCKETS: Dict[str, Sequence[float]] = {
    "chunking_chunk_size": CHUNK_SIZE_BUCKETS,
}

_MetricKey = Tuple[str, Tuple[str, ...]]


class PrometheusMetricsCollector(MetricsCollector):
    """Collector backed by prometheus_client counters and histograms.

    Metrics are created lazily, one per (name, tag keys), in the collector's
    registry and prefixed with the namespace. Histograms use the buckets
    configured for their name, or prometheus_client's defaults (suited to
    durations in seconds).

    A failing call is logged and dropped so one bad metric does not stop the
    others from being recorded.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None, namespace: str = "qa_chunking",
                 buckets: Optional[Dict[str, Sequence[float]]] = None):
        """Initialize Prometheus metrics collector.

        Args:
            registry: Registry to register metrics in (a private one if None)
            namespace: Prefix for every metric name
            buckets: Histogram buckets per metric name, merged over DEFAULT_BUCKETS
        """
        self.registry = registry if registry is not None else CollectorRegistry()
        self.namespace = namespace
        self.buckets = {**DEFAULT_BUCKETS, **(buckets or {})}
        self._counters: Dict[_MetricKey, Counter] = {}
        self._histograms: Dict[_MetricKey, Histogram] = {}

    def _counter(self, name: str, labelnames: Tuple[str, ...]) -> Counter:
        key = (name, labelnames)
        if key not in self._counters:
            self._counters[key] = Counter(
                name, f"Counter metric: {name}", labelnames,
                namespace=self.namespace, registry=self.registry,
            )
        return self._counters[key]

    def _histogram(self, name: str, labelnames: Tuple[str, ...]) -> Histogram:
        key = (name, labelnames)
        if key not in self._histograms:
            kwargs = {"buckets": self.buckets[name]} if name in self.buckets else {}
            self._histograms[key] = Histogram(
                name, f"Histogram metric: {name}", labelnames,
                namespace=self.namespace, registry=self.registry, **kwargs,
            )
        return self._histograms[key]

    def increment(self, name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
        tags = tags or {}
        try:
            counter = self._counter(name, tuple(sorted(tags)))
            (counter.labels(**tags) if tags else counter).inc(value)
        except Exception as e:
            logger.error(f"Failed to increment counter {name}: {e}")

    def observe(self, name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
        tags = tags or {}
        try:
            histogram = self._histogram(name, tuple(sorted(tags)))
            (histogram.labels(**tags) if tags else histogram).observe(value)
        except Exception as e:
            logger.error(f"Failed to observe histogram {name}: {e}")
