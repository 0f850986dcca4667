# SPDX-License-Identifier: MIT
# Copyright (c) 2025 QA-Chunking contributors

"""In-memory metrics collector for tests and local runs."""

from typing import Dict, List, NamedTuple, Optional

from .metrics import MetricsCollector


class MetricRecord(NamedTuple):
    kind: str  # "counter" or "observation"
    name: str
    value: float
    tags: Optional[Dict[str, str]]


class NoOpMetricsCollector(MetricsCollector):
    """Collector that exports nothing and keeps every call for inspection."""

    def __init__(self, **kwargs):
        # kwargs accepted so the factory can pass backend options uniformly
        self.records: List[MetricRecord] = []

    def increment(self, name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
        self.records.append(MetricRecord("counter", name, value, tags))

    def observe(self, name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
        self.records.append(MetricRecord("observation", name, value, tags))

    def _matching(self, kind: str, name: str, tags: Optional[Dict[str, str]]) -> List[float]:
        return [
            record.value for record in self.records
            if record.kind == kind and record.name == name and (tags is None or record.tags == tags)
        ]

    def get_counter_total(self, name: str, tags: Optional[Dict[str, str]] = None) -> float:
        """Sum of increments to name; tags=None matches any tags."""
        return sum(self._matching("counter", name, tags))

    def get_observations(self, name: str, tags: Optional[Dict[str, str]] = None) -> List[float]:
        """Observed values for name in call order; tags=None matches any tags."""
        return self._matching("observation", name, tags)

    def clear_metrics(self) -> None:
        self.records.clear()
