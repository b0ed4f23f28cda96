"""
Prometheus metrics for contact extraction.

Exported metrics
----------------
``contacts_found_per_text``              histogram — contacts found per call, by kind
``contacts_extraction_latency_seconds``  histogram — latency per pipeline component
``contacts_errors_total``                counter   — errors by type (soft/hard) and component
``contacts_engine_skip_total``           counter   — engine skips by engine
``contacts_runs_total``                  counter   — pipeline runs by outcome (ok/failed)
"""
from __future__ import annotations

import time
from typing import Any

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

#: Number of contacts returned per call, labelled by kind.
CONTACTS_PER_TEXT = Histogram(
    "contacts_found_per_text",
    "Number of contacts extracted per text (histogram), by kind",
    labelnames=["kind"],
    buckets=[0, 1, 2, 5, 10, 20, 50, 100],
)

#: Latency (seconds) per named pipeline component.
EXTRACTION_LATENCY = Histogram(
    "contacts_extraction_latency_seconds",
    "Per-component extraction latency in seconds",
    labelnames=["component"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

#: Count of errors, labelled by type (soft/hard) and component.
ERRORS_TOTAL = Counter(
    "contacts_errors_total",
    "Total extraction errors by type (soft/hard) and component",
    labelnames=["error_type", "component"],
)

#: Count of skipped engines, labelled by engine.
ENGINE_SKIP_TOTAL = Counter(
    "contacts_engine_skip_total",
    "Count of times an extraction engine was skipped, by engine",
    labelnames=["engine"],
)

#: Count of pipeline runs, labelled by outcome.
PIPELINE_RUNS = Counter(
    "contacts_runs_total",
    "Total extraction runs by outcome (ok/failed)",
    labelnames=["outcome"],
)


# ---------------------------------------------------------------------------
# Helper: context manager for timing a block
# ---------------------------------------------------------------------------


class _Timer:
    """Context manager that records elapsed time and emits the latency metric."""

    def __init__(self, component: str) -> None:
        self._component = component
        self._start: float = 0.0
        self.elapsed_ms: float = 0.0

    def __enter__(self) -> "_Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: Any) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        EXTRACTION_LATENCY.labels(component=self._component).observe(
            self.elapsed_ms / 1000
        )


def timer(component: str) -> _Timer:
    """Return a context manager that times a pipeline component and records latency."""
    return _Timer(component)


def record_contact_counts(emails: list, phones: list) -> None:
    CONTACTS_PER_TEXT.labels(kind="EMAIL").observe(len(emails))
    CONTACTS_PER_TEXT.labels(kind="PHONE").observe(len(phones))
