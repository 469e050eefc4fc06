# src/versions_kit/observability/base.py

from collections.abc import Iterator
from contextlib import contextmanager
from time import monotonic
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for document-level metrics.

    Names come from `versions_kit.observability.names`. Labels carry the
    config file type so several formats can share one backend.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook; drops everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


@contextmanager
def timed(
    metrics_hook: MetricsHook, name: str, labels: dict[str, str] | None = None
) -> Iterator[None]:
    """Record the block's latency in ms. Nothing is recorded if it raises."""
    start = monotonic()
    yield
    metrics_hook.record_latency(name, 1000 * (monotonic() - start), labels=labels)
