"""Prometheus integration.

Exports the last split and running total of a stopwatch as gauges plus a
split counter.
"""
from __future__ import annotations

from typing import Optional

from prometheus_client import Counter as _PCounter, Gauge as _PGauge, start_http_server as _p_start

# Cache created metrics to avoid duplicate registration errors when clients
# construct metric wrappers multiple times (e.g., in tests or re-initialization).
_COUNTERS: dict[str, _PCounter] = {}
_GAUGES: dict[str, _PGauge] = {}


class Counter:
    def __init__(self, name: str, desc: str = "") -> None:
        self._name = name
        if name in _COUNTERS:
            self._c = _COUNTERS[name]
        else:
            self._c = _PCounter(name, desc)
            _COUNTERS[name] = self._c

    def inc(self, amt: float = 1.0) -> None:
        self._c.inc(amt)


class Gauge:
    def __init__(self, name: str, desc: str = "") -> None:
        self._name = name
        if name in _GAUGES:
            self._g = _GAUGES[name]
        else:
            self._g = _PGauge(name, desc)
            _GAUGES[name] = self._g

    def set(self, val: float) -> None:
        self._g.set(val)


def start_http_server(port: int = 9099, addr: str = "0.0.0.0") -> Optional[object]:
    """Serve /metrics; returns the (server, thread) pair from prometheus_client."""
    return _p_start(port, addr=addr)


class StopwatchMetrics:
    """Gauges/counter updated every time a stopwatch folds an interval."""

    def __init__(self, prefix: str = "splitwatch") -> None:
        self.prefix = prefix
        self.last_split_ms = Gauge(f"{prefix}_last_split_ms", "Milliseconds of the last closed interval")
        self.total_ms = Gauge(f"{prefix}_total_ms", "Total milliseconds across closed intervals")
        self.splits = Counter(f"{prefix}_splits", "Number of closed intervals")

    def record_split(self, split_ms: int, total_ms: int) -> None:
        self.last_split_ms.set(split_ms)
        self.total_ms.set(total_ms)
        self.splits.inc()
