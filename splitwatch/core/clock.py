"""Monotonic interval counter.

A start/stop/reset elapsed-time source measured in integer ticks
(nanoseconds from ``time.perf_counter_ns`` unless another clock is given).
"""
from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable, Optional


TICKS_PER_MILLISECOND: int = 1_000_000
TICKS_PER_MICROSECOND: int = 1_000


class IntervalCounter:
    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or time.perf_counter_ns
        self._accumulated = 0
        self._started_at: int | None = None

    @classmethod
    def start_new(cls, clock: Optional[Callable[[], int]] = None) -> "IntervalCounter":
        counter = cls(clock)
        counter.start()
        return counter

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        # No-op while running; the in-flight interval keeps its origin.
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self._accumulated += self._clock() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        self._accumulated = 0
        self._started_at = None

    def restart(self) -> None:
        self._accumulated = 0
        self._started_at = self._clock()

    @property
    def elapsed_ticks(self) -> int:
        ticks = self._accumulated
        if self._started_at is not None:
            ticks += self._clock() - self._started_at
        return ticks

    @property
    def elapsed_milliseconds(self) -> int:
        return self.elapsed_ticks // TICKS_PER_MILLISECOND

    @property
    def elapsed(self) -> timedelta:
        return timedelta(microseconds=self.elapsed_ticks // TICKS_PER_MICROSECOND)

    def __repr__(self) -> str:
        state = "running" if self.is_running else "stopped"
        return f"<IntervalCounter {state} at {self.elapsed_ticks} ticks>"
