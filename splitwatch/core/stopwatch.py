"""Stopwatch with split times and pause-safe progress reporting.

The watch keeps a frozen total of closed intervals next to an
``IntervalCounter`` for the interval in flight. Stopping never loses time:
a later ``start`` resumes the same interval, and ``split`` folds it into
the total. Every operation has a text-taking form that writes one report
line to the configured sink while the counter is paused, so the write
itself is not measured.
"""
from __future__ import annotations

import sys
from datetime import timedelta
from typing import TYPE_CHECKING, Callable, Optional, Protocol

from ..telemetry.logging import get_logger
from .clock import IntervalCounter
from .formats import FORMAT_STRING_SPLIT_TOTAL_OWN, FORMAT_STRING_TOTAL_SPLIT_OWN, render_prefix

if TYPE_CHECKING:  # pragma: no cover
    from ..config import StopwatchConfig
    from ..telemetry.prom import StopwatchMetrics


_log = get_logger(__name__)


class TextSink(Protocol):
    def write(self, text: str) -> object: ...

    def flush(self) -> None: ...


class SplitStopwatch:
    """Stopwatch that measures split times and keeps the overall total.

    Use it like a plain stopwatch. Stopping is a pause; start again at any
    time. The ``text`` forms write through ``text_writer`` (stdout by
    default), one line per call, so ``text`` needs no trailing newline.
    With ``is_active`` set to False all mutating calls do nothing and
    return 0, which lets instrumentation stay in place.
    """

    FORMAT_STRING_TOTAL_SPLIT_OWN = FORMAT_STRING_TOTAL_SPLIT_OWN
    FORMAT_STRING_SPLIT_TOTAL_OWN = FORMAT_STRING_SPLIT_TOTAL_OWN

    def __init__(
        self,
        text_writer: Optional[TextSink] = None,
        is_flush_immediately: bool = False,
        *,
        is_active: bool = True,
        display_prefix: bool = True,
        prefix_format: str = FORMAT_STRING_TOTAL_SPLIT_OWN,
        indent_string: str = "  ",
        clock: Optional[Callable[[], int]] = None,
        metrics: Optional["StopwatchMetrics"] = None,
    ) -> None:
        self._counter = IntervalCounter(clock)
        self._clock = clock
        self._total_ms = 0
        self._total_ticks = 0
        # Caller owns the sink; it is never closed here.
        self._text_writer: TextSink = text_writer if text_writer is not None else sys.stdout
        self._metrics = metrics
        self.is_flush_immediately = is_flush_immediately
        self.is_active = is_active
        self.display_prefix = display_prefix
        self.prefix_format = prefix_format
        self.indent_string = indent_string

    @classmethod
    def from_config(
        cls,
        config: Optional["StopwatchConfig"] = None,
        text_writer: Optional[TextSink] = None,
        *,
        clock: Optional[Callable[[], int]] = None,
        metrics: Optional["StopwatchMetrics"] = None,
    ) -> "SplitStopwatch":
        if config is None:
            from ..config import StopwatchConfig

            config = StopwatchConfig()
        return cls(
            text_writer,
            config.is_flush_immediately,
            is_active=config.is_active,
            display_prefix=config.display_prefix,
            prefix_format=config.prefix_format,
            indent_string=config.indent_string,
            clock=clock,
            metrics=metrics,
        )

    @property
    def text_writer(self) -> TextSink:
        return self._text_writer

    @property
    def is_running(self) -> bool:
        return self._counter.is_running

    @property
    def elapsed_since_last_split(self) -> timedelta:
        return self._counter.elapsed

    @property
    def elapsed_since_last_split_milliseconds(self) -> int:
        return self._counter.elapsed_milliseconds

    @property
    def elapsed_since_last_split_ticks(self) -> int:
        return self._counter.elapsed_ticks

    @property
    def elapsed_total(self) -> timedelta:
        return timedelta(milliseconds=self.elapsed_total_milliseconds)

    @property
    def elapsed_total_milliseconds(self) -> int:
        return self._total_ms + self._counter.elapsed_milliseconds

    @property
    def elapsed_total_ticks(self) -> int:
        return self._total_ticks + self._counter.elapsed_ticks

    def start(self, text: Optional[str] = None, indent_level: int = 0) -> None:
        """Start or resume the current interval.

        With ``text`` the time since the last split is reported before the
        counter resumes.
        """
        if not self.is_active:
            return
        if text is not None:
            self._write_text(text, self._counter.elapsed_milliseconds, indent_level)
        self._counter.start()

    def start_new(self, text: Optional[str] = None, indent_level: int = 0) -> None:
        """Zero the totals and start measuring a fresh interval."""
        if not self.is_active:
            return
        if text is not None:
            self._write_text(text, self._counter.elapsed_milliseconds, indent_level)
        _log.debug("restart after %d ms total", self.elapsed_total_milliseconds)
        self._total_ms = 0
        self._total_ticks = 0
        self._counter = IntervalCounter.start_new(self._clock)

    def stop(self, text: Optional[str] = None, indent_level: int = 0) -> None:
        """Pause the current interval. Nothing is folded into the total."""
        if not self.is_active:
            return
        self._counter.stop()
        if text is not None:
            self._write_text(text, self._counter.elapsed_milliseconds, indent_level)

    def reset(self, text: Optional[str] = None, indent_level: int = 0) -> None:
        """Stop and zero everything. ``text`` reports the folded interval."""
        if not self.is_active:
            return
        split_ms = self.split_and_stop()
        self._counter.reset()
        if text is not None:
            self._write_text(text, split_ms, indent_level)
        _log.debug("reset after %d ms total", self._total_ms)
        self._total_ms = 0
        self._total_ticks = 0

    def split(self, text: Optional[str] = None, indent_level: int = 0) -> int:
        """Take a split time and keep running.

        Returns the milliseconds of the interval just closed.
        """
        if not self.is_active:
            return 0
        split_ms = self.split_and_stop()
        if text is not None:
            self._write_text(text, split_ms, indent_level)
        self._counter.start()
        return split_ms

    def split_and_stop(self, text: Optional[str] = None, indent_level: int = 0) -> int:
        """Take a split time and leave the watch paused.

        Returns the milliseconds of the interval just closed. ``start``
        resumes measuring.
        """
        if not self.is_active:
            return 0
        self._counter.stop()
        split_ms = self._counter.elapsed_milliseconds
        split_ticks = self._counter.elapsed_ticks
        self._total_ms += split_ms
        self._total_ticks += split_ticks
        self._counter.reset()
        if self._metrics is not None:
            self._metrics.record_split(split_ms, self._total_ms)
        if text is not None:
            self._write_text(text, split_ms, indent_level)
        return split_ms

    def __enter__(self) -> "SplitStopwatch":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.stop()

    def __repr__(self) -> str:
        state = "running" if self.is_running else "stopped"
        return f"<SplitStopwatch {state} total={self.elapsed_total_milliseconds}ms>"

    def _write_text(self, text: str, split_ms: int, indent_level: int) -> None:
        if not self.is_active:
            return
        if self.display_prefix:
            line = render_prefix(self.prefix_format, self.elapsed_total_milliseconds, split_ms, text)
        else:
            line = text
        w = self._text_writer
        for _ in range(indent_level):
            w.write(self.indent_string)
        w.write(line + "\n")
        if self.is_flush_immediately:
            w.flush()
