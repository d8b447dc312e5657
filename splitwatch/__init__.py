"""splitwatch: split-time stopwatch with pause-safe progress reporting."""

from importlib import metadata

from .config import StopwatchConfig
from .core.clock import IntervalCounter
from .core.errors import ConfigError, PrefixFormatError, SplitwatchError
from .core.formats import FORMAT_STRING_SPLIT_TOTAL_OWN, FORMAT_STRING_TOTAL_SPLIT_OWN
from .core.stopwatch import SplitStopwatch, TextSink


def get_version() -> str:
    """Return package version if available, else placeholder."""
    try:
        return metadata.version("splitwatch")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "FORMAT_STRING_SPLIT_TOTAL_OWN",
    "FORMAT_STRING_TOTAL_SPLIT_OWN",
    "ConfigError",
    "IntervalCounter",
    "PrefixFormatError",
    "SplitStopwatch",
    "SplitwatchError",
    "StopwatchConfig",
    "TextSink",
    "get_version",
]
