"""Configuration helpers for splitwatch."""
from __future__ import annotations

from dataclasses import dataclass

from .core.formats import FORMAT_STRING_TOTAL_SPLIT_OWN, resolve_format
from .utils.env import env_bool, env_str


@dataclass(slots=True)
class StopwatchConfig:
    is_active: bool = True
    is_flush_immediately: bool = False
    display_prefix: bool = True
    prefix_format: str = FORMAT_STRING_TOTAL_SPLIT_OWN
    indent_string: str = "  "

    @classmethod
    def from_env(cls, prefix: str = "SPLITWATCH") -> "StopwatchConfig":
        """Build a config from ``<prefix>_*`` variables, falling back to defaults.

        <prefix>_FORMAT accepts a preset name (total_split, split_total) or a
        literal template.
        """
        defaults = cls()
        fmt = env_str(f"{prefix}_FORMAT")
        return cls(
            is_active=env_bool(f"{prefix}_ACTIVE", defaults.is_active),
            is_flush_immediately=env_bool(f"{prefix}_FLUSH", defaults.is_flush_immediately),
            display_prefix=env_bool(f"{prefix}_DISPLAY_PREFIX", defaults.display_prefix),
            prefix_format=resolve_format(fmt) if fmt is not None else defaults.prefix_format,
            indent_string=env_str(f"{prefix}_INDENT", defaults.indent_string) or defaults.indent_string,
        )
