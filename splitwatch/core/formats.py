"""Prefix templates for stopwatch report lines.

Positional fields:
- {0}: total elapsed milliseconds
- {1}: milliseconds since the last split
- {2}: caller text
"""
from __future__ import annotations

from typing import Dict

from .errors import ConfigError, PrefixFormatError


FORMAT_STRING_TOTAL_SPLIT_OWN: str = "| total: {0:>10}ms | since last split: {1:>10}ms | {2}"
FORMAT_STRING_SPLIT_TOTAL_OWN: str = "| since last split: {1:>10}ms | total: {0:>10}ms | {2}"

PRESETS: Dict[str, str] = {
    "total_split": FORMAT_STRING_TOTAL_SPLIT_OWN,
    "split_total": FORMAT_STRING_SPLIT_TOTAL_OWN,
}


def resolve_format(value: str) -> str:
    """Return the template for a preset name, or ``value`` if it is a template."""
    key = value.strip().lower()
    if key in PRESETS:
        return PRESETS[key]
    if "{" in value:
        return value
    raise ConfigError(f"unknown prefix format preset: {value!r}")


def render_prefix(template: str, total_ms: int, split_ms: int, text: str) -> str:
    try:
        return template.format(total_ms, split_ms, text)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
        raise PrefixFormatError(f"cannot render prefix format {template!r}: {e}") from e
