"""Environment parsing helpers.

Small helpers to consistently parse env vars with sane defaults.
"""
from __future__ import annotations

import os
from typing import Optional


def env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None or not val.strip():
        return bool(default)
    return val.strip() in ("1", "true", "True", "TRUE", "YES", "yes", "on", "On")


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return the raw value, keeping whitespace (indent strings need it)."""
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val
