"""Common exceptions for the splitwatch library."""
from __future__ import annotations


class SplitwatchError(Exception):
    pass


class PrefixFormatError(SplitwatchError, ValueError):
    """A prefix template could not be rendered with (total, split, text)."""


class ConfigError(SplitwatchError, ValueError):
    pass
