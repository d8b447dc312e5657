"""Logging setup for the splitwatch package.

Only the ``splitwatch`` logger hierarchy is configured; the root logger and
any handlers the host application installed are left alone.

Environment variables:
- SPLITWATCH_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default INFO)
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional

PACKAGE_LOGGER = "splitwatch"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_env(default: int = logging.INFO) -> int:
    lvl = logging.getLevelName(os.getenv("SPLITWATCH_LOG_LEVEL", "").strip().upper())
    return lvl if isinstance(lvl, int) else default


def _package_logger() -> logging.Logger:
    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_splitwatch", False) for h in pkg.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._splitwatch = True  # type: ignore[attr-defined]
        pkg.addHandler(handler)
        pkg.setLevel(_level_from_env())
    return pkg


class ContextLogger(logging.LoggerAdapter):
    """Prefix every message with ``[key=value ...]``."""

    def process(self, msg, kwargs):  # type: ignore[override]
        tags = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"[{tags}] {msg}", kwargs


def get_logger(name: str, context: Optional[Dict[str, object]] = None) -> logging.Logger | ContextLogger:
    _package_logger()
    logger = logging.getLogger(name)
    return ContextLogger(logger, dict(context)) if context else logger


class LoggerSink:
    """Text sink that turns written lines into log records.

    Partial writes (e.g. indentation) are buffered until a newline arrives.
    """

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter, level: int = logging.INFO) -> None:
        self._logger = logger
        self._level = level
        self._pending = ""

    def write(self, text: str) -> int:
        self._pending += text
        *lines, self._pending = self._pending.split("\n")
        for line in lines:
            self._logger.log(self._level, line)
        return len(text)

    def flush(self) -> None:
        if self._pending:
            self._logger.log(self._level, self._pending)
            self._pending = ""
