"""Telemetry subpackage (lightweight).

Exposes the logger helpers, the logging text sink and Prometheus wrappers.
"""

from .logging import LoggerSink, get_logger
from .prom import Counter, Gauge, StopwatchMetrics, start_http_server

__all__ = [
    "LoggerSink",
    "get_logger",
    "Counter",
    "Gauge",
    "StopwatchMetrics",
    "start_http_server",
]
