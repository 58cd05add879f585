"""Logging helpers for lokitext."""
from .factory import DefaultLoggerFactory
from .helpers import JsonLogFormatter, get_logger, is_trace_enabled, setup_base_logger, trace

__all__ = [
    "DefaultLoggerFactory",
    "JsonLogFormatter",
    "get_logger",
    "is_trace_enabled",
    "setup_base_logger",
    "trace",
]
