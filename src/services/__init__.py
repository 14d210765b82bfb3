"""
Services Module - Infrastructure services for the SPAC compliance engine.

- Structured logging and observability
"""

from .logging_config import (
    ContextLogger,
    DeadlineRunLogger,
    JsonFormatter,
    ReadableFormatter,
    configure_logging,
    get_logger,
    log_performance,
    timed,
)

__all__ = [
    "ContextLogger",
    "DeadlineRunLogger",
    "JsonFormatter",
    "ReadableFormatter",
    "configure_logging",
    "get_logger",
    "log_performance",
    "timed",
]
