"""Logging module with structured logging and request tracking."""

from railcat.core.logging.middleware import RequestLoggingMiddleware, configure_logging


__all__ = [
    "RequestLoggingMiddleware",
    "configure_logging",
]
