"""Request middleware and logging setup."""
from .logging import JSONFormatter, RequestLoggingMiddleware, setup_logging

__all__ = [
    "JSONFormatter",
    "RequestLoggingMiddleware",
    "setup_logging",
]
