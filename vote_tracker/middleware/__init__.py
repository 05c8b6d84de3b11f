"""ASGI middleware."""

from vote_tracker.middleware.request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
