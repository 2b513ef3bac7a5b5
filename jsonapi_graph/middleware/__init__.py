"""Middleware for JSON:API requests."""

from .error_handler import JSONAPIGraphErrorMiddleware, error_response

__all__ = ["JSONAPIGraphErrorMiddleware", "error_response"]
