"""FastAPI dependencies."""

from .body import JSONAPIBody

__all__ = ["JSONAPIBody"]
