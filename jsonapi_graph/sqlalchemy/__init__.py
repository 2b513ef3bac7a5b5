"""SQLAlchemy support for jsonapi-graph."""

from .mapper import SQLAlchemyPropertiesMapper

__all__ = ["SQLAlchemyPropertiesMapper"]
