"""Utilities for JSON:API requests."""

from .content_negotiation import JSONAPI_MEDIA_TYPE, is_jsonapi_content_type, parse_jsonapi_media_type

__all__ = ["JSONAPI_MEDIA_TYPE", "is_jsonapi_content_type", "parse_jsonapi_media_type"]
