"""Helpers for JSON:API content negotiation."""

from __future__ import annotations

from typing import Any

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def _parse_param_value(value: str) -> list[str]:
    if value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    if not value:
        return []
    return value.split(" ")


def parse_jsonapi_media_type(content_type: str) -> dict[str, Any]:
    """Split a Content-Type header into media type, ext, profile and others."""
    parts = _split_parameters(content_type or "")
    params: dict[str, Any] = {
        "media_type": parts[0].lower() if parts else "",
        "ext": [],
        "profile": [],
        "other_params": {},
    }
    for param in parts[1:]:
        name, sep, raw_value = param.partition("=")
        if not sep:
            continue
        name = name.strip().lower()
        raw_value = raw_value.strip()
        if name in ("ext", "profile"):
            params[name] = _parse_param_value(raw_value)
        else:
            params["other_params"][name] = raw_value
    return params


def is_jsonapi_content_type(content_type: str, media_type: str = JSONAPI_MEDIA_TYPE) -> bool:
    """True for the JSON:API media type without parameters other than ext/profile."""
    parsed = parse_jsonapi_media_type(content_type)
    return parsed["media_type"] == media_type and not parsed["other_params"]
