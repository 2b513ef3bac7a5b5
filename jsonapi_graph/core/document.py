"""Normalize incoming bodies into JSON:API document mappings."""

from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel

from .errors import DocumentParseError


def load_document(body: Any) -> Mapping[str, Any]:
    """Return the document mapping for a raw or already parsed body.

    Accepts JSON text (``str``/``bytes``), pydantic models and mappings.
    Pydantic models are dumped with ``exclude_unset`` so identifier objects
    keep only the keys that were actually sent.
    """
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentParseError(f"Request body is not valid UTF-8: {exc}") from exc
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as exc:
            raise DocumentParseError(f"Request body is not valid JSON: {exc.msg}") from exc
    elif isinstance(body, BaseModel):
        body = body.model_dump(exclude_unset=True)

    if not isinstance(body, Mapping):
        raise DocumentParseError("A JSON:API document must be an object.", pointer="")
    return body
