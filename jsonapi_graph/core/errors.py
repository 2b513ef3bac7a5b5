"""Exceptions and JSON:API error objects."""

from typing import Any


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}


class JSONAPIGraphError(Exception):
    """Base class for errors raised at the edges of deserialization."""

    status = "400"
    code = "invalid_document"
    title = "Bad Request"

    def __init__(self, detail: str, *, pointer: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.pointer = pointer

    def to_error_object(self) -> dict[str, Any]:
        source = {"pointer": self.pointer} if self.pointer is not None else None
        return JSONAPIErrorBuilder().error_object(
            status=self.status,
            code=self.code,
            title=self.title,
            detail=self.detail,
            source=source,
        )


class DocumentParseError(JSONAPIGraphError, ValueError):
    """The request body could not be turned into a JSON:API document."""


class UnsupportedMediaTypeError(JSONAPIGraphError):
    """The request body was not sent as application/vnd.api+json."""

    status = "415"
    code = "unsupported_media_type"
    title = "Unsupported Media Type"


class ModelFactoryError(JSONAPIGraphError):
    """A properties mapper was configured without any usable model."""

    status = "500"
    code = "model_factory"
    title = "Internal Server Error"
