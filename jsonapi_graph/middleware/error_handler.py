"""Render deserialization errors as JSON:API error documents."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from jsonapi_graph.core.errors import JSONAPIErrorBuilder, JSONAPIGraphError
from jsonapi_graph.utils.content_negotiation import JSONAPI_MEDIA_TYPE

log = logging.getLogger(__name__)


def error_response(exc: JSONAPIGraphError) -> JSONResponse:
    """Return a JSON:API error response for a deserialization error."""
    document = JSONAPIErrorBuilder().error_document([exc.to_error_object()])
    return JSONResponse(document, status_code=int(exc.status), media_type=JSONAPI_MEDIA_TYPE)


class JSONAPIGraphErrorMiddleware:
    """Convert JSONAPIGraphError into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except JSONAPIGraphError as exc:
            log.info("Rejected JSON:API request %s: %s", scope.get("path"), exc.detail)
            await error_response(exc)(scope, receive, send)
