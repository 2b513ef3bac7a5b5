"""FastAPI dependency that deserializes JSON:API request bodies."""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import Request

from jsonapi_graph.config import get_config
from jsonapi_graph.core.deserializer import JSONAPIDeserializer
from jsonapi_graph.core.document import load_document
from jsonapi_graph.core.errors import UnsupportedMediaTypeError
from jsonapi_graph.mappers.model import ModelPropertiesMapper
from jsonapi_graph.utils.content_negotiation import is_jsonapi_content_type

log = logging.getLogger(__name__)


class JSONAPIBody:
    """Dependency returning the model graph of the request body.

    Args:
        mapper_factory: Callable returning a properties mapper. Called once per
            request; defaults to ModelPropertiesMapper.
        require_media_type: Reject bodies not sent as the JSON:API media type.

    Examples:
        @app.post("/articles")
        async def create_article(article: Any = Depends(JSONAPIBody())) -> Any:
            ...
    """

    def __init__(
        self,
        mapper_factory: Callable[[], Any] | None = None,
        *,
        require_media_type: bool = True,
    ) -> None:
        self.mapper_factory = mapper_factory or ModelPropertiesMapper
        self.require_media_type = require_media_type

    async def __call__(self, request: Request) -> Any:
        if self.require_media_type:
            content_type = request.headers.get("content-type", "")
            if not is_jsonapi_content_type(content_type, get_config("JSONAPI_GRAPH_MEDIA_TYPE")):
                raise UnsupportedMediaTypeError(
                    f"Expected {get_config('JSONAPI_GRAPH_MEDIA_TYPE')}, got {content_type or 'no content type'}."
                )
        document = load_document(await request.body())
        models = JSONAPIDeserializer(self.mapper_factory(), document).build()
        log.debug("Deserialized %s %s", request.method, request.url.path)
        return models
