"""Deserialize JSON:API documents into object graphs."""

from .config import init_logging
from .core.deserializer import JSONAPIDeserializer, deserialize
from .core.errors import DocumentParseError, JSONAPIGraphError
from .core.included import IncludedIndex
from .mappers import JSONAPIModel, ModelPropertiesMapper, PropertiesMapperBase, SnakeCaseModelMapper

__all__ = [
    "DocumentParseError",
    "IncludedIndex",
    "JSONAPIDeserializer",
    "JSONAPIGraphError",
    "JSONAPIModel",
    "ModelPropertiesMapper",
    "PropertiesMapperBase",
    "SnakeCaseModelMapper",
    "deserialize",
    "init_logging",
]
