"""Core JSON:API deserialization."""

from .deserializer import JSONAPIDeserializer, deserialize
from .document import load_document
from .errors import (
    DocumentParseError,
    JSONAPIErrorBuilder,
    JSONAPIGraphError,
    ModelFactoryError,
    UnsupportedMediaTypeError,
)
from .included import IncludedIndex, entity_key, format_entity_key, is_reference_stub

__all__ = [
    "DocumentParseError",
    "IncludedIndex",
    "JSONAPIDeserializer",
    "JSONAPIErrorBuilder",
    "JSONAPIGraphError",
    "ModelFactoryError",
    "UnsupportedMediaTypeError",
    "deserialize",
    "entity_key",
    "format_entity_key",
    "is_reference_stub",
    "load_document",
]
