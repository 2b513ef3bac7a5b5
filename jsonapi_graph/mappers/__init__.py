"""Properties mappers that create and populate models."""

from .base import OPTIONAL_CAPABILITIES, PropertiesMapperBase, supports
from .model import JSONAPIModel, ModelPropertiesMapper, SnakeCaseModelMapper, to_snake_case

__all__ = [
    "OPTIONAL_CAPABILITIES",
    "JSONAPIModel",
    "ModelPropertiesMapper",
    "PropertiesMapperBase",
    "SnakeCaseModelMapper",
    "supports",
    "to_snake_case",
]
