"""Default models and properties mappers."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from .base import PropertiesMapperBase

log = logging.getLogger(__name__)

_RESERVED = frozenset(
    {
        "type",
        "id",
        "meta",
        "links",
        "fields",
        "related",
        "relationship_names",
        "relationships_meta",
        "relationships_links",
    }
)


class JSONAPIModel:
    """Plain object holding one deserialized resource.

    Attribute and relationship values are kept in ``fields`` and ``related``
    and are also readable as instance attributes, unless the member name
    clashes with one of the model's own members.
    """

    def __init__(self, type_: str) -> None:
        self.type = type_
        self.id: Any = None
        self.meta: dict[str, Any] | None = None
        self.links: dict[str, Any] | None = None
        self.fields: dict[str, Any] = {}
        self.related: dict[str, Any] = {}
        self.relationship_names: list[str] = []
        self.relationships_meta: dict[str, Any] = {}
        self.relationships_links: dict[str, Any] = {}

    @classmethod
    def is_reserved(cls, name: str) -> bool:
        """True if ``name`` would shadow a member of the model."""
        return name in _RESERVED or hasattr(cls, name)

    def attributes(self) -> dict[str, Any]:
        """Return the attribute values, without id, type or relationships."""
        return dict(self.fields)

    def relationships(self) -> dict[str, Any]:
        return {name: self.related.get(name) for name in self.relationship_names}

    def __repr__(self) -> str:
        # related models are left out, the graph may be cyclic
        return f"<{self.__class__.__name__} {self.type}-{self.id}>"


class ModelPropertiesMapper(PropertiesMapperBase):
    """Build :class:`JSONAPIModel` instances."""

    model_class: type = JSONAPIModel

    def create_model(self, type_: str) -> JSONAPIModel:
        return self.model_class(type_)

    def set_id(self, model: Any, id_: Any) -> None:
        model.id = id_

    def _expose(self, model: Any, name: Any, value: Any) -> None:
        if not isinstance(name, str) or model.is_reserved(name):
            log.debug("Member %r of %r is only available through the model's mappings", name, model)
            return
        setattr(model, name, value)

    def set_attributes(self, model: Any, attributes: Mapping[str, Any]) -> None:
        for name, value in attributes.items():
            model.fields[name] = value
            self._expose(model, name, value)

    def set_meta(self, model: Any, meta: Mapping[str, Any]) -> None:
        model.meta = dict(meta)

    def set_links(self, model: Any, links: Mapping[str, Any]) -> None:
        model.links = dict(links)

    def set_relationships(self, model: Any, relationships: Mapping[str, Any]) -> None:
        for name, value in relationships.items():
            model.related[name] = value
            self._expose(model, name, value)
        names = list(model.relationship_names)
        names.extend(name for name in relationships if name not in names)
        model.relationship_names = names

    def set_relationship_meta(self, model: Any, name: str, meta: Mapping[str, Any]) -> None:
        model.relationships_meta[name] = dict(meta)

    def set_relationship_links(self, model: Any, name: str, links: Mapping[str, Any]) -> None:
        model.relationships_links[name] = dict(links)


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def to_snake_case(name: str, separators: str = "-") -> str:
    """Convert ``first-name`` and ``firstName`` to ``first_name``."""
    name = _CAMEL_BOUNDARY.sub(r"_\1", name)
    for separator in separators:
        name = name.replace(separator, "_")
    return name.lower()


class SnakeCaseModelMapper(ModelPropertiesMapper):
    """Model mapper that renames member names to snake_case.

    JSON:API member names are commonly kebab-case or camelCase, neither of
    which are usable as Python attribute names.
    """

    def __init__(
        self,
        *,
        snake_attributes: bool = True,
        snake_relationships: bool = True,
        snake_meta: bool = False,
        snake_type: bool = False,
        separators: str = "-",
    ) -> None:
        self.snake_attributes = snake_attributes
        self.snake_relationships = snake_relationships
        self.snake_meta = snake_meta
        self.snake_type = snake_type
        self.separators = separators

    def _convert(self, name: str) -> str:
        return to_snake_case(name, self.separators)

    def _convert_keys(self, values: Mapping[str, Any]) -> dict[str, Any]:
        return {self._convert(name): value for name, value in values.items()}

    def create_model(self, type_: str) -> JSONAPIModel:
        if self.snake_type and isinstance(type_, str):
            type_ = self._convert(type_)
        return super().create_model(type_)

    def set_attributes(self, model: Any, attributes: Mapping[str, Any]) -> None:
        if self.snake_attributes:
            attributes = self._convert_keys(attributes)
        super().set_attributes(model, attributes)

    def set_meta(self, model: Any, meta: Mapping[str, Any]) -> None:
        if self.snake_meta:
            meta = self._convert_keys(meta)
        super().set_meta(model, meta)

    def set_relationships(self, model: Any, relationships: Mapping[str, Any]) -> None:
        if self.snake_relationships:
            relationships = self._convert_keys(relationships)
        super().set_relationships(model, relationships)

    def set_relationship_meta(self, model: Any, name: str, meta: Mapping[str, Any]) -> None:
        if self.snake_relationships:
            name = self._convert(name)
        if self.snake_meta:
            meta = self._convert_keys(meta)
        super().set_relationship_meta(model, name, meta)

    def set_relationship_links(self, model: Any, name: str, links: Mapping[str, Any]) -> None:
        if self.snake_relationships:
            name = self._convert(name)
        super().set_relationship_links(model, name, links)
