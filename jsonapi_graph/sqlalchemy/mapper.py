"""Properties mapper that builds SQLAlchemy declarative instances."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy.inspection import inspect

from jsonapi_graph.core.errors import ModelFactoryError
from jsonapi_graph.mappers.base import PropertiesMapperBase

log = logging.getLogger(__name__)


class SQLAlchemyPropertiesMapper(PropertiesMapperBase):
    """Create transient SQLAlchemy model instances from resource objects.

    Resource types are matched against ``__tablename__`` of the classes mapped
    by ``base`` (a declarative base), or against the explicit ``models``
    mapping, which takes precedence. Unknown types are skipped. Meta and links
    have no column to go to and are not supported.

    The instances are not added to any session.
    """

    def __init__(
        self,
        *,
        base: Any | None = None,
        models: Mapping[str, type] | None = None,
        type_attribute: str = "__tablename__",
    ) -> None:
        self.type_attribute = type_attribute
        self.models: dict[str, type] = {}
        if base is not None:
            for mapper in base.registry.mappers:
                model = mapper.class_
                type_name = getattr(model, type_attribute, None) or model.__name__.lower()
                self.models[type_name] = model
        if models:
            self.models.update(models)
        if not self.models:
            raise ModelFactoryError("SQLAlchemyPropertiesMapper needs a declarative base or models.")

    def create_model(self, type_: str) -> Any | None:
        model = self.models.get(type_)
        if model is None:
            log.debug("No SQLAlchemy model registered for type %r", type_)
            return None
        return model()

    def set_id(self, model: Any, id_: Any) -> None:
        mapper = inspect(model.__class__)
        if len(mapper.primary_key) != 1:
            log.debug("Not setting id on %s: composite primary key", model.__class__.__name__)
            return
        column = mapper.primary_key[0]
        key = mapper.get_property_by_column(column).key
        setattr(model, key, self._coerce(column, id_))

    def set_attributes(self, model: Any, attributes: Mapping[str, Any]) -> None:
        mapper = inspect(model.__class__)
        columns = {attr.key: attr for attr in mapper.column_attrs}
        for name, value in attributes.items():
            attr = columns.get(name)
            if attr is None:
                log.debug("Ignoring unmapped attribute %r on %s", name, model.__class__.__name__)
                continue
            setattr(model, name, self._coerce(attr.columns[0], value))

    def set_relationships(self, model: Any, relationships: Mapping[str, Any]) -> None:
        mapper = inspect(model.__class__)
        for name, value in relationships.items():
            relationship = mapper.relationships.get(name)
            if relationship is None:
                log.debug("Ignoring unmapped relationship %r on %s", name, model.__class__.__name__)
                continue
            if relationship.uselist:
                if value is None:
                    value = []
                elif not isinstance(value, list):
                    value = [value]
                setattr(model, name, list(value))
            elif isinstance(value, list):
                log.debug("Ignoring to-many data for to-one relationship %r", name)
            else:
                setattr(model, name, value)

    def _coerce(self, column: Any, value: Any) -> Any:
        if value is None:
            return value
        try:
            python_type = column.type.python_type
        except (AttributeError, NotImplementedError):
            return value
        if isinstance(value, python_type):
            return value
        if python_type in (int, float, str):
            try:
                return python_type(value)
            except (TypeError, ValueError):
                return value
        return value
