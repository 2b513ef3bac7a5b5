"""Build object graphs of models from JSON:API documents."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_graph.mappers.base import supports
from jsonapi_graph.mappers.model import ModelPropertiesMapper

from .document import load_document
from .included import EntityKey, IncludedIndex, entity_key, format_entity_key, is_reference_stub

log = logging.getLogger(__name__)


class JSONAPIDeserializer:
    """Turn one JSON:API document into models wired by reference.

    An instance holds the identity cache and the included index for a single
    document; create a new one for every document.
    """

    def __init__(self, properties_mapper: Any, document: Mapping[str, Any] | None = None) -> None:
        self.set_properties_mapper(properties_mapper)
        self.cached_models: dict[EntityKey, Any] = {}
        self.included: IncludedIndex | None = None
        self.document: Mapping[str, Any] = {}
        if document is not None:
            self.set_document(document)

    def set_properties_mapper(self, properties_mapper: Any) -> None:
        self.pm = properties_mapper

    def set_document(self, document: Mapping[str, Any]) -> None:
        self.document = document
        self.cached_models = {}
        self.included = IncludedIndex(document)

    def build(self) -> Any | list[Any] | None:
        """Return a model, a list of models or None, mirroring ``data``."""
        data = self.document.get("data")
        if isinstance(data, (list, tuple)):
            models = []
            for item in data:
                if item is None or not isinstance(item, Mapping):
                    continue
                model = self.build_model(item)
                if model is not None:
                    models.append(model)
            return models
        if isinstance(data, Mapping):
            return self.build_model(data)
        return None

    def build_model(self, data: Mapping[str, Any]) -> Any | None:
        key = entity_key(data)
        model = self.cached_models.get(key) if key is not None else None

        # a stub can't repopulate a model, so reuse the one built for the key
        if model is not None and is_reference_stub(data):
            log.debug("Reusing model for %s", format_entity_key(key))
            return model

        if model is None:
            model = self.pm.create_model(data.get("type"))
            if model is None:
                log.debug("No model created for type %r", data.get("type"))
                return None
            # registered before relationships are walked so cycles end here
            if key is not None:
                self.cached_models[key] = model
        else:
            log.debug("Populating %s first built from an identifier", format_entity_key(key))

        self.pm.set_id(model, data.get("id"))

        attributes = data.get("attributes")
        if attributes is None:
            attributes = data.get("properties")
        if attributes:
            self.pm.set_attributes(model, attributes)

        if data.get("meta") and supports(self.pm, "set_meta"):
            self.pm.set_meta(model, data["meta"])

        if data.get("links") and supports(self.pm, "set_links"):
            self.pm.set_links(model, data["links"])

        relationships = self.build_relationships(data, model)
        if relationships:
            self.pm.set_relationships(model, relationships)

        return model

    def build_relationships(self, data: Mapping[str, Any], model: Any) -> dict[str, Any] | None:
        relations = data.get("relationships")
        if not relations or not isinstance(relations, Mapping):
            return None

        ready: dict[str, Any] = {}
        for name, relation in relations.items():
            if not isinstance(relation, Mapping):
                continue
            related = relation.get("data")

            if isinstance(related, (list, tuple)):
                models = []
                for item in related:
                    if item is None or not isinstance(item, Mapping):
                        log.debug(
                            "Dropping relationships of %s: %r contains a missing identifier",
                            format_entity_key(entity_key(data)),
                            name,
                        )
                        return None
                    related_model = self.build_model(self.resolve(item))
                    if related_model is not None:
                        models.append(related_model)
                ready[name] = models
            elif isinstance(related, Mapping):
                related_model = self.build_model(self.resolve(related))
                if related_model is not None:
                    ready[name] = related_model
            elif "data" in relation and related is None:
                ready[name] = None

            if relation.get("links") and supports(self.pm, "set_relationship_links"):
                self.pm.set_relationship_links(model, name, relation["links"])

            if relation.get("meta") and supports(self.pm, "set_relationship_meta"):
                self.pm.set_relationship_meta(model, name, relation["meta"])

        return ready or None

    def resolve(self, identifier: Mapping[str, Any]) -> Mapping[str, Any]:
        """Return the fullest known resource object for an identifier.

        Entities already built during this call resolve to a bare identifier,
        so :meth:`build_model` hands back the cached model instead of building
        a second one from the included resource.
        """
        resource_type = identifier.get("type")
        resource_id = identifier.get("id")
        if entity_key(identifier) in self.cached_models:
            return {"type": resource_type, "id": resource_id}
        if self.included is None:
            self.included = IncludedIndex(self.document)
        return self.included.lookup(resource_type, resource_id)


def deserialize(body: Any, properties_mapper: Any = None) -> Any | list[Any] | None:
    """Deserialize a JSON:API body into models.

    ``body`` may be JSON text, a pydantic document or a mapping. Without a
    mapper, :class:`~jsonapi_graph.mappers.ModelPropertiesMapper` is used.
    """
    if properties_mapper is None:
        properties_mapper = ModelPropertiesMapper()
    document = load_document(body)
    return JSONAPIDeserializer(properties_mapper, document).build()
