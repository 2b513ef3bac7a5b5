"""Properties mapper interface used by the deserializer to build models."""

from typing import Any, Mapping

OPTIONAL_CAPABILITIES = (
    "set_meta",
    "set_links",
    "set_relationship_meta",
    "set_relationship_links",
)


def supports(mapper: Any, capability: str) -> bool:
    """Return True if the mapper implements an optional capability.

    Raises ValueError for names that are not optional capabilities.
    """
    if capability not in OPTIONAL_CAPABILITIES:
        raise ValueError(f"Unknown mapper capability: {capability!r}")
    return callable(getattr(mapper, capability, None))


class PropertiesMapperBase:
    """Create models and assign resource data onto them.

    Subclasses may also define any of ``set_meta(model, meta)``,
    ``set_links(model, links)``, ``set_relationship_meta(model, name, meta)``
    and ``set_relationship_links(model, name, links)``; the deserializer
    calls them only when present.
    """

    def create_model(self, type_: str) -> Any | None:
        """Return a new model for the resource type, or None to skip it."""
        raise NotImplementedError

    def set_id(self, model: Any, id_: Any) -> None:
        raise NotImplementedError

    def set_attributes(self, model: Any, attributes: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def set_relationships(self, model: Any, relationships: Mapping[str, Any]) -> None:
        raise NotImplementedError
