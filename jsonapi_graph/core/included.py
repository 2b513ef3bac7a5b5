"""Entity keys and the lookup index over a document's ``included`` pool."""

from __future__ import annotations

from typing import Any, Mapping

EntityKey = tuple[str, str]


def has_identity(value: Any) -> bool:
    return value is not None and value != ""


def entity_key(data: Mapping[str, Any]) -> EntityKey | None:
    """Return the identity of a resource object, or None without type and id.

    Ids are compared as strings, so ``1`` and ``"1"`` name the same entity.
    """
    resource_type = data.get("type")
    resource_id = data.get("id")
    if has_identity(resource_type) and has_identity(resource_id):
        return str(resource_type), str(resource_id)
    return None


def format_entity_key(key: EntityKey | None) -> str:
    if key is None:
        return "<anonymous>"
    return f"{key[0]}-{key[1]}"


def is_reference_stub(data: Mapping[str, Any]) -> bool:
    """True when the resource carries nothing but its type and id."""
    return len(data) == 2 and entity_key(data) is not None


class IncludedIndex:
    """Map ``(type, id)`` to the full resource objects of a document.

    The index is built on the first lookup and kept for the lifetime of the
    instance, which is one deserialization call.
    """

    def __init__(self, document: Mapping[str, Any]) -> None:
        self.document = document
        self._items: dict[EntityKey, Mapping[str, Any]] | None = None

    def _build(self) -> dict[EntityKey, Mapping[str, Any]]:
        items: dict[EntityKey, Mapping[str, Any]] = {}
        included = self.document.get("included") or []
        if not isinstance(included, (list, tuple)):
            return items
        for item in included:
            if not isinstance(item, Mapping):
                continue
            key = entity_key(item)
            if key is not None:
                items[key] = item
        return items

    @property
    def items(self) -> dict[EntityKey, Mapping[str, Any]]:
        if self._items is None:
            self._items = self._build()
        return self._items

    def lookup(self, resource_type: Any, resource_id: Any) -> Mapping[str, Any]:
        """Return the included resource, or a ``{type, id}`` stub if absent."""
        key = entity_key({"type": resource_type, "id": resource_id})
        if key is not None:
            found = self.items.get(key)
            if found is not None:
                return found
        return {"type": resource_type, "id": resource_id}

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: object) -> bool:
        return key in self.items
