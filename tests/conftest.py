from typing import Any, Mapping

import pytest

from jsonapi_graph.mappers import ModelPropertiesMapper, PropertiesMapperBase
from jsonapi_graph.mappers.model import JSONAPIModel


class RecordingMapper(ModelPropertiesMapper):
    """Model mapper that records calls and can decline types."""

    def __init__(self, declined: tuple[str, ...] = ()) -> None:
        self.declined = declined
        self.calls: list[tuple[str, Any]] = []

    def create_model(self, type_: str) -> JSONAPIModel | None:
        self.calls.append(("create_model", type_))
        if type_ in self.declined:
            return None
        return super().create_model(type_)

    def set_relationships(self, model: Any, relationships: Mapping[str, Any]) -> None:
        self.calls.append(("set_relationships", (model.type, model.id, sorted(relationships))))
        super().set_relationships(model, relationships)

    def called(self, name: str) -> list[Any]:
        return [args for call, args in self.calls if call == name]


class BareMapper(PropertiesMapperBase):
    """Mapper with only the required methods, storing everything in dicts."""

    def create_model(self, type_: str) -> dict[str, Any]:
        return {"type": type_}

    def set_id(self, model: Any, id_: Any) -> None:
        model["id"] = id_

    def set_attributes(self, model: Any, attributes: Mapping[str, Any]) -> None:
        model.update(attributes)

    def set_relationships(self, model: Any, relationships: Mapping[str, Any]) -> None:
        model["relationships"] = dict(relationships)


@pytest.fixture
def mapper() -> RecordingMapper:
    return RecordingMapper()


@pytest.fixture
def blog_document() -> dict[str, Any]:
    """An article whose author and comments point back at each other."""
    return {
        "data": {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "JSON:API paints my bikeshed!"},
            "relationships": {
                "author": {
                    "data": {"type": "people", "id": "9"},
                    "links": {"related": "/articles/1/author"},
                },
                "comments": {
                    "data": [{"type": "comments", "id": "5"}, {"type": "comments", "id": "12"}],
                    "meta": {"count": 2},
                },
            },
            "links": {"self": "/articles/1"},
            "meta": {"views": 10},
        },
        "included": [
            {
                "type": "people",
                "id": "9",
                "attributes": {"first-name": "Dan", "last-name": "Gebhardt"},
                "relationships": {"articles": {"data": [{"type": "articles", "id": "1"}]}},
            },
            {
                "type": "comments",
                "id": "5",
                "attributes": {"body": "First!"},
                "relationships": {"author": {"data": {"type": "people", "id": "2"}}},
            },
            {
                "type": "comments",
                "id": "12",
                "attributes": {"body": "I like XML better"},
                "relationships": {"author": {"data": {"type": "people", "id": "9"}}},
            },
        ],
    }
