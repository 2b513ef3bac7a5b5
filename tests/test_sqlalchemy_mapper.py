import pytest
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_graph import deserialize
from jsonapi_graph.core.errors import ModelFactoryError
from jsonapi_graph.sqlalchemy import SQLAlchemyPropertiesMapper

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")


class Tag(Base):
    __tablename__ = "tags"

    slug = Column(String, primary_key=True)
    label = Column(String)


@pytest.fixture
def mapper() -> SQLAlchemyPropertiesMapper:
    return SQLAlchemyPropertiesMapper(base=Base)


def test_models_are_registered_by_tablename(mapper) -> None:
    assert mapper.models == {"users": User, "articles": Article, "tags": Tag}


def test_explicit_models_take_precedence() -> None:
    mapper = SQLAlchemyPropertiesMapper(base=Base, models={"people": User, "tags": Article})

    assert mapper.models["people"] is User
    assert mapper.models["tags"] is Article


def test_mapper_without_models_is_rejected() -> None:
    with pytest.raises(ModelFactoryError):
        SQLAlchemyPropertiesMapper()


def test_unknown_type_is_declined(mapper) -> None:
    assert mapper.create_model("comments") is None
    assert deserialize({"data": {"type": "comments", "id": "1"}}, mapper) is None


def test_builds_instances_with_coerced_primary_key(mapper) -> None:
    article = deserialize({"data": {"type": "articles", "id": "7", "attributes": {"title": "Hello"}}}, mapper)

    assert isinstance(article, Article)
    assert article.id == 7
    assert article.title == "Hello"


def test_string_primary_key_uses_its_column(mapper) -> None:
    tag = deserialize({"data": {"type": "tags", "id": "python", "attributes": {"label": "Python"}}}, mapper)

    assert tag.slug == "python"
    assert tag.label == "Python"


def test_unmapped_attributes_and_meta_are_ignored(mapper) -> None:
    document = {
        "data": {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "Hello", "word-count": 100},
            "meta": {"views": 3},
            "links": {"self": "/articles/1"},
        }
    }
    article = deserialize(document, mapper)

    assert article.title == "Hello"
    assert not hasattr(article, "word-count")
    assert not hasattr(article, "meta")


def test_relationships_become_object_references(mapper) -> None:
    document = {
        "data": [
            {"type": "articles", "id": "1", "attributes": {"title": "One"},
             "relationships": {"author": {"data": {"type": "users", "id": "9"}}}},
            {"type": "articles", "id": "2", "attributes": {"title": "Two"},
             "relationships": {"author": {"data": {"type": "users", "id": "9"}}}},
        ],
        "included": [
            {"type": "users", "id": "9", "attributes": {"name": "Ann"},
             "relationships": {"articles": {"data": [{"type": "articles", "id": "1"}, {"type": "articles", "id": "2"}]}}},
        ],
    }
    first, second = deserialize(document, mapper)

    assert first.author is second.author
    assert first.author.name == "Ann"
    assert first.author.id == 9
    assert first.author.articles == [first, second]


def test_null_to_one_clears_relationship(mapper) -> None:
    article = deserialize(
        {"data": {"type": "articles", "id": "1", "relationships": {"author": {"data": None}}}}, mapper
    )

    assert article.author is None


def test_unmapped_relationships_are_ignored(mapper) -> None:
    article = deserialize(
        {"data": {"type": "articles", "id": "1", "relationships": {"editor": {"data": {"type": "users", "id": "2"}}}}},
        mapper,
    )

    assert article.author is None
    assert not hasattr(article, "editor")
