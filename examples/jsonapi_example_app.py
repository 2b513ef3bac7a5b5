"""Example FastAPI app turning JSON:API request bodies into SQLAlchemy models.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload
"""
from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_graph import init_logging
from jsonapi_graph.dependencies import JSONAPIBody
from jsonapi_graph.middleware import JSONAPIGraphErrorMiddleware
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


def article_mapper() -> SQLAlchemyPropertiesMapper:
    return SQLAlchemyPropertiesMapper(base=Base)


init_logging()
app = FastAPI(title="jsonapi-graph example")
app.add_middleware(JSONAPIGraphErrorMiddleware)


@app.post("/articles")
async def create_article(article: Any = Depends(JSONAPIBody(article_mapper))) -> dict[str, Any]:
    author = article.author
    return {
        "title": article.title,
        "author": author.name if author is not None else None,
        "author_articles": [item.title for item in author.articles] if author is not None else [],
    }
