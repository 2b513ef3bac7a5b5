import json
from typing import Any

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from jsonapi_graph.dependencies import JSONAPIBody
from jsonapi_graph.mappers import SnakeCaseModelMapper
from jsonapi_graph.middleware import JSONAPIGraphErrorMiddleware

JSONAPI = {"content-type": "application/vnd.api+json"}


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(JSONAPIGraphErrorMiddleware)

    @app.post("/articles")
    async def create(article: Any = Depends(JSONAPIBody(SnakeCaseModelMapper))) -> dict[str, Any]:
        return {
            "id": article.id,
            "author": article.author.first_name,
            "cyclic": article.author.articles[0] is article,
        }

    @app.post("/loose")
    async def loose(models: Any = Depends(JSONAPIBody(require_media_type=False))) -> dict[str, Any]:
        return {"ids": [model.id for model in models]}

    return TestClient(app)


def test_body_is_deserialized(client, blog_document) -> None:
    response = client.post("/articles", content=json.dumps(blog_document), headers=JSONAPI)

    assert response.status_code == 200
    assert response.json() == {"id": "1", "author": "Dan", "cyclic": True}


def test_wrong_media_type_is_rejected(client, blog_document) -> None:
    response = client.post("/articles", json=blog_document)

    assert response.status_code == 415
    assert response.headers["content-type"].startswith("application/vnd.api+json")
    assert response.json()["errors"][0]["code"] == "unsupported_media_type"


def test_media_type_parameters_are_rejected(client, blog_document) -> None:
    headers = {"content-type": "application/vnd.api+json; charset=utf-8"}
    response = client.post("/articles", content=json.dumps(blog_document), headers=headers)

    assert response.status_code == 415


def test_invalid_json_gives_error_document(client) -> None:
    response = client.post("/articles", content="{oops", headers=JSONAPI)

    assert response.status_code == 400
    error = response.json()["errors"][0]
    assert error["code"] == "invalid_document"
    assert error["detail"].startswith("Request body is not valid JSON")


def test_media_type_check_can_be_disabled(client) -> None:
    body = {"data": [{"type": "posts", "id": "1"}, {"type": "posts", "id": "2"}]}
    response = client.post("/loose", json=body)

    assert response.status_code == 200
    assert response.json() == {"ids": ["1", "2"]}
