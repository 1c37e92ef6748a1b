import pytest
from flask import Flask

from jadoc import JADOC, ErrorObject, GenericError, NotFoundError, ValidationError, jsonapi_response
from jadoc.response import errors_status

from models import Post, User

USERS = {"1": User("1", "Thomas", 40)}


@pytest.fixture
def app() -> Flask:
    app = Flask("jadoc-test")
    JADOC(app)

    @app.route("/api/users/<user_id>")
    def get_user(user_id):
        user = USERS.get(user_id)
        if user is None:
            raise NotFoundError(f"no user {user_id}")
        return jsonapi_response(user)

    @app.route("/api/posts")
    def get_posts():
        return jsonapi_response([Post("2", "b"), Post("1", "a")], meta={"count": 2})

    @app.route("/api/invalid")
    def invalid():
        return jsonapi_response([ValidationError("bad", parameter="sort"), ErrorObject(status=404)])

    return app


def test_resource_response(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/users/1?fields[users]=name")

    assert response.status_code == 200
    assert response.mimetype == "application/vnd.api+json"
    document = response.get_json(force=True)
    assert document["data"] == {
        "type": "users",
        "id": "1",
        "attributes": {"name": "Thomas"},
        "relationships": {
            "posts": {
                "links": {
                    "self": "http://localhost/users/1/relationships/posts",
                    "related": "http://localhost/users/1/posts",
                },
                "data": [],
            },
            "comments": {
                "links": {
                    "self": "http://localhost/users/1/relationships/comments",
                    "related": "http://localhost/users/1/comments",
                },
                "data": [],
            },
            "best_friend": {
                "links": {
                    "self": "http://localhost/users/1/relationships/best_friend",
                    "related": "http://localhost/users/1/best_friend",
                },
                "data": None,
            },
        },
        "links": {"self": "http://localhost/users/1"},
    }
    assert document["links"]["self"].startswith("http://localhost/api/users/1?")
    assert document["jsonapi"] == {"version": "1.1"}


def test_collection_response(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/posts")

    document = response.get_json(force=True)
    assert response.status_code == 200
    assert [resource["id"] for resource in document["data"]] == ["2", "1"]
    assert document["meta"] == {"count": 2}


def test_jsonapi_errors_are_returned_as_errors_document(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/users/2")

    document = response.get_json(force=True)
    assert response.status_code == 404
    assert response.mimetype == "application/vnd.api+json"
    assert "data" not in document
    assert document["errors"][0]["status"] == "404"
    assert document["errors"][0]["title"] == "Not Found"


def test_errors_response_status(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/invalid")

    assert response.status_code == 400
    assert [error["status"] for error in response.get_json(force=True)["errors"]] == ["400", "404"]


def test_errors_status() -> None:
    assert errors_status([ErrorObject(status=404)]) == 404
    assert errors_status([ErrorObject(status=409), ErrorObject(status=409)]) == 409
    assert errors_status([ErrorObject(status=404), ErrorObject(status=422)]) == 400
    assert errors_status([ErrorObject(status=404), GenericError("x").to_error()]) == 500
    assert errors_status([ErrorObject(title="no status")]) == 500


def test_app_json_provider_encodes_jadoc_objects(app: Flask) -> None:
    with app.app_context():
        assert app.json.dumps(ErrorObject(status=400)) == '{"status": "400"}'
        assert app.json.mimetype == "application/vnd.api+json"


def test_init_app_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(JADOC, "JSONAPI_VERSION", JADOC.JSONAPI_VERSION)
    app = Flask("jadoc-config")

    JADOC(app, JSONAPI_VERSION="1.0")

    assert JADOC.JSONAPI_VERSION == "1.0"
    with app.test_request_context("/api/posts/1"):
        response = jsonapi_response(Post("1"))
    assert response.get_json(force=True)["jsonapi"] == {"version": "1.0"}
