import pytest
from flask import Flask

from jadoc import DefaultUriGenerator, FlaskUriGenerator, Identifier, InvalidUriError, UnpersistedResourceError, UriGenerator
from jadoc.uri_generator import validate_uri


def test_default_base_url_is_empty() -> None:
    generator = UriGenerator()
    identifier = Identifier.existing("users", "1")

    assert generator.base_url() == ""
    assert generator.uri_for_resource(identifier) == "/users/1"
    assert generator.uri_for_relationship(identifier, "posts") == "/users/1/relationships/posts"
    assert generator.uri_for_related(identifier, "posts") == "/users/1/posts"


def test_uris_are_deterministic(uri_generator) -> None:
    identifier = Identifier.existing("users", "1")

    first = [uri_generator.uri_for_resource(identifier), uri_generator.uri_for_related(identifier, "posts")]
    second = [uri_generator.uri_for_resource(identifier), uri_generator.uri_for_related(identifier, "posts")]

    assert first == second == ["http://example.com/api/users/1", "http://example.com/api/users/1/posts"]


def test_unpersisted_identifier_has_no_uri(uri_generator) -> None:
    identifier = Identifier.new("users", "local")

    with pytest.raises(UnpersistedResourceError):
        uri_generator.uri_for_resource(identifier)
    with pytest.raises(UnpersistedResourceError):
        uri_generator.uri_for_relationship(identifier, "posts")
    with pytest.raises(UnpersistedResourceError):
        uri_generator.uri_for_related(identifier, "posts")


@pytest.mark.parametrize("id", ["with space", "a\nb", "100%", "é"])
def test_invalid_generated_uri_is_fatal(uri_generator, id: str) -> None:
    with pytest.raises(InvalidUriError):
        uri_generator.uri_for_resource(Identifier.existing("users", id))


@pytest.mark.parametrize("uri", ["/users/1", "http://localhost:5000/api/users/1", "https://[::1]/users/a%20b"])
def test_validate_uri_accepts(uri: str) -> None:
    assert validate_uri(uri) == uri


@pytest.mark.parametrize("uri", ["", "users/1", "http:/users/1", "http://host:port/users", "http://exa mple.com"])
def test_validate_uri_rejects(uri: str) -> None:
    with pytest.raises(InvalidUriError):
        validate_uri(uri)


@pytest.mark.parametrize(
    "protocol, host, namespace, expected",
    [
        ("", "", "", ""),
        ("", "", "api", "/api"),
        ("", "", "/api/v1/", "/api/v1"),
        ("https", "example.com", "", "https://example.com"),
        ("http", "localhost:5000", "api", "http://localhost:5000/api"),
    ],
)
def test_default_uri_generator_base_url(protocol: str, host: str, namespace: str, expected: str) -> None:
    assert DefaultUriGenerator(protocol, host, namespace).base_url() == expected


def test_default_uri_generator_requires_protocol_and_host() -> None:
    with pytest.raises(ValueError):
        DefaultUriGenerator(protocol="https")
    with pytest.raises(ValueError):
        DefaultUriGenerator(host="example.com")


def test_flask_uri_generator_uses_request_url_root() -> None:
    app = Flask(__name__)
    generator = FlaskUriGenerator(prefix="/api")

    with app.test_request_context("/api/users/1", base_url="http://example.org"):
        assert generator.uri_for_resource(Identifier.existing("users", "1")) == "http://example.org/api/users/1"


def test_flask_uri_generator_outside_request_uses_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    import jadoc

    monkeypatch.setattr(jadoc.JADOC, "BASE_URL", "https://api.example.com/")

    assert FlaskUriGenerator().base_url() == "https://api.example.com"
    assert FlaskUriGenerator("v2").base_url() == "https://api.example.com/v2"
