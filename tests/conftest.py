import pytest

from jadoc import Cache, Context, Parameters, UriGenerator
from models import BaseUriGenerator


@pytest.fixture
def uri_generator() -> UriGenerator:
    return BaseUriGenerator()


@pytest.fixture
def make_context(uri_generator):
    def _make_context(query: str = "") -> Context:
        return Context(Cache(), Parameters.parse_query(query), uri_generator)

    return _make_context
