from types import SimpleNamespace

from jadoc import Parameters, jsonapi_sort

from models import User


def _names(models) -> list:
    return [model.name for model in models]


def test_without_sort_the_order_is_kept() -> None:
    users = [User("1", "b"), User("2", "a")]

    assert jsonapi_sort(users, Parameters()) == users


def test_sort_ascending_and_descending() -> None:
    users = [User("1", "b", 30), User("2", "a", 20), User("3", "c", 30)]

    assert _names(jsonapi_sort(users, Parameters.parse_query("sort=name"))) == ["a", "b", "c"]
    assert _names(jsonapi_sort(users, Parameters.parse_query("sort=-name"))) == ["c", "b", "a"]


def test_sort_on_multiple_fields() -> None:
    users = [User("1", "b", 30), User("2", "a", 20), User("3", "c", 30), User("4", "d", 20)]

    result = jsonapi_sort(users, Parameters.parse_query("sort=-age,name"))

    assert _names(result) == ["b", "c", "a", "d"]


def test_missing_values_come_last() -> None:
    models = [SimpleNamespace(name="a", rank=None), SimpleNamespace(name="b", rank=2), SimpleNamespace(name="c", rank=1)]

    assert _names(jsonapi_sort(models, Parameters.parse_query("sort=rank"))) == ["c", "b", "a"]
    assert _names(jsonapi_sort(models, Parameters.parse_query("sort=-rank"))) == ["b", "c", "a"]


def test_unknown_and_unsortable_fields_are_ignored() -> None:
    models = [SimpleNamespace(name="b", value=1), SimpleNamespace(name="a", value="x")]

    assert _names(jsonapi_sort(models, Parameters.parse_query("sort=unknown"))) == ["b", "a"]
    assert _names(jsonapi_sort(models, Parameters.parse_query("sort=value"))) == ["b", "a"]
    assert _names(jsonapi_sort(models, Parameters.parse_query("sort=value,name"))) == ["a", "b"]
