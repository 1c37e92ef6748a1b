from jadoc import Identifier, RelatedData, RelatedRecord

from models import Comment, Post, User


def test_filter_attributes(make_context) -> None:
    attributes = {"name": "Thomas", "age": 40, "active": True}

    assert make_context().filter_attributes("users", attributes) == attributes
    assert make_context("fields[users]=age,unknown").filter_attributes("users", attributes) == {"age": 40}
    assert make_context("fields[users]=").filter_attributes("users", attributes) == {}
    assert make_context("fields[posts]=title").filter_attributes("users", attributes) == attributes


def test_is_included(make_context) -> None:
    assert make_context().is_included("posts")
    assert make_context("include=posts").is_included("posts")
    assert not make_context("include=posts").is_included("comments")
    assert not make_context("include=").is_included("posts")


def test_link_one_without_model(make_context) -> None:
    assert make_context().link_one("author") == ("author", RelatedData.NONE)
    assert make_context().link_one("author", None)[1] is RelatedData.NONE


def test_link_one_builds_included_models(make_context) -> None:
    context = make_context()
    author = User("1", "Thomas")

    name, related = context.link_one("author", author)

    assert name == "author"
    assert related.is_loaded
    assert related.resource.attributes["name"] == "Thomas"
    assert context.cache.get(author.identifier()) is related.resource


def test_link_one_without_include(make_context) -> None:
    context = make_context("include=comments")

    name, related = context.link_one("author", User("1"))

    assert related == RelatedRecord.unloaded(Identifier.existing("users", "1"))
    assert not related.is_loaded
    assert context.cache.is_empty()


def test_link_many(make_context) -> None:
    post = Post("1")
    comments = [Comment("1", "a", post), Comment("2", "b", post)]

    _, loaded = make_context().link_many("comments", comments)
    _, unloaded = make_context("include=").link_many("comments", comments)

    assert loaded.is_loaded
    assert [resource.attributes["body"] for resource in loaded.resources] == ["a", "b"]
    assert not unloaded.is_loaded
    assert unloaded.identifiers == (Identifier.existing("comments", "1"), Identifier.existing("comments", "2"))
