# adapter.py: builds json:api documents from Resourceful models
#
# to_document() -> make_resource() for the primary data
#   -> model.attributes(), model.relationships(), model.meta()
#     -> context.link_one() / context.link_many() -> make_resource() for the included models
#   -> link_relationships(): related data => resource linkage, built resources are cached
# -> the cached resources become the "included" part of the document
#
from typing import Any, Dict, Iterable, Optional, Union
import jadoc
from .cache import Cache
from .config import get_config
from .context import Context
from .errors import ErrorObject, JsonapiError, to_error_object
from .jsonapi_objects import Document, ImplementationInfo, Identifier, Linkage, Links, Relationship, Resource
from .parameters import Parameters
from .resourceful import NoRelatedData, RelatedCollection, RelatedData, RelatedRecord, Resourceful, is_resourceful
from .uri_generator import UriGenerator


def link_related_data(related_data: RelatedData, cache: Cache) -> Linkage:
    """
    Convert related data to resource linkage, loaded resources are added to the cache
    :param related_data: related data returned by `Context.link_one` / `Context.link_many`
    :param cache: cache of the current build
    :return: resource linkage
    """
    if isinstance(related_data, NoRelatedData):
        return Linkage.EMPTY

    if isinstance(related_data, RelatedRecord):
        if related_data.is_loaded:
            return Linkage.to_one(cache.register(related_data.resource))
        return Linkage.to_one(related_data.identifier)

    if isinstance(related_data, RelatedCollection):
        if related_data.is_loaded:
            return Linkage.to_many(cache.register(resource) for resource in related_data.resources)
        return Linkage.to_many(related_data.identifiers)

    raise TypeError(f"Invalid related data: {related_data!r}")


def link_relationships(identifier: Identifier, relationships: Dict[str, RelatedData], context: Context) -> Dict[str, Relationship]:
    """
    :param identifier: identifier of the resource the relationships belong to
    :param relationships: relationship names and related data
    :param context: build context
    :return: relationship names and relationship objects
    """
    result = {}
    for rel_name, related_data in relationships.items():
        links = Links(
            self_=context.uri_generator.uri_for_relationship(identifier, rel_name),
            related=context.uri_generator.uri_for_related(identifier, rel_name),
        )
        result[rel_name] = Relationship(links=links, data=link_related_data(related_data, context.cache))
    return result


def make_resource(model: Resourceful, context: Context) -> Resource:
    """
    Build the resource of `model`, or return it from the cache when it has been built before during this build

    The resource is reserved in the cache before its relationships are resolved:
    models referring back to it (directly or through other relationships) will link to the reserved entry
    so cyclic relationships terminate.

    :param model: Resourceful instance
    :param context: build context
    :return: json:api resource
    """
    identifier = model.identifier()
    cached = context.cache.get(identifier)
    if cached is not None:
        return cached

    links = Links(self_=context.uri_generator.uri_for_resource(identifier))
    context.cache.reserve(Resource(identifier, links=links))

    attributes = model.attributes(context)
    relationships = model.relationships(context)
    if relationships is not None:
        relationships = link_relationships(identifier, relationships, context)
    meta = model.meta(context)

    resource = Resource(
        identifier,
        attributes=dict(attributes) if attributes is not None else None,
        relationships=relationships,
        links=links,
        meta=dict(meta) if meta is not None else None,
    )
    context.cache.register(resource)
    return resource


def implementation_info() -> ImplementationInfo:
    return ImplementationInfo(version=get_config("JSONAPI_VERSION"))


def is_error_content(content: Any) -> bool:
    """
    :param content: to_document content
    :return: True if `content` is a (non-empty) list of errors
    """
    if isinstance(content, (ErrorObject, JsonapiError)):
        return True
    if not isinstance(content, (list, tuple)) or not content:
        return False
    errors = [isinstance(item, (ErrorObject, JsonapiError, dict)) for item in content]
    if all(errors):
        return True
    if any(errors):
        raise TypeError("A document can't contain both resources and errors")
    return False


def to_document(
    content: Union[Resourceful, Iterable[Resourceful], Iterable[ErrorObject], Iterable[JsonapiError]],
    uri: str,
    uri_generator: Optional[UriGenerator] = None,
    meta: Optional[Dict[str, Any]] = None,
) -> Document:
    """
    Create a json:api document

    :param content: a single model, a collection of models, or a list of errors
    :param uri: request uri, the query parameters determine the fields and included relationships
    :param uri_generator: creates the resource links
    :param meta: top level meta
    :return: Document, with primary data or errors
    """
    if uri_generator is None:
        uri_generator = UriGenerator()
    parameters = Parameters.from_uri(uri)
    cache = Cache()
    context = Context(cache, parameters, uri_generator)

    data = errors = None
    if is_error_content(content):
        if not isinstance(content, (list, tuple)):
            content = [content]
        errors = [to_error_object(error) for error in content]
    elif is_resourceful(content):
        data = make_resource(content, context)
    else:
        data = [make_resource(model, context) for model in content]

    # a compound document doesn't repeat the primary data in "included"
    if isinstance(data, list):
        primary = {resource.identifier for resource in data}
    elif data is not None:
        primary = {data.identifier}
    else:
        primary = set()
    included = [resource for resource in cache.values() if resource.identifier not in primary]
    jadoc.log.debug(f"Built document for {uri}: {len(primary)} primary, {len(included)} included resources")

    return Document(
        data=data,
        errors=errors,
        included=included or None,
        links=Links(self_=uri),
        jsonapi=implementation_info(),
        meta=meta,
    )
