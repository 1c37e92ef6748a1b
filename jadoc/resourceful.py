"""
Resourceful: the interface domain models implement so they can be serialized to json:api resources

    class User(Resourceful):

        def __init__(self, id, name, posts):
            self.id, self.name, self.posts = id, name, posts

        def kind(self):
            return "users"

        def identifier(self):
            return Identifier.existing(self.kind(), self.id)

        def attributes(self, context):
            return context.filter_attributes(self.kind(), {"name": self.name})

        def relationships(self, context):
            return dict([context.link_many("posts", self.posts)])

Subclassing `Resourceful` is optional: any object implementing the five methods can be serialized,
the mixin provides the defaults for `attributes`, `relationships` and `meta` (i.e. "absent").
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Tuple
from .jsonapi_objects import Identifier, Resource

if TYPE_CHECKING:  # pragma: no cover
    from .context import Context


class RelatedData:
    """
    The related data of a relationship, before it's converted to resource linkage:
    - RelatedData.NONE: there's no related resource
    - RelatedRecord: a to-one relationship
    - RelatedCollection: a to-many relationship
    Records and collections are "loaded" when the related resources have been built,
    "unloaded" when only their identifiers are known
    """

    NONE: NoRelatedData

    @property
    def is_loaded(self) -> bool:
        return False


@dataclass(frozen=True)
class NoRelatedData(RelatedData):
    pass


RelatedData.NONE = NoRelatedData()


@dataclass(frozen=True)
class RelatedRecord(RelatedData):
    identifier: Identifier
    resource: Optional[Resource] = None

    @classmethod
    def unloaded(cls, identifier: Identifier) -> RelatedRecord:
        return cls(identifier)

    @classmethod
    def loaded(cls, resource: Resource) -> RelatedRecord:
        return cls(resource.identifier, resource)

    @property
    def is_loaded(self) -> bool:
        return self.resource is not None


@dataclass(frozen=True)
class RelatedCollection(RelatedData):
    identifiers: Tuple[Identifier, ...] = ()
    resources: Optional[Tuple[Resource, ...]] = None

    @classmethod
    def unloaded(cls, identifiers: Iterable[Identifier]) -> RelatedCollection:
        return cls(tuple(identifiers))

    @classmethod
    def loaded(cls, resources: Iterable[Resource]) -> RelatedCollection:
        resources = tuple(resources)
        return cls(tuple(resource.identifier for resource in resources), resources)

    @property
    def is_loaded(self) -> bool:
        return self.resources is not None


class Resourceful:
    """
    Mixin for the domain models that are serialized as json:api resources
    """

    def kind(self) -> str:
        """
        :return: the json:api "type", also used in the fields[type] query parameter
        """
        raise NotImplementedError(f"{self.__class__.__name__} should implement kind()")

    def identifier(self) -> Identifier:
        raise NotImplementedError(f"{self.__class__.__name__} should implement identifier()")

    def attributes(self, context: Context) -> Optional[Dict[str, Any]]:
        """
        :param context: use `context.fields_for(self.kind())` or `context.filter_attributes`
                        to return only the requested fields
        :return: attribute names and values
        """
        return None

    def relationships(self, context: Context) -> Optional[Dict[str, RelatedData]]:
        """
        :param context: call `context.link_one` / `context.link_many` for every relationship
        :return: relationship names and related data
        """
        return None

    def meta(self, context: Context) -> Optional[Dict[str, Any]]:
        return None


def is_resourceful(obj: Any) -> bool:
    """
    :return: True if `obj` can be serialized as a resource
    """
    return callable(getattr(obj, "identifier", None)) and callable(getattr(obj, "kind", None))
