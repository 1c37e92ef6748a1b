"""
Context: passed to the `Resourceful` methods while a document is being built.

It gives the models access to the requested sparse fieldsets and lets them link related models.
Whether related models are built into resources depends on the include= query parameter:
- no include= parameter: all relationships are included
- include=a,b: only the relationships named "a" and "b" are included, the others
  only contain resource linkage
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Tuple
import jadoc
from .cache import Cache
from .parameters import Parameters
from .resourceful import RelatedCollection, RelatedData, RelatedRecord
from .uri_generator import UriGenerator

if TYPE_CHECKING:  # pragma: no cover
    from .resourceful import Resourceful


class Context:
    def __init__(self, cache: Cache, parameters: Parameters, uri_generator: UriGenerator) -> None:
        self.cache = cache
        self.parameters = parameters
        self.uri_generator = uri_generator

    def fields_for(self, kind: str) -> Optional[List[str]]:
        return self.parameters.fields_for(kind)

    def filter_attributes(self, kind: str, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Apply the sparse fieldset of `kind` to `attributes`
        If a client requests a restricted set of fields for a given resource type, an endpoint MUST NOT include
        additional fields in resource objects of that type in its response.
        :param kind: resource type
        :param attributes: all attribute names and values
        :return: the requested attributes
        """
        fields = self.fields_for(kind)
        if fields is None:
            return dict(attributes)
        return {name: value for name, value in attributes.items() if name in fields}

    def is_included(self, relationship: str) -> bool:
        """
        :param relationship: relationship name
        :return: whether the related resources should be built and included
        """
        includes = self.parameters.include
        if includes is None:
            return True
        return relationship in includes

    def link_one(self, relationship: str, model: Optional[Resourceful] = None) -> Tuple[str, RelatedData]:
        """
        :param relationship: relationship name
        :param model: the related model, if any
        :return: (relationship, related data)
        """
        if model is None:
            return relationship, RelatedData.NONE

        if self.is_included(relationship):
            jadoc.log.debug(f"Including {relationship}")
            return relationship, RelatedRecord.loaded(jadoc.adapter.make_resource(model, self))

        return relationship, RelatedRecord.unloaded(model.identifier())

    def link_many(self, relationship: str, models: Iterable[Resourceful]) -> Tuple[str, RelatedData]:
        """
        :param relationship: relationship name
        :param models: the related models
        :return: (relationship, related data)
        """
        if self.is_included(relationship):
            jadoc.log.debug(f"Including {relationship}")
            return relationship, RelatedCollection.loaded(jadoc.adapter.make_resource(model, self) for model in models)

        return relationship, RelatedCollection.unloaded(model.identifier() for model in models)
