"""
Identity map of the resources created while building one document.

The cache is what keeps a resource that can be reached through several relationship
paths from being built (and included) more than once: the first resource registered
for an identifier is the one that will be used for the rest of the build.
"""
from typing import Dict, Iterator, Optional, Set
import jadoc
from .errors import UnpersistedResourceError
from .jsonapi_objects import Identifier, Resource


class Cache:
    def __init__(self) -> None:
        self._index: Dict[Identifier, Resource] = {}
        # identifiers of the resources that are still being built
        self._reserved: Set[Identifier] = set()

    def has(self, identifier: Identifier) -> bool:
        return identifier in self._index

    __contains__ = has

    def get(self, identifier: Identifier) -> Optional[Resource]:
        return self._index.get(identifier)

    def reserve(self, resource: Resource) -> Identifier:
        """
        Register a placeholder for a resource that is being built,
        references to the resource that are encountered while building it will resolve to the placeholder
        :param resource: placeholder resource
        :return: identifier of the resource
        """
        identifier = self._check_identifier(resource)
        if identifier not in self._index:
            self._index[identifier] = resource
            self._reserved.add(identifier)
        return identifier

    def register(self, resource: Resource) -> Identifier:
        """
        Add a built resource, this replaces the placeholder added by `reserve`
        A resource that was registered before is kept: the first materialization wins
        :param resource: the resource to be added
        :return: identifier of the resource
        """
        identifier = self._check_identifier(resource)
        current = self._index.get(identifier)
        if identifier in self._reserved:
            if resource is not current:
                self._reserved.discard(identifier)
                self._index[identifier] = resource
        elif current is None:
            self._index[identifier] = resource
        elif current is not resource:
            jadoc.log.debug(f"{identifier} already registered, keeping the first instance")
        return identifier

    def is_empty(self) -> bool:
        return not self._index

    def values(self) -> Iterator[Resource]:
        return iter(list(self._index.values()))

    def __len__(self) -> int:
        return len(self._index)

    @staticmethod
    def _check_identifier(resource: Resource) -> Identifier:
        identifier = resource.identifier
        if not identifier.is_persisted:
            raise UnpersistedResourceError(f"Can't cache unpersisted resource {identifier}")
        return identifier
