# jsonapi_objects.py: the values a json:api document is made of
#
# All objects are immutable once created, the `encode` methods return
# json-ready dicts in which absent members are omitted.
#
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from .errors import ContractError, ErrorObject
from .jsonapi_types import JSONAPIDocument, JSONAPILinkage, JSONAPIRelationshipObject, JSONAPIResourceIdentifier, JSONAPIResourceObject


class Identifier:
    """
    A resource identifier is either
    - `NewIdentifier`: the resource hasn't been persisted yet, it may carry a local id ("lid")
    - `ExistingIdentifier`: the resource is addressable by its type and id

    Only existing identifiers can be cached or linked.
    """

    kind: str

    @staticmethod
    def new(kind: str, lid: Optional[str] = None) -> NewIdentifier:
        return NewIdentifier(kind, lid)

    @staticmethod
    def existing(kind: str, id: Any) -> ExistingIdentifier:  # pylint: disable=redefined-builtin
        return ExistingIdentifier(kind, id)

    @property
    def is_persisted(self) -> bool:
        return False

    def encode(self) -> JSONAPIResourceIdentifier:
        raise NotImplementedError  # pragma: no cover


@dataclass(frozen=True)
class NewIdentifier(Identifier):
    kind: str
    lid: Optional[str] = None

    def encode(self) -> JSONAPIResourceIdentifier:
        result = {"type": self.kind}
        if self.lid is not None:
            result["lid"] = self.lid
        return result


@dataclass(frozen=True)
class ExistingIdentifier(Identifier):
    kind: str
    id: str

    def __post_init__(self) -> None:
        # The id has to be of type string according to the jsonapi json validation schema
        object.__setattr__(self, "id", str(self.id))

    @property
    def is_persisted(self) -> bool:
        return True

    def encode(self) -> JSONAPIResourceIdentifier:
        return {"type": self.kind, "id": self.id}


class Linkage:
    """
    Resource linkage: the (type, id) references of a relationship
    http://jsonapi.org/format/#document-resource-object-linkage
    """

    EMPTY: EmptyLinkage

    @staticmethod
    def to_one(identifier: Identifier) -> ToOneLinkage:
        return ToOneLinkage(identifier)

    @staticmethod
    def to_many(identifiers: Iterable[Identifier]) -> ToManyLinkage:
        return ToManyLinkage(tuple(identifiers))

    def encode(self) -> JSONAPILinkage:
        raise NotImplementedError  # pragma: no cover


@dataclass(frozen=True)
class EmptyLinkage(Linkage):
    def encode(self) -> JSONAPILinkage:
        return None


@dataclass(frozen=True)
class ToOneLinkage(Linkage):
    identifier: Identifier

    def encode(self) -> JSONAPILinkage:
        return self.identifier.encode()


@dataclass(frozen=True)
class ToManyLinkage(Linkage):
    identifiers: Tuple[Identifier, ...] = ()

    def encode(self) -> JSONAPILinkage:
        return [identifier.encode() for identifier in self.identifiers]


Linkage.EMPTY = EmptyLinkage()


@dataclass(frozen=True)
class Links:
    """
    json:api links object, the `self` member is called `self_`
    """

    self_: Optional[str] = None
    related: Optional[str] = None
    describedby: Optional[str] = None

    def encode(self) -> Dict[str, str]:
        members = (("self", self.self_), ("related", self.related), ("describedby", self.describedby))
        return {name: value for name, value in members if value is not None}


@dataclass(frozen=True)
class Relationship:
    links: Optional[Links] = None
    data: Optional[Linkage] = None
    meta: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def encode(self) -> JSONAPIRelationshipObject:
        result = {}
        if self.links is not None:
            result["links"] = self.links.encode()
        if self.data is not None:
            result["data"] = self.data.encode()
        if self.meta is not None:
            result["meta"] = dict(self.meta)
        return result


@dataclass(frozen=True)
class Resource:
    """
    json:api resource object:
    `data = {
            "type": "...",
            "id": "...",
            "attributes": { ... },
            "relationships": { ... },
            "links": { "self": ... },
            "meta": { ... }
            }`
    """

    identifier: Identifier
    attributes: Optional[Dict[str, Any]] = field(default=None, hash=False)
    relationships: Optional[Dict[str, Relationship]] = field(default=None, hash=False)
    links: Optional[Links] = field(default=None, hash=False)
    meta: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def encode(self) -> JSONAPIResourceObject:
        result = dict(self.identifier.encode())
        if self.attributes is not None:
            result["attributes"] = dict(self.attributes)
        if self.relationships is not None:
            result["relationships"] = {name: rel.encode() for name, rel in self.relationships.items()}
        if self.links is not None:
            result["links"] = self.links.encode()
        if self.meta is not None:
            result["meta"] = dict(self.meta)
        return result


@dataclass(frozen=True)
class ImplementationInfo:
    """
    The "jsonapi" member of a document
    """

    version: Optional[str] = None
    ext: Optional[Tuple[str, ...]] = None
    profile: Optional[Tuple[str, ...]] = None
    meta: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def encode(self) -> Dict[str, Any]:
        result = {}
        if self.version is not None:
            result["version"] = self.version
        if self.ext is not None:
            result["ext"] = list(self.ext)
        if self.profile is not None:
            result["profile"] = list(self.profile)
        if self.meta is not None:
            result["meta"] = dict(self.meta)
        return result


@dataclass(frozen=True)
class Document:
    """
    Top level json:api document

    A document holds either primary data (`data`: a resource or a list of resources)
    or a list of `errors`, never both
    """

    data: Union[Resource, List[Resource], None] = field(default=None, hash=False)
    errors: Optional[List[ErrorObject]] = field(default=None, hash=False)
    included: Optional[List[Resource]] = field(default=None, hash=False)
    links: Optional[Links] = None
    jsonapi: Optional[ImplementationInfo] = None
    meta: Optional[Dict[str, Any]] = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.errors is not None and (self.data is not None or self.included is not None):
            raise ContractError("A document can't contain both data and errors")

    @property
    def is_collection(self) -> bool:
        return isinstance(self.data, list)

    @property
    def is_errors(self) -> bool:
        return self.errors is not None

    def encode(self) -> JSONAPIDocument:
        if self.errors is not None:
            result = {"errors": [error.encode() for error in self.errors]}
        elif self.is_collection:
            result = {"data": [resource.encode() for resource in self.data]}
        else:
            result = {"data": self.data.encode() if self.data is not None else None}
        if self.included is not None:
            result["included"] = [resource.encode() for resource in self.included]
        if self.links is not None:
            result["links"] = self.links.encode()
        if self.jsonapi is not None:
            result["jsonapi"] = self.jsonapi.encode()
        if self.meta is not None:
            result["meta"] = dict(self.meta)
        return result
