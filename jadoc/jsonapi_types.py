from typing import Any, Dict, List, TypedDict, Union


class JSONAPIResourceIdentifier(TypedDict, total=False):
    id: str
    lid: str
    type: str


class JSONAPIResourceObject(JSONAPIResourceIdentifier, total=False):
    attributes: Dict[str, Any]
    relationships: Dict[str, Any]
    meta: Dict[str, Any]
    links: Dict[str, Any]


JSONAPILinkage = Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier], None]
JSONAPIData = Union[JSONAPIResourceObject, List[JSONAPIResourceObject], None]


class JSONAPIRelationshipObject(TypedDict, total=False):
    links: Dict[str, str]
    data: JSONAPILinkage
    meta: Dict[str, Any]


class JSONAPIDocument(TypedDict, total=False):
    data: JSONAPIData
    errors: List[Dict[str, Any]]
    included: List[JSONAPIResourceObject]
    links: Dict[str, str]
    jsonapi: Dict[str, Any]
    meta: Dict[str, Any]
