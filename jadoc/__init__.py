# flake8: noqa: F401
#
# jadoc: build json:api documents from graphs of python objects
#
from .jadoc_init import JADOC, log
from .errors import (
    ContractError,
    UnpersistedResourceError,
    InvalidUriError,
    JsonapiError,
    ValidationError,
    GenericError,
    UnAuthorizedError,
    NotFoundError,
    ErrorObject,
    ErrorSource,
    ErrorLinks,
)
from .jsonapi_objects import (
    Identifier,
    NewIdentifier,
    ExistingIdentifier,
    Linkage,
    Links,
    Relationship,
    Resource,
    Document,
    ImplementationInfo,
)
from .parameters import Parameters, SortField, SortDirection
from .cache import Cache
from .context import Context
from .resourceful import Resourceful, RelatedData, RelatedRecord, RelatedCollection
from .uri_generator import UriGenerator, DefaultUriGenerator, FlaskUriGenerator
from .adapter import make_resource, to_document
from .jsonapi_formatting import jsonapi_sort
from .json_encoder import JADocJSONEncoder, JADocJSONProvider
from .response import JADocResponse, jsonapi_response
from .__about__ import __version__, __description__

__all__ = (
    "__version__",
    "__description__",
    #
    "JADOC",
    "log",
    # document values:
    "Identifier",
    "NewIdentifier",
    "ExistingIdentifier",
    "Linkage",
    "Links",
    "Relationship",
    "Resource",
    "Document",
    "ImplementationInfo",
    # document building:
    "Parameters",
    "SortField",
    "SortDirection",
    "Cache",
    "Context",
    "Resourceful",
    "RelatedData",
    "RelatedRecord",
    "RelatedCollection",
    "UriGenerator",
    "DefaultUriGenerator",
    "FlaskUriGenerator",
    "make_resource",
    "to_document",
    "jsonapi_sort",
    # encoding & flask:
    "JADocJSONEncoder",
    "JADocJSONProvider",
    "JADocResponse",
    "jsonapi_response",
    # Errors:
    "ContractError",
    "UnpersistedResourceError",
    "InvalidUriError",
    "JsonapiError",
    "ValidationError",
    "GenericError",
    "UnAuthorizedError",
    "NotFoundError",
    "ErrorObject",
    "ErrorSource",
    "ErrorLinks",
)
