# Response class and flask view helper
import json
from flask import Response, request
from http import HTTPStatus
from typing import Any, Dict, Iterable, Optional
from .adapter import to_document
from .config import get_config
from .errors import ErrorObject
from .json_encoder import JADocJSONEncoder
from .uri_generator import FlaskUriGenerator, UriGenerator


class JADocResponse(Response):
    """
    Response class, json:api documents are sent with the "application/vnd.api+json" media type
    """

    default_mimetype = "application/vnd.api+json"


def errors_status(errors: Iterable[ErrorObject]) -> int:
    """
    When a server encounters multiple problems for a single request,
    the most generally applicable HTTP error code SHOULD be used in the response.
    :param errors: error objects of the document
    :return: http status code
    """
    statuses = set()
    for error in errors:
        try:
            statuses.add(int(error.status))
        except (TypeError, ValueError):
            statuses.add(HTTPStatus.INTERNAL_SERVER_ERROR.value)
    if len(statuses) == 1:
        return statuses.pop()
    if statuses and all(400 <= status < 500 for status in statuses):
        return HTTPStatus.BAD_REQUEST.value
    return HTTPStatus.INTERNAL_SERVER_ERROR.value


def jsonapi_response(
    content: Any, uri_generator: Optional[UriGenerator] = None, status: Optional[int] = None, meta: Optional[Dict[str, Any]] = None
) -> JADocResponse:
    """
    Create the json:api response for the current flask request

    :param content: a single model, a collection of models, or a list of errors
    :param uri_generator: link generator, by default the links are relative to the request url root
    :param status: http status code, derived from the errors when not provided
    :param meta: top level meta
    :return: flask response
    """
    if uri_generator is None:
        uri_generator = FlaskUriGenerator()
    document = to_document(content, request.url, uri_generator, meta=meta)

    if status is None:
        status = errors_status(document.errors) if document.is_errors else HTTPStatus.OK.value

    body = json.dumps(document, cls=JADocJSONEncoder)
    return JADocResponse(body, status=status, mimetype=get_config("JSONAPI_MIMETYPE"))
