# Error handling
#
# Two kinds of failures are distinguished:
# - ContractError: the caller broke a precondition of the document builder, eg. it requested the
#   url of a resource that has not been assigned an id yet. These are programming errors, they're raised
#   immediately and never end up in a response document.
# - JsonapiError: domain errors. They're converted to json:api error objects, for example:
# {
#      "status": "404",
#      "title": "Not Found",
#      "detail": "NotFoundError (debug logging disabled)"
# }
#
# The application loglevel determines the level of detail shown to the user.
# If set to debug, too much sensitive info might be shown !
#
import jadoc
from http import HTTPStatus
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional
from .config import is_debug

HIDDEN_LOG = "(debug logging disabled)"


class PermissiveModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ErrorLinks(PermissiveModel):
    about: Optional[str] = None
    type_: Optional[str] = Field(default=None, alias="type")


class ErrorSource(PermissiveModel):
    """
    References to the primary source of the error, only one of the members is expected to be set
    """

    pointer: Optional[str] = None
    parameter: Optional[str] = None
    header: Optional[str] = None


class ErrorObject(PermissiveModel):
    """
    json:api error object (https://jsonapi.org/format/#error-objects)
    """

    id: Optional[str] = None
    links: Optional[ErrorLinks] = None
    status: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[ErrorSource] = None
    meta: Optional[Dict[str, Any]] = None

    @field_validator("status", mode="before")
    @classmethod
    def status_to_str(cls, value: Any) -> Any:
        # the status member is the http status code expressed as a string value
        if isinstance(value, int):
            return str(int(value))
        return value

    @classmethod
    def default(cls) -> "ErrorObject":
        """
        :return: the error used when nothing more is known about the problem
        """
        return cls(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="InternalServerFault",
            title="An unexpected error occurred. No more information is available.",
        )

    def encode(self) -> Dict[str, Any]:
        """
        :return: json-ready dict, absent members are omitted
        """
        return self.model_dump(by_alias=True, exclude_none=True)


class ContractError(RuntimeError):
    """
    The document builder was used in a way that violates its preconditions
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        jadoc.log.error(f"{self.__class__.__name__}: {message}")


class UnpersistedResourceError(ContractError):
    """
    Raised when a url is requested for a resource without id (i.e. not persisted yet)
    """


class InvalidUriError(ContractError):
    """
    Raised when a generated url isn't a valid uri, this indicates a configuration error
    (eg. a base url, type or id containing illegal characters)
    """


class JsonapiError(Exception):
    """
    Base class of the errors that can be returned in a json:api "errors" document
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
    title = HTTPStatus.INTERNAL_SERVER_ERROR.phrase
    message = ""
    api_code = None

    def to_error(self) -> ErrorObject:
        """
        :return: json:api error object describing this exception
        """
        return ErrorObject(status=self.status_code, code=self.api_code, title=self.title, detail=self.message)


class NotFoundError(JsonapiError):
    """
    This exception is raised when an item was not found
    """

    status_code = HTTPStatus.NOT_FOUND.value
    title = HTTPStatus.NOT_FOUND.phrase
    message = "NotFoundError "

    def __init__(self, message="", status_code=HTTPStatus.NOT_FOUND.value, api_code=None):
        """
        :param message: Message to be returned in the (json) body
        :param status_code: HTTP Status code
        :param api_code: API code
        """
        Exception.__init__(self, message)
        self.status_code = status_code
        self.api_code = api_code
        jadoc.log.error("Not found: %s", message)
        if is_debug():
            self.message += message
        else:
            self.message += HIDDEN_LOG


class UnAuthorizedError(JsonapiError):
    """
    This exception is raised when an authorization error occured
    we use FORBIDDEN(403) instead of UNAUTHORIZED(401)
    """

    status_code = HTTPStatus.FORBIDDEN.value
    title = HTTPStatus.FORBIDDEN.phrase
    message = "Authorization Error: "

    def __init__(self, message="", status_code=HTTPStatus.FORBIDDEN.value, api_code=None):
        Exception.__init__(self, message)
        self.status_code = status_code
        self.api_code = api_code
        jadoc.log.error("UnAuthorizedError: %s", message)
        if is_debug():
            self.message += message
        else:
            self.message += HIDDEN_LOG


class GenericError(JsonapiError):
    """
    This exception is raised when an error has been detected
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value  # 500
    message = "Generic Error: "

    def __init__(self, message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR.value, api_code=None):
        Exception.__init__(self, message)
        self.status_code = status_code
        self.api_code = api_code
        jadoc.log.error("Generic Error: %s", message)
        if is_debug():
            self.message += str(message)
        else:
            self.message += HIDDEN_LOG


class ValidationError(JsonapiError):
    """
    This exception is raised when invalid input has been detected (client side input)
    Always send back the message to the client in the response
    """

    status_code = HTTPStatus.BAD_REQUEST.value
    title = HTTPStatus.BAD_REQUEST.phrase
    message = "Validation Error: "

    def __init__(self, message="", status_code=HTTPStatus.BAD_REQUEST.value, api_code=None, parameter=None):
        Exception.__init__(self, message)
        self.status_code = status_code
        self.api_code = api_code
        self.parameter = parameter
        jadoc.log.warning("ValidationError: %s", message)
        self.message += message

    def to_error(self) -> ErrorObject:
        error = super().to_error()
        if self.parameter:
            error.source = ErrorSource(parameter=self.parameter)
        return error


def to_error_object(item: Any) -> ErrorObject:
    """
    :param item: ErrorObject, JsonapiError or dict with error object members
    :return: ErrorObject
    """
    if isinstance(item, ErrorObject):
        return item
    if isinstance(item, JsonapiError):
        return item.to_error()
    if isinstance(item, dict):
        return ErrorObject.model_validate(item)
    raise TypeError(f"Can't convert {type(item)} to a json:api error object")
