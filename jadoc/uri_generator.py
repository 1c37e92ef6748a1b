"""
Generation of the "links" urls of resources and relationships

The url formatters determine the urls of the resource objects:
- resource:     {base_url}/{type}/{id}                      (eg. /api/users/1)
- relationship: {resource}/relationships/{relationship}     (eg. /api/users/1/relationships/posts)
- related:      {resource}/{relationship}                   (eg. /api/users/1/posts)

Subclass `UriGenerator` and override `base_url` to change the url prefix, or the `uri_for_*`
methods to change the layout.
"""
import string
from urllib.parse import urlsplit
from flask import has_request_context, request
from .config import get_config
from .errors import InvalidUriError, UnpersistedResourceError
from .jsonapi_objects import Identifier

RESOURCE_URL_FMT = "{}/{}/{}"
RELATIONSHIP_URL_FMT = "{}/relationships/{}"
RELATED_URL_FMT = "{}/{}"

# characters allowed in a uri by rfc 3986 (reserved + unreserved + percent)
URI_CHARS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")
HEX_DIGITS = frozenset(string.hexdigits)


def validate_uri(uri: str) -> str:
    """
    :param uri: generated uri
    :return: `uri` if it's a valid absolute uri or absolute path
    :raises InvalidUriError: if `uri` isn't valid
    """
    if not uri or any(char not in URI_CHARS for char in uri):
        raise InvalidUriError(f"Generated an invalid URI: '{uri}'")

    for position, char in enumerate(uri):
        if char == "%" and not (len(uri) > position + 2 and uri[position + 1] in HEX_DIGITS and uri[position + 2] in HEX_DIGITS):
            raise InvalidUriError(f"Generated an invalid URI: '{uri}' (invalid percent encoding)")

    try:
        parts = urlsplit(uri)
        parts.port  # raises ValueError if the port is out of range or not numeric
    except ValueError as exc:
        raise InvalidUriError(f"Generated an invalid URI: '{uri}' ({exc})")

    if parts.scheme and not parts.netloc:
        raise InvalidUriError(f"Generated an invalid URI: '{uri}' (missing host)")
    if not parts.scheme and not uri.startswith("/"):
        raise InvalidUriError(f"Generated an invalid URI: '{uri}' (relative reference)")

    return uri


class UriGenerator:
    """
    Creates the links of the resources in a document.
    The urls only depend on the base url and the identifier of the resource
    """

    def base_url(self) -> str:
        return ""

    def uri_for_resource(self, identifier: Identifier) -> str:
        """
        :param identifier: identifier of an existing resource
        :return: resource url
        :raises UnpersistedResourceError: a resource without an id has no url
        """
        if not identifier.is_persisted:
            raise UnpersistedResourceError(f"Attempted to generate URI for unpersisted resource {identifier}")
        return validate_uri(RESOURCE_URL_FMT.format(self.base_url(), identifier.kind, identifier.id))

    def uri_for_relationship(self, identifier: Identifier, relationship: str) -> str:
        resource = self.uri_for_resource(identifier)
        return validate_uri(RELATIONSHIP_URL_FMT.format(resource, relationship))

    def uri_for_related(self, identifier: Identifier, relationship: str) -> str:
        resource = self.uri_for_resource(identifier)
        return validate_uri(RELATED_URL_FMT.format(resource, relationship))


def join_base_url(root: str, namespace: str) -> str:
    """
    :return: `root` and `namespace` joined by a single "/", without trailing "/"
    """
    root = root.rstrip("/")
    namespace = namespace.strip("/")
    if namespace:
        return f"{root}/{namespace}"
    return root


class DefaultUriGenerator(UriGenerator):
    """
    :param protocol: url scheme, eg. "https"
    :param host: host (and port), eg. "example.com:8080"
    :param namespace: url path prefix, eg. "api/v1"

    protocol and host must either be both present or both absent,
    when absent the urls will be absolute paths, eg. "/api/v1/users/1"
    """

    def __init__(self, protocol: str = "", host: str = "", namespace: str = "") -> None:
        if bool(protocol) != bool(host):
            raise ValueError("URL protocol and host must either be both absent or both present.")
        self.protocol = protocol
        self.host = host
        self.namespace = namespace

    def base_url(self) -> str:
        if not self.host:
            return join_base_url("", self.namespace)
        return join_base_url(f"{self.protocol}://{self.host}", self.namespace)


class FlaskUriGenerator(UriGenerator):
    """
    Generate urls relative to the url root of the current flask request,
    outside of a request context the BASE_URL config value is used

    :param prefix: url prefix of the api, eg. "/api"
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def base_url(self) -> str:
        if has_request_context():
            url_root = request.url_root
        else:
            url_root = get_config("BASE_URL") or ""
        return join_base_url(url_root, self.prefix)
