"""
json:api query parameters

Parse the query string of the request uri:
- include=author,comments
- fields[articles]=title,body
- sort=-created,title
- filter[author][name]=value

Parsing is lenient: query entries that don't match one of these shapes are ignored,
parsing never raises an exception.
"""
import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple
from urllib.parse import unquote_plus, urlsplit
import jadoc

TOKEN_CHARS = frozenset(string.ascii_letters + string.digits)
TOKEN_SEPARATORS = frozenset("-_")


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortField:
    field: str
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING


def is_token(text: str) -> bool:
    """
    :param text: member name or path segment
    :return: True if `text` consists of alphanumeric characters, optionally separated
             by runs of "-" and "_" (a separator can't be the first or last character)
    """
    if not text or text[0] not in TOKEN_CHARS or text[-1] not in TOKEN_CHARS:
        return False
    return all(char in TOKEN_CHARS or char in TOKEN_SEPARATORS for char in text)


def parse_family_key(key: str) -> Optional[Tuple[str, List[str]]]:
    """
    Split a query parameter family key into its name and path segments,
    eg. "filter[author][name]" => ("filter", ["author", "name"])

    :param key: query parameter name
    :return: (name, segments) or None if the key isn't of the form name[seg1][seg2]...
    """
    name, bracket, _ = key.partition("[")
    if not bracket or not is_token(name):
        return None

    segments = []
    position = len(name)
    while position < len(key):
        if key[position] != "[":
            return None
        end = key.find("]", position)
        if end < 0:
            return None
        segment = key[position + 1 : end]
        if not is_token(segment):
            return None
        segments.append(segment)
        position = end + 1

    return name, segments


def parse_include(value: str) -> List[str]:
    # Multiple related resources can be requested in a comma-separated list
    return [inc for inc in value.split(",") if inc]


def parse_sort(value: str) -> List["SortField"]:
    """
    http://jsonapi.org/format/#fetching-sorting
    The sort order for each sort field MUST be ascending unless it is prefixed
    with a minus, in which case it MUST be descending.
    """
    result = []
    for sort_attr in value.split(","):
        direction = SortDirection.ASCENDING
        if sort_attr.startswith("-"):
            direction = SortDirection.DESCENDING
            sort_attr = sort_attr[1:]
        if not is_token(sort_attr):
            jadoc.log.debug(f"Ignoring invalid sort field '{sort_attr}'")
            continue
        result.append(SortField(sort_attr, direction))
    return result


@dataclass
class Parameters:
    """
    The json:api query parameters of one request

    `None` means the parameter was absent from the query, which is not the same as an empty value:
    when `include` is absent all relationships are included, `include=` includes none.
    """

    fields: Optional[Dict[str, List[str]]] = None
    include: Optional[List[str]] = None
    filter: Optional[Dict[str, str]] = None
    sort: Optional[List[SortField]] = None

    @classmethod
    def from_uri(cls, uri: str) -> "Parameters":
        """
        :param uri: request uri
        :return: Parameters parsed from the uri query component
        """
        try:
            query = urlsplit(uri).query
        except ValueError as exc:
            jadoc.log.warning(f"Failed to parse uri '{uri}': {exc}")
            return cls()
        return cls.parse_query(query)

    @classmethod
    def parse_query(cls, query: str) -> "Parameters":
        """
        :param query: url query string, eg. "include=author&fields[people]=name"
        :return: Parameters
        """
        parameters = cls()
        fields = {}
        filters = {}

        for entry in query.split("&"):
            key, equals, value = entry.partition("=")
            if not equals:
                continue
            key, value = unquote_plus(key), unquote_plus(value)

            if key == "include":
                parameters.include = parse_include(value)
                continue
            if key == "sort":
                parameters.sort = parse_sort(value)
                continue

            family = parse_family_key(key)
            if family is None:
                jadoc.log.debug(f"Ignoring query parameter '{key}'")
                continue
            name, segments = family
            path = ".".join(segments)
            if name == "fields":
                # https://jsonapi.org/format/#fetching-sparse-fieldsets
                fields[path] = [field for field in value.split(",") if field]
            elif name == "filter":
                # the filter value is kept as-is, its interpretation is up to the application
                filters[path] = value
            else:
                jadoc.log.debug(f"Ignoring query parameter family '{name}'")

        if fields:
            parameters.fields = fields
        if filters:
            parameters.filter = filters

        return parameters

    def fields_for(self, kind: str) -> Optional[List[str]]:
        """
        :param kind: resource type
        :return: the sparse fieldset requested for `kind`, None if all fields should be returned
        """
        if self.fields is None:
            return None
        return self.fields.get(kind)
