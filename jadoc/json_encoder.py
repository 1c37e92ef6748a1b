# jadoc to json encoding

import datetime
import decimal
import json
from flask.json.provider import DefaultJSONProvider
from uuid import UUID
import jadoc
from .config import is_debug
from .errors import ErrorObject, JsonapiError
from .jsonapi_objects import Document, Identifier, ImplementationInfo, Linkage, Links, Relationship, Resource
from typing import Any

# objects with an `encode()` method returning their json:api representation
JSONAPI_OBJECTS = (Document, Resource, Relationship, Identifier, Linkage, Links, ImplementationInfo, ErrorObject)


class _JADocJSONEncoder:
    """
    JSON encoding for jadoc objects and common types
    """

    # pylint: disable=too-many-return-statements
    # pylint: disable=arguments-differ,method-hidden
    def default(self, obj: Any, **kwargs: Any) -> Any:
        """
        override the default json encoding
        :param obj: object to be encoded
        :return: encoded/serialized object
        """
        if obj is None:
            return None
        if isinstance(obj, JSONAPI_OBJECTS):
            return obj.encode()
        if isinstance(obj, JsonapiError):
            return obj.to_error().encode()
        if isinstance(obj, datetime.timedelta):
            return str(obj)
        if isinstance(obj, datetime.datetime):
            return obj.isoformat(" ")
        if isinstance(obj, (datetime.date, datetime.time)):
            return obj.isoformat()
        if isinstance(obj, (set, frozenset, tuple)):
            return list(obj)
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, decimal.Decimal):
            return float(obj)
        if isinstance(obj, bytes):
            if obj == b"":
                return ""
            jadoc.log.debug("JADocJSONEncoder: serializing bytes obj")
            return obj.hex()

        # We shouldn't get here: attribute values should be json serializable
        if not is_debug():
            jadoc.log.warning(f'JSON Encoding Error: Unknown object type "{type(obj)}" for {obj}')
            return {"error": "JADocJSONEncoder invalid object"}

        return self.public_attrs_encode(obj)

    @staticmethod
    def public_attrs_encode(obj: Any) -> Any:
        """
        if everything else failed, try to encode the public obj attributes
        i.e. those attributes without a _ prefix
        :param obj: object to be encoded
        :return: encoded/serialized object
        """
        try:
            result = {}
            for k, v in vars(obj).items():
                if not k.startswith("_"):
                    if isinstance(v, (int, float)) or v is None:
                        result[k] = v
                    else:
                        result[k] = str(v)
        except TypeError:
            result = str(obj)
        return result


class JADocJSONProvider(_JADocJSONEncoder, DefaultJSONProvider):
    """
    Flask JSON encoding
    """

    mimetype = "application/vnd.api+json"


class JADocJSONEncoder(_JADocJSONEncoder, json.JSONEncoder):
    """
    Common JSON encoding
    """

    pass
