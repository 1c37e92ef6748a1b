import logging
import os
import sys
from flask import Flask
from .errors import JsonapiError
from .json_encoder import JADocJSONProvider
from .response import jsonapi_response
import flask.app
from typing import Any


class JADOC:
    """This class holds the jadoc configuration and hooks the document builder into a Flask application
    :param app: a Flask application.
    :param LOGLEVEL: loglevel configuration variable, values from logging module (0: trace, .. 50: critical)
    """

    # Configuration settings are stored as class variables
    JSONAPI_VERSION = "1.1"  # the "jsonapi" member of every document
    JSONAPI_MIMETYPE = "application/vnd.api+json"
    BASE_URL = ""  # url prefix of the resource links when there's no request context
    PK_DELIMITER = "_"  # composite primary keys are joined with this delimiter to create the jsonapi id
    LOGLEVEL = logging.WARNING
    #
    config = {}

    def __init__(self, app: flask.app.Flask, **kwargs: Any) -> None:
        """
        Constructor
        """
        self.app = app
        if app is not None:
            self.init_app(app, **kwargs)

    def init_app(self, app: flask.app.Flask, **kwargs: Any) -> None:
        """
        Application initialization:
        - json:api encoding of the jadoc objects returned by the views
        - exceptions derived from JsonapiError are returned as an "errors" document
        """
        if not isinstance(app, Flask):  # pragma: no cover
            raise TypeError("'app' should be Flask.")

        app.json = JADocJSONProvider(app)

        if app.config.get("DEBUG", False):
            log.setLevel(logging.DEBUG)

        for conf_name, conf_val in kwargs.items():
            setattr(JADOC, conf_name, conf_val)

        # pylint: disable=unused-variable
        @app.errorhandler(JsonapiError)
        def handle_jsonapi_error(exc):
            log.debug(f"Returning errors document for {exc.__class__.__name__}")
            return jsonapi_response([exc])

    @staticmethod
    def init_logging(loglevel: int = logging.WARNING) -> logging.Logger:
        """
        Specify the log format used in the webserver logs
        The webserver will catch stdout so we redirect eveything to sys.stderr
        """
        log = logging.getLogger(__name__)
        if log.level == logging.NOTSET:
            handler = logging.StreamHandler(sys.stderr)
            formatter = logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
            handler.setFormatter(formatter)
            log.setLevel(loglevel)
            log.addHandler(handler)
        return log


#
# logging initialization
#
try:
    DEBUG = os.getenv("DEBUG", logging.WARNING)
    LOGLEVEL = int(DEBUG)
except ValueError:  # pragma: no cover
    print(f'Invalid LogLevel in DEBUG Environment Variable! "{DEBUG}"')
    LOGLEVEL = logging.INFO

log = JADOC.init_logging(LOGLEVEL)
