# Configuration settings should be set in app.config or as jadoc.JADOC class attributes
# The get_config function looks them up in that order, the environment is used as a last resort
import os
import logging
from flask import current_app
import jadoc
from typing import Any


def get_config(option: str) -> Any:
    """Retrieve a configuration parameter from the app
    :param option: configuration parameter
    :return: configuration value
    """
    try:
        result = current_app.config[option]
    except (KeyError, RuntimeError):
        # RuntimeError: working outside of application context
        result = getattr(jadoc.JADOC, option, os.environ.get(option, None))
    return result


def is_debug() -> bool:
    """
    We use the loglevel to check whether we're running in debug mode
    :return: whether the app is in debug mode
    :rtype: Boolean
    """
    return jadoc.log.getEffectiveLevel() < logging.INFO
