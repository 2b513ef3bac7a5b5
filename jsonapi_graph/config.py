"""Library settings and logging setup.

Settings are class attributes on :class:`Settings`; each one can be
overridden with an environment variable of the same name.
"""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache
from typing import Any

LOGGER_NAME = "jsonapi_graph"
LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


class Settings:
    """Default configuration values."""

    # loglevel of the "jsonapi_graph" logger, values from the logging module
    JSONAPI_GRAPH_LOGLEVEL: int = logging.WARNING
    # media type accepted by the JSONAPIBody dependency
    JSONAPI_GRAPH_MEDIA_TYPE: str = "application/vnd.api+json"


@lru_cache(maxsize=32)
def get_config(option: str) -> Any:
    """Retrieve a configuration option.

    :param option: name of the option, eg. JSONAPI_GRAPH_LOGLEVEL
    :return: the environment value if set, else the default from Settings
    """
    default = getattr(Settings, option, None)
    value = os.environ.get(option)
    if value is None:
        return default
    if isinstance(default, int):
        return _parse_level(value, default)
    return value


def _parse_level(value: str, default: int) -> int:
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def init_logging(loglevel: int | None = None) -> logging.Logger:
    """Install a stderr handler on the package logger.

    The handler is only added the first time, while the logger level is unset.
    """
    log = logging.getLogger(LOGGER_NAME)
    if log.level == logging.NOTSET:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.setLevel(loglevel if loglevel is not None else get_config("JSONAPI_GRAPH_LOGLEVEL"))
        log.addHandler(handler)
    elif loglevel is not None:
        log.setLevel(loglevel)
    return log
