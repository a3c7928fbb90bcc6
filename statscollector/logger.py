import logging
import os

LOG_LEVEL_ENV = "STATSCOLLECTOR_LOG_LEVEL"

try:
    _levels_by_name = logging.getLevelNamesMapping()
except AttributeError:
    # python 3.8 to 3.10
    _levels_by_name = {name: num for num, name in logging._levelToName.items()}
_levels_by_name.update({"TRACE": 5, "WARN": logging.WARNING, "OFF": 100})


def resolve_level(str_level):
    """Map a level name from the environment onto a logging level, or None."""
    return _levels_by_name.get((str_level or "INFO").upper())


def initialize_logging(name):
    """Set the level of the package logger from STATSCOLLECTOR_LOG_LEVEL.

    Handlers are left to the application; only a NullHandler is attached so
    that an unconfigured process stays quiet.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    str_level = os.environ.get(LOG_LEVEL_ENV)
    level = resolve_level(str_level)
    if level is None:
        logger.setLevel(logging.INFO)
        logger.warning("Invalid log level: %s Defaulting to INFO", str_level.upper())
    else:
        logger.setLevel(level)
    return logger
