# Logging for the keyedlist package. On import the package logger only gets a
# NullHandler: records are shown once the host configures logging, or after
# an explicit call to `setup_logger`.

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "resolve_level"]


def resolve_level(level=None) -> int:
    """Returns the numeric log level for a level name. Without a name, the
    `KEYEDLIST_LOG_LEVEL` environment variable is used. Unknown names give
    WARNING."""
    level = level or os.getenv("KEYEDLIST_LOG_LEVEL", "WARNING")
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        return logging.WARNING
    return value


def setup_logger(name="keyedlist", level=None, format_string=None):
    """Attaches a stderr stream handler to the named logger and sets its
    level. Calling it again does not add a second handler.

    Args:
        name (str): logger name.
        level (str or int): log level. Defaults to `KEYEDLIST_LOG_LEVEL`, or
            WARNING.
        format_string (str): custom format for the records.

    Returns:
        logging.Logger: the configured logger.
    """
    log = logging.getLogger(name)
    log.setLevel(resolve_level(level))

    configured = [
        h for h in log.handlers if type(h) is logging.StreamHandler
    ]
    if not configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or "%(asctime)s %(name)s [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        log.addHandler(handler)
        # records already printed here, do not repeat them in the root logger
        log.propagate = False
    return log


logger = logging.getLogger("keyedlist")
logger.addHandler(logging.NullHandler())
logger.setLevel(resolve_level())
