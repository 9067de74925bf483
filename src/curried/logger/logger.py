"""Logging for the curried package.

One stdout handler lives on the ``curried`` package logger. Loggers named
``curried.<something>`` get no handler of their own and propagate to it, so
every module writes through the same stream and format. Levels default to
``settings.LOG_LEVEL``, which already folds in the config file and the
``LOG_LEVEL`` environment variable.
"""

import logging
import sys

from curried.core.config import settings

__all__ = ["logger", "setup_logger", "PACKAGE_LOGGER"]

PACKAGE_LOGGER = "curried"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured: set[str] = set()


def _is_package_child(name: str) -> bool:
    return name.startswith(PACKAGE_LOGGER + ".")


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    A logger is configured on its first request only; later calls return it
    unchanged.

    Args:
        name: Logger name. Children of ``curried`` share the package handler.
        level: Log level name. Defaults to ``settings.LOG_LEVEL``.
        format_string: Format for a handler created by this call. Ignored for
            package children, which use the package handler.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if name in _configured:
        return logger

    if _is_package_child(name):
        setup_logger(PACKAGE_LOGGER)
        logger.propagate = True
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
        )
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel((level or settings.LOG_LEVEL).upper())
    _configured.add(name)
    return logger


logger = setup_logger()
