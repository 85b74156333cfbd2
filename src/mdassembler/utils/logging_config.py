"""Logging setup shared by the library and the command-line front end."""

from __future__ import annotations

import logging
import sys

from mdassembler.config import MDASSEMBLER_LOG_LEVEL

_ROOT_LOGGER_NAME = "mdassembler"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_installed_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``mdassembler`` namespace."""
    if name != _ROOT_LOGGER_NAME and not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stderr handler to the package logger.

    Library code never calls this; only the CLI does. Calling it twice
    replaces the previous handler instead of stacking a second one.
    """
    global _installed_handler

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else MDASSEMBLER_LOG_LEVEL)
    _installed_handler = handler
