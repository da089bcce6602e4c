"""Logging utilities for the configuration panel."""

from __future__ import annotations

import logging
import sys

from . import config

LOGGER_NAME = "config_panel"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)

_HANDLER_ATTR = "_config_panel_handler"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Streamlit re-executes the page script on every interaction, so this is
    safe to call repeatedly: the handler is installed once and only the level
    is updated afterwards.
    """
    resolved = level if level is not None else config.LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)

    logger.setLevel(resolved)
    return logger
