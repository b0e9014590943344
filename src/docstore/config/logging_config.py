"""Logging setup for the ``docstore`` package."""
from __future__ import annotations

import logging

from docstore.config.settings import Settings

PACKAGE_LOGGER_NAME = "docstore"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger.

    A stream handler is attached the first time only; the root logger is
    left untouched.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.log_level_number)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger
