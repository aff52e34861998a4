# -*- coding: utf-8 -*-
"""
Logging for the CRM form wizards.

Every module logs through a child of the ``crmforms`` logger, so
``get_logger("controllers.form_controller")`` writes as
``crmforms.controllers.form_controller``. Validation traces (superseded
and discarded results, blocked navigation) go out at DEBUG and only reach
the rotating log file; the console shows INFO and above.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

APP_LOGGER_NAME = "crmforms"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_app_logger: Optional[logging.Logger] = None


def _file_handler(config) -> logging.Handler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger() -> logging.Logger:
    """
    Configure the application logger.

    Safe to call again (tests, relaunching a wizard): previous handlers are
    dropped before new ones are attached. The file handler is skipped when
    ``LOG_TO_FILE`` is off.
    """
    global _app_logger

    # Deferred: importing utils must not load .env
    from app.config import Config

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)
    app_logger.handlers.clear()

    if Config.LOG_TO_FILE:
        app_logger.addHandler(_file_handler(Config))
    app_logger.addHandler(_console_handler())

    _app_logger = app_logger
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``crmforms.<name>`` logger, configuring logging on first use."""
    if _app_logger is None:
        return setup_logger().getChild(name)
    return _app_logger.getChild(name)
