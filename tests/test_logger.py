# -*- coding: utf-8 -*-
"""
Tests for the application logger setup.
"""

import logging
from logging.handlers import RotatingFileHandler

from app.config import Config
from utils.logger import APP_LOGGER_NAME, setup_logger


class TestSetupLogger:
    """Test handler configuration."""

    def test_console_only_without_log_file(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_TO_FILE", False)

        logger = setup_logger()

        assert logger.name == APP_LOGGER_NAME
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.INFO

    def test_rotating_file_handler(self, monkeypatch, tmp_path):
        monkeypatch.setattr(Config, "LOG_TO_FILE", True)
        monkeypatch.setattr(Config, "LOGS_DIR", tmp_path / "logs")
        monkeypatch.setattr(Config, "LOG_PATH", tmp_path / "logs" / "crmforms.log")

        logger = setup_logger()
        try:
            file_handlers = [h for h in logger.handlers
                             if isinstance(h, RotatingFileHandler)]
            assert len(file_handlers) == 1
            assert file_handlers[0].maxBytes == Config.LOG_MAX_BYTES
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in logger.handlers:
                handler.close()
            monkeypatch.setattr(Config, "LOG_TO_FILE", False)
            setup_logger()

    def test_repeated_setup_does_not_duplicate_handlers(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_TO_FILE", False)

        setup_logger()
        logger = setup_logger()

        assert len(logger.handlers) == 1
