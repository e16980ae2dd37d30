"""Logging setup driven by :class:`config.settings.LoggingSettings`."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .settings import LoggingSettings, settings

ROOT_LOGGER_NAME = "form_assistant"


def configure_logging(logging_settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """Attach console and (optionally) rotating file handlers to the package logger.

    Calling this more than once replaces the handlers installed by the previous
    call, so tests and long-running hosts can reconfigure freely.
    """
    cfg = logging_settings or settings.logging
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(cfg.log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(cfg.log_format)

    if cfg.console_logging:
        console = logging.StreamHandler()
        console.setLevel(cfg.console_log_level)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if cfg.log_file:
        cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_log_size_mb * 1024 * 1024,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(cfg.log_file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
