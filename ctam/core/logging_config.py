"""
Logging configuration.

dictConfig for the ``ctam`` package logger, driven by ``LOG_LEVEL``,
``LOG_TO_FILE`` and ``LOG_DIR`` in the library settings. Host applications
that configure logging themselves can ignore this module; scripts and
notebooks call ``setup_logging()`` once at start-up.
"""

import copy
import logging
import logging.config
from pathlib import Path
from typing import Any

from ctam.core.config.settings import Settings, get_settings
from ctam.core.constants import (
    DETAILED_LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_FILE_NAME,
    LOG_FORMAT,
    PACKAGE_LOGGER,
)

DEFAULT_LOG_LEVEL = "INFO"

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        "detailed": {"format": DETAILED_LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": DEFAULT_LOG_LEVEL,
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        PACKAGE_LOGGER: {
            "level": DEFAULT_LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def build_logging_config(
    level: str = DEFAULT_LOG_LEVEL, log_dir: str | None = None
) -> dict[str, Any]:
    """
    Build a dictConfig for the package logger.

    Args:
        level: Level name for the console handler and the package logger
        log_dir: Directory for a rotating ``ctam.log``; no file output when None

    Returns:
        A fresh configuration dictionary
    """
    config = copy.deepcopy(LOGGING_CONFIG_BASE)
    config["handlers"]["console"]["level"] = level
    config["loggers"][PACKAGE_LOGGER]["level"] = level

    if log_dir:
        config["handlers"]["file_handler"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "detailed",
            "filename": str(Path(log_dir) / LOG_FILE_NAME),
            "maxBytes": 10 * 1024 * 1024,
            "backupCount": 10,
            "encoding": "utf8",
        }
        config["loggers"][PACKAGE_LOGGER]["handlers"].append("file_handler")

    return config


def logging_config_from_settings(settings: Settings | None = None) -> dict[str, Any]:
    """dictConfig for ``settings`` (default: the library settings)."""
    settings = settings or get_settings()
    log_dir = settings.LOG_DIR if settings.LOG_TO_FILE else None
    return build_logging_config(settings.LOG_LEVEL, log_dir)


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """
    Apply ``config``, or the configuration derived from the library settings.

    Creates the log directory first when the configuration writes to a file.
    """
    config = config or logging_config_from_settings()

    file_handler = config.get("handlers", {}).get("file_handler")
    if file_handler:
        Path(file_handler["filename"]).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured")
