"""
Logging constants.

Level names, the package logger name and the record formats shared by
``ctam.core.logging_config`` and ``ctam.core.utils.logging``.
"""

import logging
from enum import Enum

PACKAGE_LOGGER = "ctam"
LOG_FILE_NAME = "ctam.log"

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
DETAILED_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    """Log levels accepted by the library's logging helpers."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"

    def __str__(self) -> str:
        return self.value

    @property
    def numeric(self) -> int:
        """The matching ``logging`` module level."""
        return logging.getLevelName(self.value)

    @classmethod
    def coerce(cls, level: "LogLevel | str | int") -> int:
        """Numeric level for an enum member, a level name or a number; DEBUG if unknown."""
        if isinstance(level, cls):
            return level.numeric
        if isinstance(level, str):
            try:
                return cls(level.upper()).numeric
            except ValueError:
                return logging.DEBUG
        return int(level)
