"""Constants shared by the library core."""

from ctam.core.constants.logging import (
    DETAILED_LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_FILE_NAME,
    LOG_FORMAT,
    PACKAGE_LOGGER,
    LogLevel,
)

__all__ = [
    "DETAILED_LOG_FORMAT",
    "LOG_DATE_FORMAT",
    "LOG_FILE_NAME",
    "LOG_FORMAT",
    "PACKAGE_LOGGER",
    "LogLevel",
]
