"""
Logging helpers.

``get_logger`` hands out loggers for library modules and for scripts that use
the library; ``log_execution_time`` times report builders and other
potentially slow calls.
"""

import logging
import sys
import time
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from ctam.core.config.settings import get_settings
from ctam.core.constants import LOG_DATE_FORMAT, LOG_FORMAT, PACKAGE_LOGGER, LogLevel

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for ``name``.

    Loggers under the ``ctam`` package are returned untouched and propagate
    to the package logger, so the host application decides where records
    go. A logger outside the package gets its own stdout handler, at the
    ``LOG_LEVEL`` from the library settings, the first time it is requested.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        The logger
    """
    logger = logging.getLogger(name)
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logger

    if not logger.handlers:
        level = LogLevel.coerce(get_settings().LOG_LEVEL)
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def log_execution_time(
    func: F | None = None,
    *,
    logger: logging.Logger | None = None,
    level: LogLevel | str | int = LogLevel.DEBUG,
):
    """
    Log how long the decorated callable takes.

    Usable bare (``@log_execution_time``) or with options
    (``@log_execution_time(logger=log, level=LogLevel.INFO)``). Exceptions are
    logged with their elapsed time and re-raised.

    Args:
        func: The callable, when used bare
        logger: Logger to write to, defaults to the callable's module logger
        level: Level of the timing record

    Returns:
        The wrapped callable, or a decorator when called with options
    """

    def decorate(fn: F) -> F:
        log = logger or get_logger(fn.__module__)
        numeric_level = LogLevel.coerce(level)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = fn(*args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                log.exception(f"Exception in '{fn.__qualname__}' after {elapsed_ms:.2f} ms: {e!s}")
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000
            log.log(numeric_level, f"'{fn.__qualname__}' completed in {elapsed_ms:.2f} ms")
            return result

        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorate(func)
    return decorate
