"""
Logging configuration for protochain.

protochain is a library, so its loggers carry a ``NullHandler`` by
default and stay silent until the application opts in.

Example usage:
    >>> import protochain
    >>> protochain.setup_logging(level="DEBUG")
    >>> protochain.setup_logging(level="INFO", filename="protochain.log", stream=False)
"""

import logging
import sys
from typing import Any, Literal

PROTOCHAIN_LOGGER_NAME = "protochain"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    format: str | None = None,
    date_format: str | None = None,
    filename: str | None = None,
    stream: Any = None,
    force: bool = False,
    propagate: bool = False,
) -> None:
    """
    Configure logging for every protochain module.

    Args:
        level: Log level name. Default is INFO.
        format: Custom log format string. If None, uses the default format.
        date_format: Custom date format string. If None, uses the default.
        filename: If provided, also log to this file.
        stream: Stream to log to. Default is sys.stderr; pass False to skip
            stream output entirely.
        force: If True, remove existing handlers before adding new ones.
        propagate: If True, let records reach the application's loggers.
    """
    logger = logging.getLogger(PROTOCHAIN_LOGGER_NAME)

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    # A lone NullHandler only hides the fact that records propagate.
    if propagate and not force:
        if len(logger.handlers) == 1 and isinstance(
            logger.handlers[0], logging.NullHandler
        ):
            force = True

    if force:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

    logger.propagate = propagate

    if propagate and not filename and stream is None:
        return

    formatter = logging.Formatter(
        format or DEFAULT_FORMAT, datefmt=date_format or DEFAULT_DATE_FORMAT
    )

    if stream is not False:
        if stream is None:
            stream = sys.stderr
        stream_handler = logging.StreamHandler(stream)
        stream_handler.setLevel(log_level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def disable_logging() -> None:
    """Silence all protochain logging."""
    logger = logging.getLogger(PROTOCHAIN_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the ``protochain`` hierarchy."""
    if name != PROTOCHAIN_LOGGER_NAME and not name.startswith(
        PROTOCHAIN_LOGGER_NAME + "."
    ):
        name = f"{PROTOCHAIN_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


_root_logger = logging.getLogger(PROTOCHAIN_LOGGER_NAME)
if not _root_logger.handlers:
    _root_logger.addHandler(logging.NullHandler())
    _root_logger.propagate = False


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_FORMAT",
    "PROTOCHAIN_LOGGER_NAME",
    "disable_logging",
    "get_logger",
    "setup_logging",
]
