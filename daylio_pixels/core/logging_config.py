"""
Logging helpers.

All modules log through the ``daylio_pixels`` logger via the ``log_*``
functions below. Keyword arguments are rendered as ``key=value`` context after
the message so log lines stay greppable.
"""
import logging
from typing import Any, Optional, Union

LOGGER_NAME = "daylio_pixels"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def _format(message: str, context: dict[str, Any]) -> str:
    if not context:
        return message
    rendered = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} | {rendered}"


def log_debug(message: str, **context: Any) -> None:
    get_logger().debug(_format(message, context))


def log_info(message: str, **context: Any) -> None:
    get_logger().info(_format(message, context))


def log_warning(message: str, **context: Any) -> None:
    get_logger().warning(_format(message, context))


def log_error(error: Union[str, BaseException], **context: Any) -> None:
    """
    Log an error message or exception.

    Exceptions are logged with their type name; the traceback is attached only
    at debug level so normal CLI output stays short.
    """
    logger = get_logger()
    if isinstance(error, BaseException):
        message = f"{type(error).__name__}: {error}"
        logger.error(_format(message, context), exc_info=logger.isEnabledFor(logging.DEBUG))
    else:
        logger.error(_format(error, context))
