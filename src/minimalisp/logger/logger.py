"""Global logger configuration for the minimalisp package."""

import logging
import sys

from minimalisp.core.config import settings

__all__ = ["logger", "setup_logger", "resolve_level"]


def resolve_level(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Raises:
        ValueError: If ``level`` is not a registered level name.
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return value


def setup_logger(
    name: str = "minimalisp",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    The stdout handler is attached at most once per logger name; handlers
    added by others (e.g. test log capture) are left alone and do not count.

    Args:
        name: Logger name (defaults to the package logger)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL), falls back
            to ``settings.LOG_LEVEL``
        format_string: Custom format string, falls back to ``settings.LOG_FORMAT``

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    numeric_level = resolve_level(level or settings.LOG_LEVEL)
    format_string = format_string or settings.LOG_FORMAT
    handler_name = f"{name}.stdout"

    logger = logging.getLogger(name)

    if not any(h.get_name() == handler_name for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(handler_name)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return logger


# Create default logger instance for the package
logger = setup_logger()
