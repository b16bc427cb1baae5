"""Logging for minimalisp."""

from minimalisp.logger.logger import logger, setup_logger, resolve_level

__all__ = ["logger", "setup_logger", "resolve_level"]
