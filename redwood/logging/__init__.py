"""
Logging Package
Console and file logging for the view engine and CLI

Provides a drop-in replacement for logging.getLogger that keeps
every Redwood logger under the 'redwood' hierarchy.
"""
from redwood.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

# Export logging levels for convenience
INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL

ROOT_LOGGER_NAME = 'redwood'


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module-based names (containing '.') are used as-is, so
    'redwood.view.engine' inherits the handlers that
    LoggerConfig.setup_logger attached to 'redwood'. Any other name,
    or None, resolves to the 'redwood' logger itself.

    Example:
        from redwood.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("Resolved page", extra={'view': 'home'})
    """
    if name is None or '.' not in name:
        name = ROOT_LOGGER_NAME

    return logging.getLogger(name)
