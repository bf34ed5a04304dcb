"""
Logging Package
Structured logging for the renderer

Thin layer over the standard logging module: every logger handed out
lives under the package namespace so a single LoggerConfig.setup_logger()
call configures all of them.
"""
from sanic_render.logging.logger_config import (
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

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module names inside the package (``sanic_render.view.compiler``) are
    used as-is. Bare names without a dot are nested under the package
    logger so they share its handlers.

    Example:
        from sanic_render.logging import getLogger
        logger = getLogger(__name__)
        logger.warning("Template missing", extra={'template': 'layout'})
    """
    from sanic_render.defaults import DEFAULT_LOGGER_NAME

    if name is None:
        return logging.getLogger(DEFAULT_LOGGER_NAME)

    if '.' not in name and name != DEFAULT_LOGGER_NAME:
        name = f'{DEFAULT_LOGGER_NAME}.{name}'

    return logging.getLogger(name)
