"""Logging middleware setup for FastAPI applications."""

import logging
from typing import Optional

from fastapi import FastAPI

from ...config.settings import LoggingSettings, get_logging_settings
from .access_log_middleware import AccessLogMiddleware

logger = logging.getLogger(__name__)


def configure_logging_middleware(
    app: FastAPI,
    settings: Optional[LoggingSettings] = None
) -> FastAPI:
    """Add the access log middleware according to logging settings."""
    settings = settings or get_logging_settings()
    
    if not settings.enable_access_log:
        logger.debug("Access log disabled, skipping AccessLogMiddleware")
        return app
    
    app.add_middleware(
        AccessLogMiddleware,
        format=settings.access_log_format,
        exempt_paths=settings.access_log_exempt_paths,
    )
    logger.info(f"Access log enabled with format '{settings.access_log_format}'")
    return app
