"""Infrastructure-level logging middleware for FastAPI applications.

Provides HTTP access logging and method invocation logging.
"""

from .access_log_middleware import (
    ACCESS_LOG_FORMATS,
    AccessLogMiddleware,
    AccessLogRecord,
    format_access_log,
)
from .logging_interceptor import LoggingInterceptor, log
from .factory import configure_logging_middleware

__all__ = [
    # Middleware classes
    "AccessLogMiddleware",
    "AccessLogRecord",
    "ACCESS_LOG_FORMATS",
    "format_access_log",
    
    # Invocation logging
    "LoggingInterceptor",
    "log",
    
    # Setup
    "configure_logging_middleware",
]
