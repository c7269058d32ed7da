"""Configuration module for neo-auth-adapters."""

from .settings import (
    LoggingSettings,
    AuthAdapterSettings,
    get_logging_settings,
    get_auth_settings,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Settings
    "LoggingSettings",
    "AuthAdapterSettings",
    "get_logging_settings",
    "get_auth_settings",
    
    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
