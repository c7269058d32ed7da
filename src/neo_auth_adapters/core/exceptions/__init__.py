"""Exceptions module for neo-auth-adapters.

This module provides the complete exception hierarchy for neo-auth-adapters.
"""

from .base import (
    NeoAuthAdaptersError,
    ConfigurationError,
    get_http_status_code,
    create_error_response,
)

from .auth import (
    AuthenticationError,
    StrategyUnauthorizedError,
    StrategyError,
    StrategyInternalError,
    StrategyTimeoutError,
    StrategyNotBoundError,
    StrategyRegistryError,
    StrategyNotFoundError,
    StrategyAlreadyRegisteredError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "NeoAuthAdaptersError",
    "ConfigurationError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
    
    # Authentication
    "AuthenticationError",
    "StrategyUnauthorizedError",
    
    # Strategy failures
    "StrategyError",
    "StrategyInternalError",
    "StrategyTimeoutError",
    "StrategyNotBoundError",
    
    # Registry
    "StrategyRegistryError",
    "StrategyNotFoundError",
    "StrategyAlreadyRegisteredError",
]
