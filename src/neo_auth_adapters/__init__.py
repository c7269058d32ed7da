"""Neo-Auth-Adapters - authentication strategy and logging adapters for FastAPI.

This library lets callback-style authentication strategies run inside async
FastAPI request handling and provides access and invocation logging for the
NeoMultiTenant services.
"""

from .__version__ import __version__

from .config import (
    LoggingSettings,
    AuthAdapterSettings,
    setup_logging,
    get_logger,
)

from .core.exceptions import (
    # Base Exception
    NeoAuthAdaptersError,
    
    # Common Exceptions
    AuthenticationError,
    StrategyUnauthorizedError,
    StrategyInternalError,
    StrategyTimeoutError,
    StrategyNotFoundError,
    
    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .features.auth import (
    Strategy,
    StrategyAdapter,
    StrategyAuthenticator,
    StrategyRegistry,
    CompatibleRequest,
    UserProfile,
    get_strategy_registry,
)

from .infrastructure.middleware import (
    AccessLogMiddleware,
    configure_logging_middleware,
    log,
)

__all__ = [
    "__version__",
    
    # Configuration
    "LoggingSettings",
    "AuthAdapterSettings",
    "setup_logging",
    "get_logger",
    
    # Exceptions
    "NeoAuthAdaptersError",
    "AuthenticationError",
    "StrategyUnauthorizedError",
    "StrategyInternalError",
    "StrategyTimeoutError",
    "StrategyNotFoundError",
    "get_http_status_code",
    "create_error_response",
    
    # Auth
    "Strategy",
    "StrategyAdapter",
    "StrategyAuthenticator",
    "StrategyRegistry",
    "CompatibleRequest",
    "UserProfile",
    "get_strategy_registry",
    
    # Logging middleware
    "AccessLogMiddleware",
    "configure_logging_middleware",
    "log",
]
