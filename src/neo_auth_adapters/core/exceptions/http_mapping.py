"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import ConfigurationError, NeoAuthAdaptersError
from .auth import (
    AuthenticationError,
    StrategyAlreadyRegisteredError,
    StrategyError,
    StrategyNotFoundError,
    StrategyRegistryError,
    StrategyUnauthorizedError,
)


# Static HTTP Status Code mapping for exceptions
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 401 Unauthorized
    AuthenticationError: 401,
    StrategyUnauthorizedError: 401,
    
    # 404 Not Found
    StrategyNotFoundError: 404,
    
    # 409 Conflict
    StrategyAlreadyRegisteredError: 409,
    
    # 500 Internal Server Error
    StrategyError: 500,
    StrategyRegistryError: 500,
    ConfigurationError: 500,
    NeoAuthAdaptersError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.
    
    Unauthorized errors carry their own status, which takes precedence.
    Otherwise the most specific class in the MRO found in the map wins.
    """
    if isinstance(exception, StrategyUnauthorizedError):
        return exception.status
    
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    
    return 500
