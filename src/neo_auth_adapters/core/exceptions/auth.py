"""Authentication-specific exceptions for neo-auth-adapters."""

from typing import Any, Optional

from .base import NeoAuthAdaptersError


class AuthenticationError(NeoAuthAdaptersError):
    """Base exception for authentication errors."""
    pass


class StrategyUnauthorizedError(AuthenticationError):
    """Raised when a strategy declares the request unauthenticated.
    
    The challenge is meant for the caller, e.g. as a WWW-Authenticate value
    or as the message asking the user to retry.
    """
    
    def __init__(self, challenge: Any = None, status: Optional[int] = None):
        self.challenge = challenge
        self.status = status or 401
        message = challenge if isinstance(challenge, str) and challenge else "Unauthorized"
        super().__init__(
            message,
            error_code="UNAUTHORIZED",
            details={"challenge": challenge, "status": self.status},
        )


class StrategyError(NeoAuthAdaptersError):
    """Base exception for strategy-side failures."""
    pass


class StrategyInternalError(StrategyError):
    """Raised when a strategy reports an internal error.
    
    The wrapped error is diagnostic text and must not be shown to end users.
    """
    
    def __init__(self, error: Any = None, message: Optional[str] = None):
        self.error = error
        super().__init__(
            message or (str(error) if error is not None else "Internal strategy error"),
            error_code="INTERNAL_STRATEGY_ERROR",
            details={"error": error if isinstance(error, str) else repr(error)},
        )


class StrategyTimeoutError(StrategyInternalError):
    """Raised when a strategy does not settle within the allowed time."""
    
    def __init__(self, strategy_name: str, timeout: float):
        self.strategy_name = strategy_name
        self.timeout = timeout
        super().__init__(
            error=f"strategy {strategy_name!r} did not settle within {timeout}s",
        )
        self.error_code = "STRATEGY_TIMEOUT"


class StrategyNotBoundError(StrategyError):
    """Raised when an outcome slot is called on a strategy with no session."""
    pass


class StrategyRegistryError(NeoAuthAdaptersError):
    """Base exception for strategy registry errors."""
    pass


class StrategyNotFoundError(StrategyRegistryError):
    """Raised when no strategy is registered under a name."""
    pass


class StrategyAlreadyRegisteredError(StrategyRegistryError):
    """Raised when a strategy name is already taken."""
    pass
