"""Protocol interfaces for strategy adapters."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class StrategyProtocol(Protocol):
    """Protocol for callback-style authentication strategies.
    
    ``authenticate`` inspects the request and reports exactly one outcome by
    calling ``success``, ``fail`` or ``error`` on itself. It may be a plain
    method or a coroutine function.
    """
    
    def authenticate(self, request: Any, **options: Any) -> Any:
        """Inspect the request and report an outcome."""
        ...
    
    def success(self, user: Any, info: Any = None) -> None:
        """Report an authenticated user."""
        ...
    
    def fail(self, challenge: Any = None, status: Optional[int] = None) -> None:
        """Report a rejected request."""
        ...
    
    def error(self, err: Any) -> None:
        """Report an internal error."""
        ...


@runtime_checkable
class CompatibleRequestProtocol(Protocol):
    """Protocol for the request helpers strategies may rely on."""
    
    user: Any
    
    def login(self, user: Any, session: bool = True) -> None:
        ...
    
    def logout(self) -> None:
        ...
    
    def is_authenticated(self) -> bool:
        ...
    
    def is_unauthenticated(self) -> bool:
        ...
