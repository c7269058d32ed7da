"""Base class for authentication strategies."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ....core.exceptions import StrategyNotBoundError


class Strategy(ABC):
    """Convenience base for strategy authors.
    
    Subclasses implement ``authenticate`` and call ``self.success``,
    ``self.fail`` or ``self.error``. Those slots are replaced on the per-call
    copy a StrategySession derives; on the shared instance they raise so an
    outcome is never dropped silently.
    """
    
    name: Optional[str] = None
    
    @abstractmethod
    def authenticate(self, request: Any, **options: Any) -> Any:
        """Inspect the request and report an outcome."""
        pass
    
    def success(self, user: Any, info: Any = None) -> None:
        raise StrategyNotBoundError(
            f"{type(self).__name__}.success() called outside of a strategy session"
        )
    
    def fail(self, challenge: Any = None, status: Optional[int] = None) -> None:
        raise StrategyNotBoundError(
            f"{type(self).__name__}.fail() called outside of a strategy session"
        )
    
    def error(self, err: Any) -> None:
        raise StrategyNotBoundError(
            f"{type(self).__name__}.error() called outside of a strategy session"
        )
