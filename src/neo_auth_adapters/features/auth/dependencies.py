"""FastAPI authentication dependencies backed by strategy adapters."""

import logging
from typing import Any, Optional, Union

from fastapi import HTTPException, Request, status

from ...core.exceptions.auth import StrategyInternalError, StrategyUnauthorizedError
from .adapters.strategy_adapter import StrategyAdapter
from .services.strategy_registry import StrategyRegistry, get_strategy_registry

logger = logging.getLogger(__name__)


class StrategyAuthenticator:
    """Route dependency that authenticates the request with one strategy.
    
    The resulting profile is returned and also stored on
    ``request.state.user``.
    
    Example:
        github = StrategyAdapter(GitHubTokenStrategy(), "github")
        
        @router.get("/me")
        async def me(user = Depends(StrategyAuthenticator(github))):
            return user
    """
    
    def __init__(
        self,
        strategy: Union[StrategyAdapter, str],
        registry: Optional[StrategyRegistry] = None,
    ):
        self._strategy = strategy
        self._registry = registry
    
    @property
    def adapter(self) -> StrategyAdapter:
        if isinstance(self._strategy, StrategyAdapter):
            return self._strategy
        # Resolved per request so strategies registered after startup are found
        registry = self._registry or get_strategy_registry()
        return registry.get(self._strategy)
    
    async def __call__(self, request: Request) -> Any:
        adapter = self.adapter
        
        try:
            profile = await adapter.authenticate(request)
        except StrategyUnauthorizedError as e:
            headers = None
            # Header values are latin-1 on the wire, other challenges stay in detail only
            if isinstance(e.challenge, str) and e.challenge and e.challenge.isascii():
                headers = {"WWW-Authenticate": e.challenge}
            raise HTTPException(
                status_code=e.status,
                detail=e.message,
                headers=headers,
            ) from e
        except StrategyInternalError as e:
            logger.error(f"Authentication with '{adapter.name}' failed: {e.message}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal authentication error",
            ) from e
        
        request.state.user = profile
        return profile
