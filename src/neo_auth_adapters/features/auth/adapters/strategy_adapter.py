"""Adapter running callback-style authentication strategies.

Third-party strategies report their result through success/fail/error
callbacks. The adapter runs such a strategy for one request and turns the
first reported outcome into a return value or an exception:

    1. wraps the request so it offers the login/logout helpers
    2. creates a session and a per-call copy of the strategy
    3. invokes the strategy, awaiting it when it is a coroutine
    4. converts success into a user profile, fail and error into exceptions
"""

import asyncio
import inspect
import logging
from typing import Any, Generic, Optional, TypeVar

from ....config.settings import get_auth_settings
from ....core.exceptions.auth import (
    StrategyInternalError,
    StrategyTimeoutError,
    StrategyUnauthorizedError,
)
from ..entities.outcome import Fail, Outcome, Success
from ..entities.protocols import StrategyProtocol
from ..entities.user_profile import UserToUserProfileConverter, to_user_profile_identity
from .compatible_request import CompatibleRequest
from .strategy_session import StrategySession

logger = logging.getLogger(__name__)

U = TypeVar("U")


class StrategyAdapter(Generic[U]):
    """Uniform async ``authenticate`` over a callback-style strategy."""
    
    def __init__(
        self,
        strategy: StrategyProtocol,
        name: str,
        user_converter: UserToUserProfileConverter = to_user_profile_identity,
        *,
        session_user_key: Optional[str] = None,
        timeout: Optional[float] = None,
        normalize_exceptions: Optional[bool] = None,
    ):
        """
        Args:
            strategy: Shared strategy instance, never mutated by the adapter
            name: Lookup key for registries, not interpreted here
            user_converter: Maps the raw user passed to success() to a profile
            session_user_key: Session key used by request.login()
            timeout: Default seconds to wait for an outcome, None waits forever
            normalize_exceptions: Turn exceptions raised by the strategy into
                StrategyInternalError instead of letting them through
        """
        if not callable(getattr(strategy, "authenticate", None)):
            raise TypeError(f"Strategy {strategy!r} has no authenticate() method")
        
        settings = get_auth_settings()
        self._strategy = strategy
        self.name = name
        self.user_converter = user_converter
        self.session_user_key = session_user_key or settings.session_user_key
        self.timeout = timeout if timeout is not None else settings.strategy_timeout
        self.normalize_exceptions = (
            settings.normalize_strategy_exceptions
            if normalize_exceptions is None
            else normalize_exceptions
        )
    
    @property
    def strategy(self) -> StrategyProtocol:
        return self._strategy
    
    async def authenticate(
        self,
        request: Any,
        *,
        timeout: Optional[float] = None,
        **options: Any
    ) -> U:
        """Authenticate ``request`` with the wrapped strategy.
        
        Args:
            request: Framework request, wrapped but left untouched
            timeout: Overrides the adapter timeout for this call
            **options: Passed on to the strategy's authenticate()
            
        Returns:
            The converted user profile
            
        Raises:
            StrategyUnauthorizedError: The strategy called fail()
            StrategyInternalError: The strategy called error() or raised
            StrategyTimeoutError: No outcome within the timeout
        """
        timeout = timeout if timeout is not None else self.timeout
        
        if timeout is None:
            outcome = await self._run(request, options)
        else:
            try:
                outcome = await asyncio.wait_for(self._run(request, options), timeout)
            except asyncio.TimeoutError as e:
                logger.error(f"Strategy '{self.name}' timed out after {timeout}s")
                raise StrategyTimeoutError(self.name, timeout) from e
        
        return self._resolve(outcome)
    
    async def _run(self, request: Any, options: dict) -> Outcome:
        compat_request = CompatibleRequest.wrap(request, session_key=self.session_user_key)
        session = StrategySession(self._strategy)
        strategy = session.derive()
        
        logger.debug(f"Invoking strategy '{self.name}'")
        
        try:
            result = strategy.authenticate(compat_request, **options)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            if session.settled:
                logger.warning(
                    f"Strategy '{self.name}' raised after reporting an outcome: {e}"
                )
            elif self.normalize_exceptions:
                logger.error(f"Strategy '{self.name}' raised: {e}", exc_info=True)
                raise StrategyInternalError(e) from e
            else:
                raise
        
        return await session.wait()
    
    def _resolve(self, outcome: Outcome) -> U:
        if isinstance(outcome, Success):
            logger.debug(f"Strategy '{self.name}' authenticated the request")
            return self.user_converter(outcome.user)
        
        if isinstance(outcome, Fail):
            logger.warning(f"Strategy '{self.name}' rejected the request: {outcome.challenge}")
            raise StrategyUnauthorizedError(outcome.challenge, outcome.status)
        
        logger.error(f"Strategy '{self.name}' reported an error: {outcome.error}")
        if isinstance(outcome.error, BaseException):
            raise StrategyInternalError(outcome.error) from outcome.error
        raise StrategyInternalError(outcome.error)
    
    def __repr__(self) -> str:
        return f"StrategyAdapter(name={self.name!r}, strategy={type(self._strategy).__name__})"
