"""Per-call strategy session.

A session is created for every authenticate call. It owns the one-shot future
that receives the outcome and hands out a shallow copy of the shared strategy
whose success/fail/error slots point back at the session, so concurrent calls
never see each other's handlers.
"""

import asyncio
import copy
import logging
import threading
from typing import Any, Optional

from ..entities.outcome import Error, Fail, Outcome, Success

logger = logging.getLogger(__name__)


class StrategySession:
    """Outcome handlers and result of one strategy invocation."""
    
    def __init__(self, strategy: Any, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.strategy = strategy
        self._loop = loop or asyncio.get_running_loop()
        self._future: asyncio.Future = self._loop.create_future()
        self._outcome: Optional[Outcome] = None
        self._lock = threading.Lock()
    
    @property
    def settled(self) -> bool:
        return self._outcome is not None
    
    def derive(self) -> Any:
        """Return a per-call copy of the strategy bound to this session."""
        derived = copy.copy(self.strategy)
        derived.success = self.success
        derived.fail = self.fail
        derived.error = self.error
        return derived
    
    def success(self, user: Any, info: Any = None) -> None:
        self._settle(Success(user=user, info=info))
    
    def fail(self, challenge: Any = None, status: Optional[int] = None) -> None:
        self._settle(Fail(challenge=challenge, status=status))
    
    def error(self, err: Any) -> None:
        self._settle(Error(error=err))
    
    async def wait(self) -> Outcome:
        """Wait for the first outcome reported by the strategy."""
        return await self._future
    
    def _settle(self, outcome: Outcome) -> None:
        # Claim the outcome here so ``settled`` holds for every thread at once
        with self._lock:
            if self._outcome is not None:
                logger.debug(f"Ignoring {type(outcome).__name__} outcome, session already settled")
                return
            self._outcome = outcome
        
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        
        if running is self._loop:
            self._set_outcome(outcome)
        else:
            # Strategy reported from another thread
            self._loop.call_soon_threadsafe(self._set_outcome, outcome)
    
    def _set_outcome(self, outcome: Outcome) -> None:
        # Cancelled by a timeout before the outcome arrived
        if self._future.done():
            return
        self._future.set_result(outcome)
