"""Name-keyed registry of strategy adapters."""

import logging
from typing import Dict, Iterator, List

from ....core.exceptions.auth import StrategyAlreadyRegisteredError, StrategyNotFoundError
from ..adapters.strategy_adapter import StrategyAdapter

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Holds the strategy adapters an application can authenticate with."""
    
    def __init__(self):
        self._adapters: Dict[str, StrategyAdapter] = {}
    
    def register(self, adapter: StrategyAdapter, replace: bool = False) -> StrategyAdapter:
        """Register an adapter under its name."""
        if adapter.name in self._adapters and not replace:
            raise StrategyAlreadyRegisteredError(
                f"Strategy '{adapter.name}' is already registered",
                details={"name": adapter.name},
            )
        
        self._adapters[adapter.name] = adapter
        logger.info(f"Registered authentication strategy: {adapter.name}")
        return adapter
    
    def unregister(self, name: str) -> StrategyAdapter:
        adapter = self.get(name)
        del self._adapters[name]
        logger.info(f"Unregistered authentication strategy: {name}")
        return adapter
    
    def get(self, name: str) -> StrategyAdapter:
        try:
            return self._adapters[name]
        except KeyError:
            raise StrategyNotFoundError(
                f"No authentication strategy registered as '{name}'",
                details={"name": name, "available": self.names()},
            ) from None
    
    def names(self) -> List[str]:
        return list(self._adapters)
    
    def __contains__(self, name: object) -> bool:
        return name in self._adapters
    
    def __len__(self) -> int:
        return len(self._adapters)
    
    def __iter__(self) -> Iterator[StrategyAdapter]:
        return iter(list(self._adapters.values()))


# Process-wide default registry
_default_registry = StrategyRegistry()


def get_strategy_registry() -> StrategyRegistry:
    """Get the default strategy registry."""
    return _default_registry
