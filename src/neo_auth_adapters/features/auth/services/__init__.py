"""Auth feature services."""

from .strategy_registry import StrategyRegistry, get_strategy_registry

__all__ = [
    "StrategyRegistry",
    "get_strategy_registry",
]
