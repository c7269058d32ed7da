"""Auth feature adapters.

Contains the adapter that runs callback-style strategies and its helpers.
"""

from .compatible_request import CompatibleRequest
from .strategy_adapter import StrategyAdapter
from .strategy_session import StrategySession

__all__ = [
    "CompatibleRequest",
    "StrategyAdapter",
    "StrategySession",
]
