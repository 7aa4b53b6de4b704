"""
Strategy implementations for Monty Hall Simulator
"""

from .base import BaseStrategy, StrategyProtocol
from .registry import register_strategy, get_strategy, list_strategies, is_registered

# Import strategies to trigger registration
from .stay import StayStrategy
from .switch import SwitchStrategy

__all__ = [
    "BaseStrategy",
    "StrategyProtocol",
    "register_strategy",
    "get_strategy",
    "list_strategies",
    "is_registered",
    "StayStrategy",
    "SwitchStrategy",
]
