"""
Move strategies for SnakeBrain.

This module contains the strategy abstraction and the three implementations
that turn a set of safe directions into the move we play.
"""

from .base import Strategy, SnakeInfo
from .random_strategy import RandomStrategy
from .opportunist import OpportunistStrategy
from .hungry import HungryStrategy
from .registry import (
    resolve, get_info, list_strategies, STRATEGIES, AVAILABLE_STRATEGIES, DEFAULT_STRATEGY,
)

__all__ = [
    'Strategy',
    'SnakeInfo',
    'RandomStrategy',
    'OpportunistStrategy',
    'HungryStrategy',
    'resolve',
    'get_info',
    'list_strategies',
    'STRATEGIES',
    'AVAILABLE_STRATEGIES',
    'DEFAULT_STRATEGY',
]
