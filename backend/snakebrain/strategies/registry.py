"""
Registry for move strategies.

Maps strategy keys ('random', 'opportunist', 'hungry') to the stateless
instance that plays them. The table is built once at import time and never
changes afterwards, so it is safe to read from concurrent requests.
"""

import logging
from typing import Dict, List, Optional

from .base import Strategy, SnakeInfo
from .hungry import HungryStrategy
from .opportunist import OpportunistStrategy
from .random_strategy import RandomStrategy

logger = logging.getLogger(__name__)


STRATEGIES: Dict[str, Strategy] = {
    RandomStrategy.name: RandomStrategy(),
    OpportunistStrategy.name: OpportunistStrategy(),
    HungryStrategy.name: HungryStrategy(),
}

DEFAULT_STRATEGY = OpportunistStrategy.name

# Canonical list of available strategy keys (for API exposure)
AVAILABLE_STRATEGIES = list(STRATEGIES.keys())


def resolve(name: Optional[str] = None) -> Strategy:
    """
    Get the strategy registered under `name`.

    Args:
        name: Strategy key, case-insensitive. None, empty or unknown names
            resolve to the default strategy.

    Returns:
        The shared Strategy instance.
    """
    key = (name or "").strip().lower()
    if not key:
        return STRATEGIES[DEFAULT_STRATEGY]

    if key not in STRATEGIES:
        available = ", ".join(AVAILABLE_STRATEGIES)
        logger.warning(
            f"Unknown strategy '{name}', using '{DEFAULT_STRATEGY}'. "
            f"Available strategies: {available}"
        )
        return STRATEGIES[DEFAULT_STRATEGY]

    return STRATEGIES[key]


def get_info(name: Optional[str] = None) -> SnakeInfo:
    """Identity metadata for the strategy `name` resolves to."""
    return resolve(name).info


def list_strategies() -> List[Dict[str, str]]:
    """
    Return metadata about all available strategies.

    Returns:
        List of dicts with 'key' and 'description' for each strategy.
    """
    return [
        {"key": key, "description": strategy.description}
        for key, strategy in STRATEGIES.items()
    ]
