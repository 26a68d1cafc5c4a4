"""
Hungry strategy - heads for the closest food.
"""

import logging
from typing import Iterable

from snakebrain.domain.board import Board
from snakebrain.domain.constants import Direction
from snakebrain.domain.geometry import direction_to
from snakebrain.domain.legality import closest_food
from snakebrain.domain.snake import Snake
from .base import Strategy, SnakeInfo

logger = logging.getLogger(__name__)


class HungryStrategy(Strategy):
    """
    Steps toward the nearest food when that step is safe.

    The step is direction_to(head, food), which is only exact for food one
    cell away; for anything further it is the default direction. When the
    step is unsafe, or there is no food at all, falls back to a random safe
    move.
    """

    name = "hungry"
    description = "Goes for the closest food when the step is safe"
    info = SnakeInfo(
        author="efrenfuentes",
        color="#5095c7",
        head="do-sammy",
        tail="present",
    )

    def choose(
        self, board: Board, snake: Snake, safe_moves: Iterable[Direction]
    ) -> Direction:
        safe_moves = set(safe_moves)
        target = closest_food(board, snake.head)
        if target is None:
            return self.random_move(safe_moves)

        direction = direction_to(snake.head, target)
        if direction in safe_moves:
            return direction

        logger.debug(f"Step {direction.value} toward food at {target} is unsafe")
        return self.random_move(safe_moves)
