"""
Random strategy - picks any safe move.
"""

from typing import Iterable

from snakebrain.domain.board import Board
from snakebrain.domain.constants import Direction
from snakebrain.domain.snake import Snake
from .base import Strategy, SnakeInfo


class RandomStrategy(Strategy):
    """
    Moves uniformly at random among the safe directions.
    """

    name = "random"
    description = "Random safe move every turn"
    info = SnakeInfo(
        author="efrenfuentes",
        color="#5095c7",
        head="do-sammy",
        tail="present",
    )

    def choose(
        self, board: Board, snake: Snake, safe_moves: Iterable[Direction]
    ) -> Direction:
        return self.random_move(safe_moves)
