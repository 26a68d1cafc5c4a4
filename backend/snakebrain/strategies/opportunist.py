"""
Opportunist strategy - moves randomly, but eats food when it is one step away.
"""

from typing import Iterable

from snakebrain.domain.board import Board
from snakebrain.domain.constants import Direction
from snakebrain.domain.legality import directions_with_food
from snakebrain.domain.snake import Snake
from .base import Strategy, SnakeInfo


class OpportunistStrategy(Strategy):
    """
    Takes a safe move onto food when one exists, otherwise any safe move.
    """

    name = "opportunist"
    description = "Random safe move, but grabs adjacent food"
    info = SnakeInfo(
        author="efrenfuentes",
        color="#c47ee0",
        head="silly",
        tail="mlh-gene",
    )

    def choose(
        self, board: Board, snake: Snake, safe_moves: Iterable[Direction]
    ) -> Direction:
        safe_moves = set(safe_moves)
        moves_with_food = directions_with_food(board, snake, safe_moves)

        if moves_with_food:
            return self.random_move(moves_with_food)
        return self.random_move(safe_moves)
