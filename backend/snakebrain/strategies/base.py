"""
Base strategy interface for the decision engine.
"""

import logging
import random
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Optional

from snakebrain.domain.board import Board
from snakebrain.domain.constants import API_VERSION, DIRECTIONS, DEFAULT_DIRECTION, Direction
from snakebrain.domain.game_state import GameState
from snakebrain.domain.legality import safe_directions
from snakebrain.domain.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnakeInfo:
    """
    Appearance and identity served by the info endpoint.

    See https://docs.battlesnake.com/api/requests/info
    """

    author: str
    color: str
    head: str
    tail: str
    apiversion: str = API_VERSION
    version: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in asdict(self).items() if v is not None}


class Strategy:
    """
    Base class/interface for move selection.

    A strategy narrows the set of safe directions down to the one it plays.
    Instances hold no per-game state, so one instance can serve any number
    of concurrent games.
    """

    name = "base"
    description = ""
    info = SnakeInfo(author="", color="#888888", head="default", tail="default")

    def __init__(self, rng=None):
        # Anything with a choice() method; the random module by default
        self.rng = rng if rng is not None else random

    def choose(
        self, board: Board, snake: Snake, safe_moves: Iterable[Direction]
    ) -> Direction:
        """
        Return the direction to play.

        Args:
            board: Board for this turn
            snake: The snake we are moving
            safe_moves: Output of safe_directions(board, snake)

        Returns:
            A member of safe_moves, or DEFAULT_DIRECTION when it is empty.
        """
        raise NotImplementedError

    def random_move(self, safe_moves: Iterable[Direction]) -> Direction:
        """Uniform pick among safe_moves; DEFAULT_DIRECTION when there are none."""
        # Canonical order keeps seeded runs reproducible regardless of set order
        safe_moves = set(safe_moves)
        candidates = [d for d in DIRECTIONS if d in safe_moves]
        if not candidates:
            return DEFAULT_DIRECTION
        return self.rng.choice(candidates)

    def get_move(self, game_state: GameState) -> Direction:
        safe_moves = safe_directions(game_state.board, game_state.you)
        logger.debug(
            f"Safe moves for {game_state.you.id} on turn {game_state.turn}: "
            f"{sorted(d.value for d in safe_moves)}"
        )
        if not safe_moves:
            logger.warning(
                f"No safe moves for {game_state.you.id} on turn {game_state.turn}"
            )

        chosen = self.choose(game_state.board, game_state.you, safe_moves)

        logger.info(f"MOVE {game_state.turn}: {chosen.value}")
        return chosen

    def start(self, game_state: GameState) -> None:
        logger.info(f"GAME START {game_state.game.id} ({self.name})")

    def end(self, game_state: GameState) -> None:
        logger.info(f"GAME OVER {game_state.game.id} after {game_state.turn} turns")

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name}>"
