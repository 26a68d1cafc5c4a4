"""
Game constants for SnakeBrain.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """
    The four moves a snake can make.

    The enum value is the lowercase token used on the wire ("up", "down", ...).
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_token(cls, token: str) -> "Direction":
        """
        Parse a wire token into a Direction.

        Raises:
            ValueError: If the token is not one of the four known moves.
        """
        if isinstance(token, str):
            normalized = token.strip().lower()
            for direction in cls:
                if direction.value == normalized:
                    return direction
        valid = ", ".join(d.value for d in cls)
        raise ValueError(f"Unknown direction '{token}'. Valid directions: {valid}")

    @property
    def delta(self) -> Tuple[int, int]:
        """(dx, dy) applied to a coordinate when moving this way. Up => y + 1."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def __str__(self) -> str:
        return self.value


_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT

# Canonical ordering, used wherever a stable iteration order is needed
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
VALID_MOVES = {d.value for d in DIRECTIONS}

# Returned when no move is safe; the game decides the outcome
DEFAULT_DIRECTION = UP

# Battlesnake API version served by the info endpoint
API_VERSION = "1"
