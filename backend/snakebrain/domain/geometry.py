"""
Grid geometry: coordinates and the arithmetic between them.

(0, 0) is the bottom-left cell; x grows to the right and y grows upward.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List

from .constants import DEFAULT_DIRECTION, DOWN, LEFT, RIGHT, UP, Direction

if TYPE_CHECKING:
    from .board import Board


@dataclass(frozen=True)
class Coordinate:
    """An immutable (x, y) cell on the board."""

    x: int
    y: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinate":
        """Build a Coordinate from a wire object like {"x": 3, "y": 4}."""
        return cls(int(data["x"]), int(data["y"]))

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    def moved(self, direction: Direction) -> "Coordinate":
        """Return the cell one step away in the given direction."""
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)

    def __repr__(self):
        return f"({self.x}, {self.y})"


# Order matters for deterministic tie-breaking in callers
_NEIGHBOR_ORDER = (RIGHT, LEFT, UP, DOWN)


def neighbors(coord: Coordinate) -> List[Coordinate]:
    """The four orthogonal neighbours of a cell, ordered right, left, up, down."""
    return [coord.moved(direction) for direction in _NEIGHBOR_ORDER]


def distance(a: Coordinate, b: Coordinate) -> int:
    """Manhattan distance between two cells."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def is_adjacent(a: Coordinate, b: Coordinate) -> bool:
    return distance(a, b) == 1


def in_bounds(coord: Coordinate, board: "Board") -> bool:
    return 0 <= coord.x < board.width and 0 <= coord.y < board.height


def move_to_coord(direction: Direction, head: Coordinate) -> Coordinate:
    """The cell the head lands on after moving in `direction`."""
    return head.moved(direction)


def direction_to(origin: Coordinate, target: Coordinate) -> Direction:
    """
    Direction of a single orthogonal step from `origin` to `target`.

    Only meaningful when the two cells are adjacent. Any other pair (equal
    cells, diagonals, cells further apart) yields DEFAULT_DIRECTION.
    """
    if target.x == origin.x and target.y == origin.y + 1:
        return UP
    if target.x == origin.x and target.y == origin.y - 1:
        return DOWN
    if target.x == origin.x - 1 and target.y == origin.y:
        return LEFT
    if target.x == origin.x + 1 and target.y == origin.y:
        return RIGHT
    return DEFAULT_DIRECTION
