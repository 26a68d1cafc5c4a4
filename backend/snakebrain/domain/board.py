"""
Board entity - the read-only world state for one turn.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Set, Tuple

from .geometry import Coordinate, in_bounds
from .snake import Snake


@dataclass(frozen=True)
class Board:
    """
    The board as seen on a single turn.

    Attributes:
        width, height: board dimensions, constant for a game
        food: food cells, in the order the game server listed them
        hazards: hazard cells (survivable but costly)
        snakes: every snake still alive, including our own
    """

    width: int
    height: int
    food: Tuple[Coordinate, ...] = field(default_factory=tuple)
    hazards: Tuple[Coordinate, ...] = field(default_factory=tuple)
    snakes: Tuple[Snake, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        object.__setattr__(self, "food", tuple(self.food))
        object.__setattr__(self, "hazards", tuple(self.hazards))
        object.__setattr__(self, "snakes", tuple(self.snakes))

    def in_bounds(self, coord: Coordinate) -> bool:
        return in_bounds(coord, self)

    def is_food(self, coord: Coordinate) -> bool:
        return coord in self.food

    def is_hazard(self, coord: Coordinate) -> bool:
        return coord in self.hazards

    def occupied_cells(self) -> Set[Coordinate]:
        """Every cell covered by any snake body, tails included."""
        return {segment for snake in self.snakes for segment in snake.body}

    def opponents(self, snake: Snake) -> Tuple[Snake, ...]:
        """All snakes on the board other than `snake` (matched by id)."""
        return tuple(other for other in self.snakes if other.id != snake.id)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        """Build a Board from a Battlesnake API board object."""
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            food=_coords(data.get("food", [])),
            hazards=_coords(data.get("hazards", [])),
            snakes=tuple(Snake.from_dict(s) for s in data.get("snakes", [])),
        )

    def render(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        S = snake body
        0,1,2... = snake head (showing the snake's index on the board)
        (0,0) is at the bottom left and x-axis labels are at the bottom
        """
        grid = [['.' for _ in range(self.width)] for _ in range(self.height)]

        # Hazards first so food and snakes drawn on top stay visible
        for cell in self.hazards:
            if self.in_bounds(cell):
                grid[cell.y][cell.x] = 'H'

        for cell in self.food:
            if self.in_bounds(cell):
                grid[cell.y][cell.x] = 'F'

        for i, snake in enumerate(self.snakes):
            # Draw tail to head so the head wins when segments are stacked
            for pos_idx in range(snake.length - 1, -1, -1):
                cell = snake.body[pos_idx]
                if not self.in_bounds(cell):
                    continue
                grid[cell.y][cell.x] = str(i % 10) if pos_idx == 0 else 'S'

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(grid[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<Board {self.width}x{self.height}, food={len(self.food)}, "
            f"hazards={len(self.hazards)}, snakes={len(self.snakes)}>"
        )


def _coords(items: Iterable[Dict[str, Any]]) -> Tuple[Coordinate, ...]:
    return tuple(Coordinate.from_dict(item) for item in items)
