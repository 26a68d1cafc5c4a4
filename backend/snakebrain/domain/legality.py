"""
Move legality: which directions do not kill our snake this turn.
"""

from typing import Iterable, Optional, Set

from .board import Board
from .constants import DIRECTIONS, Direction
from .geometry import Coordinate, distance, move_to_coord
from .snake import Snake


def safe_directions(board: Board, snake: Snake) -> Set[Direction]:
    """
    Directions that do not result in immediate death.

    A direction is dropped when it:
      1. moves back onto the neck
      2. leaves the board
      3. hits our own body (tail included, it has not moved yet)
      4. hits any snake listed on the board

    Hazards are not considered. The result may be empty; choosing a move
    anyway is up to the caller.
    """
    is_move_safe = {direction: True for direction in DIRECTIONS}
    head = snake.head

    # Prevent moving backwards. A single-cell snake has no neck yet.
    neck = snake.neck
    if neck is not None:
        for direction in DIRECTIONS:
            if move_to_coord(direction, head) == neck:
                is_move_safe[direction] = False

    # Prevent moving out of bounds
    for direction in DIRECTIONS:
        if not board.in_bounds(move_to_coord(direction, head)):
            is_move_safe[direction] = False

    # Prevent colliding with ourselves
    _check_body(snake.body, head, is_move_safe)

    # Prevent colliding with other snakes (our own entry is harmless to re-check)
    for other in board.snakes:
        _check_body(other.body, head, is_move_safe)

    return {direction for direction, safe in is_move_safe.items() if safe}


def _check_body(body: Iterable[Coordinate], head: Coordinate, is_move_safe) -> None:
    occupied = set(body)
    for direction in DIRECTIONS:
        if move_to_coord(direction, head) in occupied:
            is_move_safe[direction] = False


def directions_with_food(
    board: Board, snake: Snake, safe: Iterable[Direction]
) -> Set[Direction]:
    """The subset of `safe` whose target cell holds food."""
    return {
        direction for direction in safe
        if board.is_food(move_to_coord(direction, snake.head))
    }


def closest_food(board: Board, origin: Coordinate) -> Optional[Coordinate]:
    """
    The food cell nearest to `origin` by Manhattan distance.

    Ties go to whichever food the board lists first. None when there is no food.
    """
    best = None
    best_distance = None
    for food in board.food:
        d = distance(origin, food)
        if best_distance is None or d < best_distance:
            best, best_distance = food, d
    return best
