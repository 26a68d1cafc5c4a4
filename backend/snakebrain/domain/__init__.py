"""
Domain entities for the SnakeBrain decision engine.

This module contains the per-turn game values and the pure functions over
them. Nothing here performs I/O or keeps state between turns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTIONS, DEFAULT_DIRECTION, API_VERSION,
    Direction,
)
from .geometry import (
    Coordinate, neighbors, distance, is_adjacent, in_bounds, direction_to, move_to_coord,
)
from .snake import Snake
from .board import Board
from .game_state import Game, GameState, InvalidGameStateError
from .legality import safe_directions, directions_with_food, closest_food

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTIONS', 'DEFAULT_DIRECTION',
    'API_VERSION',
    'Direction',
    'Coordinate', 'neighbors', 'distance', 'is_adjacent', 'in_bounds',
    'direction_to', 'move_to_coord',
    'Snake',
    'Board',
    'Game', 'GameState', 'InvalidGameStateError',
    'safe_directions', 'directions_with_food', 'closest_food',
]
