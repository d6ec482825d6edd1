"""
Domain entities for the snake move engine.

This module contains the core game entities and grid helpers that are
independent of infrastructure concerns (HTTP, configuration, CLI).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_VECTORS, DEFAULT_GRID_SIZE,
    MAX_GRID_SIZE,
)
from .snake import Snake
from .game_state import GameState
from .reachability import (
    Cell,
    manhattan_distance,
    in_bounds,
    occupied_cells,
    reachable_count,
)

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_VECTORS', 'DEFAULT_GRID_SIZE',
    'MAX_GRID_SIZE',
    'Snake',
    'GameState',
    'Cell',
    'manhattan_distance',
    'in_bounds',
    'occupied_cells',
    'reachable_count',
]
