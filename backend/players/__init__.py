"""
Player implementations for the snake game loop.

This module contains the player abstraction and the heuristic move
selector that controls the snake.
"""

from .base import Player
from .heuristic_player import (
    HeuristicPlayer,
    ScoredMove,
    NoLegalMove,
    legal_moves,
    score_move,
    select_move,
)

__all__ = [
    'Player',
    'HeuristicPlayer',
    'ScoredMove',
    'NoLegalMove',
    'legal_moves',
    'score_move',
    'select_move',
]
