"""
Snake entity for the game loop.
"""

from collections import deque
from typing import List, Tuple, Optional


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'no_legal_move'
        death_tick: The tick number when the snake died
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def length(self) -> int:
        return len(self.positions)

    def body(self) -> List[Tuple[int, int]]:
        """Head-first list copy of the positions."""
        return list(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={self.length} alive={self.alive}>"
