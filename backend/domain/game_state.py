"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: which tick we are in (0-based)
        snake_positions: list of (x, y), head first
        food: (x, y) of the food cell, or None when no food is placed
        score: food eaten so far
        grid_size: width and height of the square board
        alive: whether the snake is still alive
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        grid_size: int,
        alive: bool = True
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.food = food
        self.score = score
        self.grid_size = grid_size
        self.alive = alive

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        T = snake body/tail
        Row 0 is printed first (y grows downward) with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            if 0 <= fx < self.grid_size and 0 <= fy < self.grid_size:
                board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "tick_number": self.tick_number,
            "snake": [{"x": x, "y": y} for x, y in self.snake_positions],
            "food": {"x": self.food[0], "y": self.food[1]} if self.food else None,
            "score": self.score,
            "grid_size": self.grid_size,
            "alive": self.alive,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
