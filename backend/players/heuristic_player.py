"""
Heuristic player - greedy, survival-aware move selection.

Each candidate move is scored as:
  * food term: reduction in Manhattan distance to the food, times FOOD_WEIGHT
  * space term: cells reachable from the candidate (flood fill), times SPACE_WEIGHT
  * continuation bonus: small tie-breaker for keeping the current heading

The best score wins; exact ties keep the earlier direction in
up, down, left, right order.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple, Union

from domain.constants import (
    DIRECTION_VECTORS,
    DEFAULT_GRID_SIZE,
    FOOD_WEIGHT,
    SPACE_WEIGHT,
    CONTINUATION_BONUS,
)
from domain.game_state import GameState
from domain.reachability import (
    Cell,
    in_bounds,
    manhattan_distance,
    occupied_cells,
    reachable_count,
)
from .base import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredMove:
    direction: str
    score: float
    target: Cell


@dataclass(frozen=True)
class NoLegalMove:
    """Every neighbour of the head is out of bounds or occupied."""
    direction: Optional[str] = None
    score: float = float("-inf")
    target: Optional[Cell] = None


MoveResult = Union[ScoredMove, NoLegalMove]


def legal_moves(snake: Sequence[Cell], grid_size: int = DEFAULT_GRID_SIZE) -> List[Tuple[str, Cell]]:
    """
    Enumerate (direction, target) pairs for the head that stay on the grid
    and do not hit the body. The tail is not an obstacle.
    """
    head_x, head_y = snake[0]
    occupied = occupied_cells(snake)

    moves = []
    for direction, (dx, dy) in DIRECTION_VECTORS:
        target = (head_x + dx, head_y + dy)
        if in_bounds(target, grid_size) and target not in occupied:
            moves.append((direction, target))
    return moves


def score_move(
    snake: Sequence[Cell],
    food: Cell,
    target: Cell,
    occupied: Set[Cell],
    grid_size: int = DEFAULT_GRID_SIZE,
) -> float:
    head = snake[0]

    score = (manhattan_distance(head, food) - manhattan_distance(target, food)) * FOOD_WEIGHT
    score += reachable_count(target, occupied, grid_size) * SPACE_WEIGHT

    if len(snake) > 1:
        prev = snake[1]
        heading = (head[0] - prev[0], head[1] - prev[1])
        step = (target[0] - head[0], target[1] - head[1])
        if step == heading:
            score += CONTINUATION_BONUS

    return score


def select_move(
    snake: Sequence[Cell],
    food: Cell,
    grid_size: int = DEFAULT_GRID_SIZE,
) -> MoveResult:
    """
    Pick the next direction for the snake.

    Args:
        snake: body cells, head first
        food: target cell; only used for distances, never bounds-checked
        grid_size: width and height of the square board

    Returns:
        ScoredMove for the best candidate, or NoLegalMove when the head is
        boxed in.
    """
    candidates = legal_moves(snake, grid_size)
    if not candidates:
        logger.debug("No legal move from %s", snake[0])
        return NoLegalMove()

    occupied = occupied_cells(snake)
    best: Optional[ScoredMove] = None
    for direction, target in candidates:
        score = score_move(snake, food, target, occupied, grid_size)
        # strict comparison keeps the earliest direction on ties
        if best is None or score > best.score:
            best = ScoredMove(direction=direction, score=score, target=target)

    logger.debug("Selected %s -> %s (score %.1f)", best.direction, best.target, best.score)
    return best


class HeuristicPlayer(Player):
    """
    Player that drives the snake with select_move.
    """

    def __init__(self, name: str = "heuristic"):
        super().__init__(name)

    def get_move(self, game_state: GameState) -> dict:
        if game_state.food is None:
            raise ValueError("HeuristicPlayer needs a food cell to move toward.")

        result = select_move(game_state.snake_positions, game_state.food, game_state.grid_size)

        if isinstance(result, NoLegalMove):
            rationale = "No legal move: every neighbour is a wall or body segment."
        else:
            rationale = f"Best score {result.score:.1f} toward {game_state.food}."

        return {
            "direction": result.direction,
            "score": result.score,
            "target": result.target,
            "rationale": rationale,
        }
