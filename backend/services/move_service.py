"""
Request validation and response building for the next-move contract.

A request is {"snake": [{"x", "y"}, ...], "food": {"x", "y"}} with an
optional "gridSize". The response mirrors what the browser front-end
consumes: direction, targetCell, targetScore and a diagnostic analysis
block.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from domain.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE
from domain.reachability import Cell, manhattan_distance
from players.heuristic_player import NoLegalMove, legal_moves, select_move

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_NO_LEGAL_MOVE = "no_legal_move"


class InvalidMoveRequest(ValueError):
    """Raised when a next-move request is malformed."""


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid coordinate
    return isinstance(value, int) and not isinstance(value, bool)


def parse_cell(raw: Any, label: str) -> Cell:
    if not isinstance(raw, dict):
        raise InvalidMoveRequest(f"{label} must be an object with integer 'x' and 'y'")
    if "x" not in raw or "y" not in raw:
        raise InvalidMoveRequest(f"{label} is missing 'x' or 'y'")
    x, y = raw["x"], raw["y"]
    if not _is_int(x) or not _is_int(y):
        raise InvalidMoveRequest(f"{label} coordinates must be integers, got x={x!r}, y={y!r}")
    return (x, y)


def parse_move_request(
    payload: Any,
    default_grid_size: int = DEFAULT_GRID_SIZE,
) -> Tuple[List[Cell], Cell, int]:
    """
    Validate a raw request payload.

    Returns:
        (snake, food, grid_size) with cells as (x, y) tuples.

    Raises:
        InvalidMoveRequest: on any structural or type problem.
    """
    if not isinstance(payload, dict):
        raise InvalidMoveRequest("Request body must be a JSON object")

    raw_snake = payload.get("snake")
    if not isinstance(raw_snake, list) or not raw_snake:
        raise InvalidMoveRequest("'snake' must be a non-empty list of cells")
    snake = [parse_cell(seg, f"snake[{i}]") for i, seg in enumerate(raw_snake)]

    if "food" not in payload:
        raise InvalidMoveRequest("'food' is required")
    food = parse_cell(payload["food"], "food")

    grid_size = payload.get("gridSize", default_grid_size)
    if not _is_int(grid_size) or grid_size <= 0:
        raise InvalidMoveRequest(f"'gridSize' must be a positive integer, got {grid_size!r}")
    if grid_size > MAX_GRID_SIZE:
        raise InvalidMoveRequest(f"'gridSize' must be at most {MAX_GRID_SIZE}, got {grid_size}")

    return snake, food, grid_size


def _cell_dict(cell: Optional[Cell]) -> Optional[Dict[str, int]]:
    if cell is None:
        return None
    return {"x": cell[0], "y": cell[1]}


def next_move(snake: List[Cell], food: Cell, grid_size: int = DEFAULT_GRID_SIZE) -> Dict[str, Any]:
    """
    Run the move selector and build the response document.
    """
    result = select_move(snake, food, grid_size)
    head = snake[0]

    analysis = {
        "snakeLength": len(snake),
        "distanceToFood": manhattan_distance(head, food),
        "possibleMoves": len(legal_moves(snake, grid_size)),
    }

    if isinstance(result, NoLegalMove):
        logger.info(f"No legal move for snake head at {head} (length {len(snake)})")
        return {
            "status": STATUS_NO_LEGAL_MOVE,
            "direction": None,
            "targetCell": None,
            "targetScore": None,
            "analysis": analysis,
        }

    return {
        "status": STATUS_OK,
        "direction": result.direction,
        "targetCell": _cell_dict(result.target),
        "targetScore": result.score,
        "analysis": analysis,
    }


def handle_move_request(payload: Any, default_grid_size: int = DEFAULT_GRID_SIZE) -> Dict[str, Any]:
    snake, food, grid_size = parse_move_request(payload, default_grid_size)
    return next_move(snake, food, grid_size)
