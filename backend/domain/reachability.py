"""
Grid geometry and flood-fill reachability used to score candidate moves.

All functions are pure: the grid size is passed in, nothing is cached
between calls.
"""

from collections import deque
from typing import Iterable, Sequence, Set, Tuple

from .constants import DIRECTION_VECTORS

Cell = Tuple[int, int]


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def occupied_cells(snake: Sequence[Cell]) -> Set[Cell]:
    """
    Cells that block the next move: the whole body except the tail,
    which vacates its cell on the same tick the head advances.
    """
    return set(snake[:-1])


def neighbours(cell: Cell) -> Iterable[Cell]:
    x, y = cell
    for _, (dx, dy) in DIRECTION_VECTORS:
        yield (x + dx, y + dy)


def reachable_count(start: Cell, occupied: Set[Cell], grid_size: int) -> int:
    """
    Count the cells reachable from `start` by 4-directional moves that stay
    inside the grid and avoid `occupied`.

    The start cell is always counted, even when it is itself occupied.
    Visits at most grid_size ** 2 cells.
    """
    visited = {start}
    queue = deque([start])
    count = 0

    while queue:
        cell = queue.popleft()
        count += 1
        for nxt in neighbours(cell):
            if nxt in visited or nxt in occupied or not in_bounds(nxt, grid_size):
                continue
            visited.add(nxt)
            queue.append(nxt)

    return count
