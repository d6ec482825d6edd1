"""
Tests for domain.reachability - grid helpers and flood fill.
"""

import sys
import os
import itertools

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.reachability import (
    manhattan_distance,
    in_bounds,
    occupied_cells,
    reachable_count,
)


class TestManhattanDistance:
    """Tests for manhattan_distance."""

    def test_distance_along_axes(self):
        assert manhattan_distance((0, 0), (3, 0)) == 3
        assert manhattan_distance((0, 0), (0, 4)) == 4

    def test_distance_is_symmetric(self):
        """manhattan_distance(a, b) == manhattan_distance(b, a) for a grid of cells."""
        cells = list(itertools.product(range(-1, 4), repeat=2))
        for a, b in itertools.product(cells, repeat=2):
            assert manhattan_distance(a, b) == manhattan_distance(b, a)

    def test_distance_to_self_is_zero(self):
        assert manhattan_distance((7, 2), (7, 2)) == 0


class TestInBounds:
    """Tests for in_bounds."""

    def test_corners_are_in_bounds(self):
        for cell in [(0, 0), (19, 0), (0, 19), (19, 19)]:
            assert in_bounds(cell, 20)

    def test_outside_cells_are_rejected(self):
        for cell in [(-1, 0), (0, -1), (20, 5), (5, 20)]:
            assert not in_bounds(cell, 20)


class TestOccupiedCells:
    """Tests for occupied_cells."""

    def test_tail_is_excluded(self):
        snake = [(5, 5), (4, 5), (3, 5)]
        assert occupied_cells(snake) == {(5, 5), (4, 5)}

    def test_single_segment_snake_occupies_nothing(self):
        assert occupied_cells([(5, 5)]) == set()


class TestReachableCount:
    """Tests for the flood fill."""

    def test_empty_board_reaches_every_cell(self):
        """On an empty board every cell is reachable, start included."""
        assert reachable_count((0, 0), set(), 20) == 400
        assert reachable_count((10, 7), set(), 20) == 400

    def test_every_start_on_small_empty_board(self):
        for start in itertools.product(range(3), repeat=2):
            assert reachable_count(start, set(), 3) == 9

    def test_fully_surrounded_start_counts_only_itself(self):
        occupied = {(5, 4), (5, 6), (4, 5), (6, 5)}
        assert reachable_count((5, 5), occupied, 20) == 1

    def test_corner_boxed_in_by_body(self):
        assert reachable_count((0, 0), {(1, 0), (0, 1)}, 20) == 1

    def test_occupied_start_is_still_counted(self):
        """The start cell counts even when it is itself occupied."""
        assert reachable_count((1, 1), {(1, 1)}, 3) == 9

    def test_wall_splits_the_board(self):
        wall = {(1, 0), (1, 1), (1, 2)}
        assert reachable_count((0, 0), wall, 3) == 3
        assert reachable_count((2, 1), wall, 3) == 3

    def test_single_obstacle_on_small_board(self):
        """Removing any one cell from a 3x3 board leaves the other 8 connected."""
        cells = list(itertools.product(range(3), repeat=2))
        for blocked in cells:
            for start in cells:
                if start == blocked:
                    continue
                assert reachable_count(start, {blocked}, 3) == 8

    def test_pocket_behind_body(self):
        # body seals off the top-left 2x2 pocket of a 5x5 board
        occupied = {(2, 0), (2, 1), (0, 2), (1, 2), (2, 2)}
        assert reachable_count((0, 0), occupied, 5) == 4
        assert reachable_count((4, 4), occupied, 5) == 25 - 4 - 5
