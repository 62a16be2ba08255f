"""Tests for the pure win/draw rules."""

import numpy as np
import pytest

from connect4_engine.game import rules
from connect4_engine.utils import Player


@pytest.mark.parametrize("cells", [
    [(5, 0), (5, 1), (5, 2), (5, 3)],   # horizontal, bottom row
    [(2, 3), (2, 4), (2, 5), (2, 6)],   # horizontal touching the right edge
    [(5, 6), (4, 6), (3, 6), (2, 6)],   # vertical, last column
    [(3, 0), (2, 0), (1, 0), (0, 0)],   # vertical reaching the top
    [(2, 0), (3, 1), (4, 2), (5, 3)],   # diagonal descending right
    [(2, 3), (3, 4), (4, 5), (5, 6)],   # diagonal ending in the bottom-right corner
    [(5, 0), (4, 1), (3, 2), (2, 3)],   # diagonal ascending right
    [(3, 3), (2, 4), (1, 5), (0, 6)],   # diagonal ending in the top-right corner
])
def test_four_in_a_row_wins(empty_grid, place, cells):
    grid = place(empty_grid(), cells, Player.TWO)

    assert rules.check_win(grid, Player.TWO)
    assert not rules.check_win(grid, Player.ONE)
    assert sorted(rules.find_winning_line(grid, Player.TWO)) == sorted(cells)


def test_blocked_three_in_a_row_is_not_a_win(empty_grid, place):
    grid = place(empty_grid(), [(5, 1), (5, 2), (5, 3)], Player.ONE)
    place(grid, [(5, 0), (5, 4)], Player.TWO)

    assert not rules.check_win(grid, Player.ONE)
    assert not rules.check_win(grid, Player.TWO)
    assert rules.find_winning_line(grid, Player.ONE) == []


def test_broken_sequence_is_not_a_win(empty_grid, place):
    grid = place(empty_grid(), [(5, 0), (5, 1), (5, 3), (5, 4)], Player.ONE)

    assert not rules.check_win(grid, Player.ONE)


def test_empty_never_wins(empty_grid):
    assert not rules.check_win(empty_grid(), Player.EMPTY)


def test_longer_run_still_counts(empty_grid, place):
    grid = place(empty_grid(), [(5, c) for c in range(6)], Player.ONE)

    assert rules.check_win(grid, Player.ONE)
    assert len(rules.find_winning_line(grid, Player.ONE)) == 4


@pytest.mark.parametrize("shape,cells", [
    ((5, 8), [(4, 4), (3, 5), (2, 6), (1, 7)]),
    ((5, 8), [(1, 4), (2, 5), (3, 6), (4, 7)]),
    ((8, 4), [(7, 3), (6, 3), (5, 3), (4, 3)]),
    ((8, 4), [(7, 0), (6, 1), (5, 2), (4, 3)]),
    ((4, 4), [(0, 3), (1, 2), (2, 1), (3, 0)]),
])
def test_scan_bounds_follow_board_shape(empty_grid, place, shape, cells):
    grid = place(empty_grid(*shape), cells, Player.ONE)

    assert rules.check_win(grid, Player.ONE)


def test_check_draw_requires_every_cell_filled(empty_grid):
    grid = empty_grid()
    grid[:, :] = Player.ONE.value
    assert rules.check_draw(grid)

    grid[0, 3] = Player.EMPTY.value
    assert not rules.check_draw(grid)


def test_rules_do_not_mutate_the_grid(empty_grid, place):
    grid = place(empty_grid(), [(5, 0), (4, 1)], Player.ONE)
    before = grid.copy()

    rules.check_win(grid, Player.ONE)
    rules.check_draw(grid)

    assert np.array_equal(grid, before)
