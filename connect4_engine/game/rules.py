"""
rules.py - Win and draw detection for Connect Four

Pure functions over a numpy grid. They never mutate the grid and work for
any board shape, deriving every scan bound from the grid's own dimensions.
"""

from typing import List, Tuple

import numpy as np

from connect4_engine.utils import CONNECT_N, DIRECTION_VECTORS, Player

Coord = Tuple[int, int]  # (row, col)


def _start_range(length: int, step: int) -> range:
    """Starting indices along one axis whose run of CONNECT_N stays on the board."""
    if step > 0:
        return range(0, length - CONNECT_N + 1)
    if step < 0:
        return range(CONNECT_N - 1, length)
    return range(0, length)


def find_winning_line(grid: np.ndarray, player: Player) -> List[Coord]:
    """
    Find a run of CONNECT_N cells owned by player.

    Every direction vector is scanned from every start cell whose run
    stays in bounds.

    Args:
        grid: The game board
        player: The player to check for

    Returns:
        List of (row, col) positions forming the run, or an empty list
    """
    if player == Player.EMPTY:
        return []

    rows, cols = grid.shape
    value = player.value

    for dr, dc in DIRECTION_VECTORS.values():
        for row in _start_range(rows, dr):
            for col in _start_range(cols, dc):
                line = [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]
                if all(grid[r, c] == value for r, c in line):
                    return line

    return []


def check_win(grid: np.ndarray, player: Player) -> bool:
    """True iff player owns CONNECT_N contiguous cells in any direction."""
    return bool(find_winning_line(grid, player))


def check_draw(grid: np.ndarray) -> bool:
    """
    True iff no cell is empty.

    Only meaningful once check_win has ruled out a winner: a full board
    that contains a run is a win, not a draw.
    """
    return not np.any(grid == Player.EMPTY.value)
