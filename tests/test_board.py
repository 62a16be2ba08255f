"""Tests for the Board grid and its snapshots."""

import pytest

from connect4_engine.game.board import Board
from connect4_engine.utils import GameResult, Player


def test_drop_stacks_from_the_bottom():
    board = Board()

    assert board.drop(2, Player.ONE) == 5
    assert board.drop(2, Player.TWO) == 4
    assert board.occupied_count() == 2
    assert not board.is_column_full(2)


def test_drop_into_full_column_raises():
    board = Board(4, 4)
    for player in [Player.ONE, Player.TWO] * 2:
        board.drop(0, player)

    assert board.is_column_full(0)
    with pytest.raises(ValueError):
        board.drop(0, Player.ONE)


def test_is_full_and_clear():
    board = Board(4, 4)
    for col in range(4):
        for player in [Player.ONE, Player.TWO] * 2:
            board.drop(col, player)

    assert board.is_full()
    board.clear()
    assert board.occupied_count() == 0
    assert not board.is_full()


@pytest.mark.parametrize("column,expected", [
    (0, True), (6, True), (-1, False), (7, False), ("1", False), (False, False),
])
def test_is_valid_column(column, expected):
    assert Board().is_valid_column(column) is expected


def test_snapshot_copies_grid_and_state():
    board = Board()
    board.drop(3, Player.ONE)

    snapshot = board.snapshot(Player.TWO, GameResult.IN_PROGRESS)
    board.drop(3, Player.TWO)

    assert snapshot.cell(4, 3) == Player.EMPTY
    assert snapshot.active_player == Player.TWO
    assert not snapshot.grid.flags.writeable
    assert str(snapshot) == snapshot.render()
    assert snapshot != board.snapshot(Player.TWO, GameResult.IN_PROGRESS)
