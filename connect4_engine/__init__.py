"""
connect4_engine - Connect Four rules engine

This package provides the board state, move rules and win/draw detection for
a two-player Connect Four game, together with a Gymnasium adapter and a
text-mode harness for driving it.
"""

# Version number
__version__ = '0.1.0'

from connect4_engine.exceptions import Connect4Error, InvalidMove, InvalidConfiguration
from connect4_engine.utils import Player, GameResult
from connect4_engine.game.engine import GameEngine, MoveResult
from connect4_engine.game.board import BoardSnapshot

__all__ = [
    'Connect4Error', 'InvalidMove', 'InvalidConfiguration',
    'Player', 'GameResult', 'GameEngine', 'MoveResult', 'BoardSnapshot',
]
