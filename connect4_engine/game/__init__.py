"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the board representation, the win/draw rules,
the GameEngine that owns a game's state, and a Gymnasium adapter.
"""

from connect4_engine.game.board import Board, BoardSnapshot
from connect4_engine.game.engine import GameEngine, MoveResult
from connect4_engine.game.env import ConnectFourEnv

__all__ = ['Board', 'BoardSnapshot', 'GameEngine', 'MoveResult', 'ConnectFourEnv']
