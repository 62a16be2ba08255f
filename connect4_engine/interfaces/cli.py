"""
cli.py - Command-line interface for the Connect Four engine

This module provides a text harness on top of GameEngine: a hot-seat game
for two people at one terminal, and a command that replays a move list and
reports the resulting position.
"""

import argparse
import os
import sys
from typing import Callable, List, Optional, Union

from connect4_engine.config import BoardConfig, ENV_DEBUG_LEVEL
from connect4_engine.debug import debug, DebugLevel
from connect4_engine.exceptions import Connect4Error, InvalidMove
from connect4_engine.game.engine import GameEngine
from connect4_engine.utils import GameResult

QUIT = "quit"
RESTART = "restart"


def format_status(engine: GameEngine) -> str:
    """Status line shown under the board."""
    outcome = engine.get_outcome()
    if outcome == GameResult.DRAW:
        return "Draw!"
    if outcome.winner is not None:
        return f"{outcome.winner.label} wins!"
    return f"{engine.get_active_player().label}'s turn ({engine.get_active_player()})"


def parse_moves(moves: str) -> List[int]:
    """Parse a comma-separated list of columns such as '3,3,4'."""
    moves = moves.strip()
    if not moves:
        return []
    return [int(part) for part in moves.split(',')]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four CLI')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--debug-level', choices=[level.name.lower() for level in DebugLevel],
                        default=os.environ.get(ENV_DEBUG_LEVEL, 'warning').lower(),
                        help='Logging verbosity (default: warning)')
    parser.add_argument('--log-file', type=str, default=None, help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play a two-player game at this terminal')

    show_parser = subparsers.add_parser('show', help='Replay moves and describe the position')
    show_parser.add_argument('--moves', type=str, default='',
                             help='Comma-separated columns, e.g. 3,3,4')

    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)

    if args.log_file:
        debug.configure(log_file=args.log_file)


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, engine: Optional[GameEngine] = None,
                 input_func: Callable[[str], str] = input):
        """
        Initialize the CLI.

        Args:
            engine: Engine to drive; a new one is built from the environment if omitted
            input_func: Source of user input, replaceable for scripted sessions
        """
        self.engine = engine
        self.input_func = input_func
        self.args: Optional[argparse.Namespace] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments."""
        self.args = build_parser().parse_args(argv)
        configure_debug(self.args)
        return self.args

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI based on the parsed arguments.

        Returns:
            Process exit code
        """
        if self.args is None or argv is not None:
            self.parse_args(argv)

        if self.engine is None:
            try:
                self.engine = GameEngine.from_config(BoardConfig.from_env())
            except Connect4Error as e:
                print(f"Error: {e}")
                return 2

        if self.args.command == 'play':
            self.play_game()
            return 0
        if self.args.command == 'show':
            return self.show_position(self.args.moves)

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> None:
        """Play a Connect Four game interactively."""
        engine = self.engine
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{engine.cols - 1}) to drop a disc.")
        print("Other commands: 'q' to quit, 'r' to restart.")

        engine.reset()
        print(engine.render())
        print(format_status(engine))

        while not engine.is_game_over():
            move = self.get_human_move()

            if move is None:
                continue
            if move == QUIT:
                print("Quitting game.")
                return
            if move == RESTART:
                engine.reset()
                print("Game restarted.")
                print(engine.render())
                print(format_status(engine))
                continue

            try:
                engine.apply_move(move)
            except InvalidMove as e:
                print(f"Invalid move: {e}")
                continue

            print(engine.render())
            print(format_status(engine))

        print("Game over!")

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Get a move from the active player.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not understood
        """
        prompt = f"{self.engine.get_active_player().label} (0-{self.engine.cols - 1}, q/r): "
        try:
            user_input = self.input_func(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        if user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

    def show_position(self, moves: str) -> int:
        """Replay a move list from an empty board and describe the result."""
        engine = self.engine
        engine.reset()

        try:
            columns = parse_moves(moves)
        except ValueError:
            print(f"Error parsing moves '{moves}': expected comma-separated integers")
            return 2

        for i, column in enumerate(columns, start=1):
            try:
                engine.apply_move(column)
            except InvalidMove as e:
                print(engine.render())
                print(f"Move {i} (column {column}) rejected: {e}")
                return 1

        print(engine.render())
        print(format_status(engine))
        print(f"Moves played: {engine.move_count}")
        print(f"Valid moves: {engine.get_valid_moves()}")

        winning_line = engine.get_winning_line()
        if winning_line:
            print(f"Winning line: {winning_line}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the connect4-engine console script."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
