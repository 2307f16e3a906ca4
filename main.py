"""
Main entry point for the TicTacToe console game.

This script ties together:
- Logic (board, rules engine, human and CPU players)
- Console UI (board display, move prompts)

Examples:
    python main.py                              # Human vs human
    python main.py --p2-level 3                 # Human vs hard CPU
    python main.py --p1-level 1 --p2-level 3    # Watch easy CPU vs hard CPU
    python main.py --p1-mark 🐱 --p2-mark 🐶     # Any single character works
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from logging_setup import setup_logging
from tictactoe.ai_player import CpuPlayer
from tictactoe.config import GameConfig
from tictactoe.game import Game
from tictactoe.players import HumanPlayer, Player
from tictactoe.win_checker import Outcome
from ui import ConsoleUI, FetchMove

logger = logging.getLogger(__name__)


class TicTacToeConsole:
    """
    Runs one game of TicTacToe on the console.

    Game flow:
    1. Show whose turn it is and the board
    2. Ask the current player (human prompt or CPU) for a move
    3. Apply it and switch turns
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        p1: Player,
        p2: Player,
        dimension: int = GameConfig.DIMENSION,
        ui: Optional[ConsoleUI] = None,
    ):
        """
        Args:
            p1: Player who moves first.
            p2: Player who moves second.
            dimension: Board side length.
            ui: Console output (default: prints to stdout).
        """
        self.ui = ui or ConsoleUI()
        self.game = Game(p1, p2, dimension=dimension)

    def start(self) -> Outcome:
        """Play the game to the end and show the result."""
        self.ui.show_welcome(self.game.players)
        outcome = self.game.run(on_turn=self.ui.show_turn, on_move=self.ui.show_move)
        self.ui.show_result(self.game, outcome)
        return outcome


def new_player(
    num: int,
    level: Optional[int],
    mark: str,
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> Player:
    """
    Build a player from command line options.

    Args:
        num: Player number (1 or 2), for logging.
        level: CPU difficulty, or None for a human player.
        mark: Player mark. Only the first character is used.
        input_func: Reads human answers.
        output: Writes prompts and errors.
    """
    mark = mark[:1]

    if level:
        player: Player = CpuPlayer(mark, difficulty=level)
    else:
        fetch_move = FetchMove(mark, input_func=input_func, output=output)
        player = HumanPlayer(mark).set_asker(fetch_move)

    logger.debug("P%d: %r", num, player)
    return player


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tic-tac-toe",
        description=(
            "Play Tic-Tac-Toe with human or CPU players. You can provide your "
            "own symbols (including Unicode emoji) to represent each player."
        ),
    )
    for num in (1, 2):
        parser.add_argument(
            f"--p{num}-level",
            type=int,
            choices=GameConfig.DIFFICULTY_LEVELS,
            default=None,
            help=(
                f"Set P{num} to be played by the CPU of the provided difficulty [1-3]. "
                f"When this option is not provided, P{num} will be played by a human."
            ),
        )
    parser.add_argument(
        "--p1-mark",
        default=GameConfig.P1_MARK,
        help="Set the symbol to use on the board to represent P1.",
    )
    parser.add_argument(
        "--p2-mark",
        default=GameConfig.P2_MARK,
        help="Set the symbol to use on the board to represent P2.",
    )
    parser.add_argument(
        "--dimension",
        type=int,
        default=GameConfig.DIMENSION,
        help="Length of the board's sides (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Diagnostics written to stderr (default: %(default)s).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.p1_mark or not args.p2_mark:
        parser.error("Player marks can not be empty.")
    if args.p1_mark[:1] == args.p2_mark[:1]:
        parser.error("P1 and P2 must use different marks.")
    if args.dimension < 1:
        parser.error("--dimension must be at least 1.")

    setup_logging(args.log_level)

    p1 = new_player(1, args.p1_level, args.p1_mark)
    p2 = new_player(2, args.p2_level, args.p2_mark)
    console = TicTacToeConsole(p1, p2, dimension=args.dimension)

    try:
        console.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        return 130
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
