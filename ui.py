"""
TicTacToe console UI.

Shows:
- The board, with open cells labelled by their index
- Whose turn it is and where each player moved
- The final result

Also provides FetchMove, the prompt that asks a human for their move.
"""

from typing import Callable, List

from tictactoe.ai_player import CpuPlayer
from tictactoe.board import Board
from tictactoe.config import GameConfig
from tictactoe.game import Game
from tictactoe.move_validator import MoveValidator
from tictactoe.players import Player
from tictactoe.win_checker import Outcome


def render_board(board: Board) -> str:
    """
    Draw the board as text.

    Open cells show their index so players know what to type:

         0 │ 1 │ 2
        ───┼───┼───
         3 │ X │ 5
        ───┼───┼───
         O │ 7 │ 8
    """
    d = board.dimension
    cells = [str(i) if mark is None else mark for i, mark in enumerate(board.to_list())]
    width = max(len(cell) for cell in cells)
    cells = [cell.center(width) for cell in cells]

    rows = [
        " " + GameConfig.BOARD_COLUMN_SEPARATOR.join(cells[r * d:(r + 1) * d]) + " "
        for r in range(d)
    ]
    rule = GameConfig.BOARD_ROW_SEPARATOR + GameConfig.BOARD_INTERSECT.join(
        [GameConfig.BOARD_ROW_SEPARATOR * width] * d
    ) + GameConfig.BOARD_ROW_SEPARATOR

    return ("\n" + rule + "\n").join(rows) + "\n"


class FetchMove:
    """
    Asks a human player for their move on the console.

    Keeps asking until the answer is an open cell, so the game only
    ever receives valid moves.
    """

    def __init__(
        self,
        mark: str,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        """
        Args:
            mark: The player's mark, shown in the prompt.
            input_func: Reads one answer (default: input).
            output: Writes one line (default: print).
        """
        self.mark = mark
        self.input_func = input_func
        self.output = output
        self.validator = MoveValidator()

    def __call__(self, board: Board) -> int:
        prompt = f"{self.mark}'s move [0-{len(board) - 1}] > "

        while True:
            answer = self.input_func(prompt)
            result = self.validator.validate_input(board, answer)
            if result.is_valid:
                return result.location
            self.output(result.error_message)


class ConsoleUI:
    """
    Prints the game as it is played.
    """

    def __init__(self, output: Callable[[str], None] = print):
        self.output = output

    def banner(self) -> str:
        return "=" * GameConfig.BANNER_WIDTH

    def show_welcome(self, players: List[Player]) -> None:
        self.output("")
        self.output("Welcome to Tic-Tac-Toe")
        for num, player in enumerate(players, start=1):
            self.output(f"  P{num}: {player.mark} ({describe_player(player)})")

    def show_turn(self, game: Game) -> None:
        """Print the board and whose turn it is."""
        self.output("")
        self.output(self.banner())
        self.output(f"{game.next_player.mark}'s turn")
        self.output(render_board(game.official_board()))

    def show_move(self, player: Player, location: int) -> None:
        self.output(f"{player.mark} plays at {location}.")

    def show_result(self, game: Game, outcome: Outcome) -> None:
        """Print the final board and who won."""
        self.output("")
        self.output(self.banner())

        if outcome.is_tie:
            self.output("Game over: Cat's game.")
        else:
            line = game.winning_line()
            self.output(f"Game over: {outcome.winner} wins!")
            if line is not None:
                self.output(f"Winning line: {', '.join(str(i) for i in line)}")

        self.output(render_board(game.official_board()))


def describe_player(player: Player) -> str:
    """Short label such as 'Human' or 'CPU, HARD'."""
    if isinstance(player, CpuPlayer):
        return f"CPU, {player.difficulty.name}"
    return "Human"
