"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from .board import Board


class GameStatus(Enum):
    """Where a game stands."""
    ONGOING = "ongoing"
    TIE = "tie"
    WON = "won"


@dataclass(frozen=True)
class Outcome:
    """
    Result of checking a board: ongoing, tied, or won by a mark.

    Use the is_over / is_tie / winner properties rather than truthiness;
    any mark, even one like "0", counts as a winner.
    """
    status: GameStatus
    mark: Optional[str] = None

    @classmethod
    def won(cls, mark: str) -> "Outcome":
        return cls(GameStatus.WON, mark)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.ONGOING

    @property
    def is_tie(self) -> bool:
        return self.status is GameStatus.TIE

    @property
    def winner(self) -> Optional[str]:
        """The winning mark, or None on a tie or unfinished game."""
        return self.mark if self.status is GameStatus.WON else None

    def __str__(self) -> str:
        if self.status is GameStatus.WON:
            return f"{self.mark} wins"
        return self.status.value


ONGOING = Outcome(GameStatus.ONGOING)
TIE = Outcome(GameStatus.TIE)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: every cell of a line (row, column or diagonal) holds
    the same mark. Lines are always checked in the same order: rows
    top to bottom, columns left to right, the left diagonal, then the
    right diagonal. The first complete line decides the winner.
    """

    def lines(self, board: Board) -> Iterator[List[Optional[str]]]:
        """Yield the marks of every line on the board, in checking order."""
        for i in range(board.dimension):
            yield board.row(i)
        for i in range(board.dimension):
            yield board.column(i)
        yield list(board.diagonal(True).values())
        yield list(board.diagonal(False).values())

    def line_indices(self, board: Board) -> Iterator[List[int]]:
        """Yield the cell indices of every line, in the same order as lines()."""
        d = board.dimension
        for i in range(d):
            yield list(range(i * d, i * d + d))
        for i in range(d):
            yield list(range(i, d * d, d))
        yield board.diagonal_indices(True)
        yield board.diagonal_indices(False)

    def check_winner(self, board: Board) -> Optional[str]:
        """
        Check if there's a winner.

        Returns:
            The winning mark, or None if no line is complete.
        """
        for line in self.lines(board):
            winner = self._check_line(line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, line: List[Optional[str]]) -> Optional[str]:
        """
        Check if a single line has a winner.

        Returns:
            The mark if every cell holds it, None otherwise.
        """
        first = line[0]
        if first is None:
            return None  # Empty cell, no winner on this line

        for mark in line[1:]:
            if mark != first:
                return None

        return first

    def evaluate(self, board: Board) -> Outcome:
        """
        Check the board for a finished game.

        Returns:
            Outcome.won(mark) for a win, TIE for a full board with no
            winner, otherwise ONGOING.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.won(winner)

        if len(board.available()) == 0:
            return TIE

        return ONGOING

    def get_winning_line(self, board: Board) -> Optional[List[int]]:
        """
        Get the winning line if there is one.

        Returns:
            The cell indices of the first complete line, or None.
        """
        for marks, indices in zip(self.lines(board), self.line_indices(board)):
            if self._check_line(marks) is not None:
                return indices
        return None
