"""
Players for TicTacToe.

A player is anything that can look at a game and name the board index
it wants to play next.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .board import ReadOnlyBoard
from .errors import CapabilityDeniedError
from .interfaces import TryMoves

# Given the current board, returns the index the human wants to play
Asker = Callable[[ReadOnlyBoard], int]


class Player(ABC):
    """
    Base class for all players.

    Each player is identified on the board by its mark, a single
    character such as "X" or "O" (or an emoji).
    """

    def __init__(self, mark: str):
        """
        Args:
            mark: The string that will represent this player on the board.
        """
        mark = str(mark)
        if mark == "":
            raise ValueError("A player mark can not be empty.")
        self._mark = mark

    @property
    def mark(self) -> str:
        return self._mark

    @abstractmethod
    def get_best_move(self, game: TryMoves) -> int:
        """
        Choose the board index to play next.

        Args:
            game: Read-only view of the current game.

        Returns:
            The index of an available cell.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mark!r})"


class HumanPlayer(Player):
    """
    A player whose moves come from a person.

    The actual asking (console prompt, GUI click, ...) is done by an
    asker callback, so this class stays free of any I/O.
    """

    def __init__(self, mark: str, asker: Optional[Asker] = None):
        super().__init__(mark)
        self.asker = asker

    def set_asker(self, asker: Asker) -> "HumanPlayer":
        """Set the callback used to ask for moves. Returns self."""
        self.asker = asker
        return self

    def get_best_move(self, game: TryMoves) -> int:
        if not callable(self.asker):
            raise CapabilityDeniedError(
                "HumanPlayer has no asker. Set one with set_asker() first."
            )

        return int(self.asker(game.get_board()))
