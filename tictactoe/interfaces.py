"""
The view of a game that players get while choosing a move.

A player can look at the board, try moves out on a private copy of it and
undo them again, but can never change the real game state (cheat).
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .board import ReadOnlyBoard
    from .players import Player
    from .win_checker import Outcome


class TryMoves(ABC):
    """Capability handed to players by the game engine."""

    @abstractmethod
    def get_board(self) -> "ReadOnlyBoard":
        """
        Snapshot of the active board, including any attempt() calls so far.
        """

    @abstractmethod
    def get_opponent(self) -> "Player":
        """The player whose turn it is NOT."""

    @abstractmethod
    def game_over(self) -> "Outcome":
        """Check the active board for a win or tie."""

    @abstractmethod
    def attempt(self, location: int, mark: str) -> None:
        """
        Speculatively place mark at location.

        The move, and any further attempts, are discarded by undo() or by
        the next real move.
        """

    @abstractmethod
    def undo(self, location: Optional[int] = None) -> None:
        """
        Take back a speculative move.

        Args:
            location: Cell to clear. When omitted, ALL speculative moves
                are discarded at once.
        """
