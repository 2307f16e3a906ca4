"""
Game engine for TicTacToe.

Owns the official board and the two players, runs the turn loop, and lets
players try out moves on a speculative copy of the board without touching
the real game state.
"""

import logging
from typing import Callable, List, Optional

from .board import Board, ReadOnlyBoard
from .config import GameConfig
from .interfaces import TryMoves
from .players import Player
from .win_checker import Outcome, WinChecker

logger = logging.getLogger(__name__)

TurnCallback = Callable[["Game"], None]
MoveCallback = Callable[[Player, int], None]


class Game(TryMoves):
    """
    A single game of TicTacToe between two players.

    Players take turns in the order given. While a player is deciding, it
    may call attempt()/undo() to explore moves; those land on a speculative
    board which, while it exists, replaces the official board for every
    read (get_board(), game_over()). A real move always discards it first.
    """

    def __init__(
        self,
        p1: Player,
        p2: Player,
        dimension: int = GameConfig.DIMENSION,
        board: Optional[Board] = None,
    ):
        """
        Initialize the game.

        Args:
            p1: The player who moves first.
            p2: The player who moves second.
            dimension: Board side length, used when no board is given.
            board: Optional board to start from instead of an empty one.

        Raises:
            OutOfRangeError: If dimension is less than 1.
        """
        self.players: List[Player] = [p1, p2]
        self.next_player_index = 0
        self.win_checker = WinChecker()

        self._board = board if board is not None else Board(dimension)
        self._speculative_board: Optional[Board] = None

    # ==================== TRY MOVES ====================

    def get_board(self) -> ReadOnlyBoard:
        return ReadOnlyBoard(self._active_board())

    def get_opponent(self) -> Player:
        opponent_index = (self.next_player_index + 1) % len(self.players)
        return self.players[opponent_index]

    def game_over(self) -> Outcome:
        """
        Check the active board for a finished game.

        Returns:
            Outcome.won(mark) for the first complete line found (rows, then
            columns, then the two diagonals), TIE for a full board, or
            ONGOING.
        """
        return self.win_checker.evaluate(self._active_board())

    def attempt(self, location: int, mark: str) -> None:
        """
        Make a speculative move without affecting the official board.

        Raises:
            OutOfRangeError: If location is not on the board.
            StateConflictError: If location is taken on the speculative board.
        """
        if self._speculative_board is None:
            self._speculative_board = self._board.copy()
            logger.debug("Speculative board created")
        self._speculative_board.set(location, mark)

    def undo(self, location: Optional[int] = None) -> None:
        if self._speculative_board is None:
            return

        if location is None:
            self._speculative_board = None
            logger.debug("Speculative board discarded")
        else:
            self._speculative_board.clear(location)

    # ==================== GAME LOOP ====================

    @property
    def next_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.next_player_index]

    def run(
        self,
        on_turn: Optional[TurnCallback] = None,
        on_move: Optional[MoveCallback] = None,
    ) -> Outcome:
        """
        Play the game to the end.

        Loops through the players, asking each for a move and applying it,
        until someone wins or the board is full.

        Args:
            on_turn: Called with the game before each player is asked.
            on_move: Called with the player and location after each move.

        Returns:
            The final Outcome (a win or a tie).
        """
        outcome = self.game_over()
        while not outcome.is_over:
            if on_turn is not None:
                on_turn(self)

            player = self.next_player
            location = player.get_best_move(self)
            self.play(location)

            if on_move is not None:
                on_move(player, location)

            self.advance_player_index()
            outcome = self.game_over()

        logger.info("Game over: %s", outcome)
        return outcome

    def play(self, location: int) -> None:
        """
        Place the next player's mark at location on the official board.

        Any speculative moves are thrown away first.

        Raises:
            OutOfRangeError: If location is not on the board.
            StateConflictError: If location is already taken.
        """
        self.undo()
        mark = self.next_player.mark
        self._board.set(location, mark)
        logger.debug("%s plays at %d", mark, location)

    def advance_player_index(self) -> None:
        """Move the turn to the next player."""
        self.next_player_index = (self.next_player_index + 1) % len(self.players)

    # ==================== BOARD ACCESS ====================

    @property
    def dimension(self) -> int:
        return self._board.dimension

    def official_board(self) -> ReadOnlyBoard:
        """Snapshot of the official board, ignoring any speculative moves."""
        return ReadOnlyBoard(self._board)

    def winning_line(self) -> Optional[List[int]]:
        """Cell indices of the winning line on the active board, if any."""
        return self.win_checker.get_winning_line(self._active_board())

    def _active_board(self) -> Board:
        """The speculative board when one is in use, else the official board."""
        if self._speculative_board is not None:
            return self._speculative_board
        return self._board
