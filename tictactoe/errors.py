"""
Errors raised by the TicTacToe rules engine and players.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class OutOfRangeError(TicTacToeError, IndexError):
    """A board index, board dimension or difficulty level is out of bounds."""


class StateConflictError(TicTacToeError, ValueError):
    """A mark was written to a cell that is already occupied."""


class CapabilityDeniedError(TicTacToeError, RuntimeError):
    """
    The caller is not allowed to do this.

    Raised when writing to a read-only board, or when a human player is
    asked for a move before anything was set up to ask them.
    """


class LogicError(TicTacToeError, RuntimeError):
    """A CPU player's strategy chain ran out without producing a move."""
