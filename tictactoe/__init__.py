"""
TicTacToe game engine.
Board, rules, speculative moves, and human and CPU players.
"""

from .errors import (
    TicTacToeError,
    OutOfRangeError,
    StateConflictError,
    CapabilityDeniedError,
    LogicError,
)
from .config import GameConfig
from .board import Board, ReadOnlyBoard
from .win_checker import WinChecker, Outcome, GameStatus, ONGOING, TIE
from .interfaces import TryMoves
from .players import Player, HumanPlayer
from .ai_player import CpuPlayer, Difficulty
from .game import Game
from .move_validator import MoveValidator, ValidationResult

__version__ = "1.0.0"
