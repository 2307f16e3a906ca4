"""
Shared fixtures for the TicTacToe tests.
"""

from typing import List, Optional

import pytest

from tictactoe.ai_player import CpuPlayer
from tictactoe.board import Board
from tictactoe.game import Game


def build_game(
    cells: List[Optional[str]],
    mover: str = "X",
    opponent: str = "O",
    difficulty: int = 3,
) -> Game:
    """
    Build a game from a flat board, with mover's turn next.

    Both players are CPUs of the given difficulty; the mover is players[0].
    """
    board = Board.from_list(cells)
    return Game(
        CpuPlayer(mover, difficulty=difficulty),
        CpuPlayer(opponent, difficulty=difficulty),
        board=board,
    )


@pytest.fixture
def empty_game() -> Game:
    """A fresh 3x3 game between two hard CPUs, X to move."""
    return build_game([None] * 9)


@pytest.fixture
def make_game():
    """Factory fixture: make_game(cells, mover="X", opponent="O", difficulty=3)."""
    return build_game
