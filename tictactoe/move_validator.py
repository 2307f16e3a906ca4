"""
Move validator for TicTacToe.
Checks moves typed in by a human before they reach the game.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    location: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The answer must be a whole number
    2. It must be a cell on the board
    3. The cell must be empty
    """

    OPEN_SQUARE_MESSAGE = "Please select an open square."

    def validate_move(self, board: Board, location: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            location: Cell the player wants to mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not board.exists(location):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {location}. Must be 0-{len(board) - 1}.",
            )

        if location not in board.available():
            return ValidationResult(
                is_valid=False,
                error_message=f"{self.OPEN_SQUARE_MESSAGE} Cell {location} is taken by {board[location]}.",
            )

        # All checks passed!
        return ValidationResult(is_valid=True, location=location)

    def validate_input(self, board: Board, answer: str) -> ValidationResult:
        """
        Validate a raw answer typed at the prompt.

        Returns:
            ValidationResult; on success, location holds the parsed index.
        """
        try:
            location = int(str(answer).strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"{self.OPEN_SQUARE_MESSAGE} `{answer}` is not a number.",
            )

        return self.validate_move(board, location)
