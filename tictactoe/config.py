"""
Game configuration for TicTacToe.
Board size, default marks, AI tuning and display settings.

Most values can be overridden from the environment, e.g.:

    TICTACTOE_DIMENSION=4 TICTACTOE_LOG_LEVEL=DEBUG tic-tac-toe
"""

import os


def _env(name: str, default: str = "") -> str:
    """Read an environment variable, falling back to default when unset or blank."""
    value = os.getenv(name)
    if value is not None and value.strip() != "":
        return value.strip()
    return default


class GameConfig:
    """
    Configuration class for game settings.
    Change these values (or the matching TICTACTOE_* variables) to taste!
    """

    # ==================== BOARD SETTINGS ====================
    # Length of one side of the board. 3 is the classic game.
    DIMENSION = int(_env("TICTACTOE_DIMENSION", "3"))

    # ==================== PLAYER SETTINGS ====================
    P1_MARK = _env("TICTACTOE_P1_MARK", "X")
    P2_MARK = _env("TICTACTOE_P2_MARK", "O")

    # CPU difficulty: 1 = easy (random), 2 = medium (heuristics), 3 = hard (minimax)
    DIFFICULTY_LEVELS = (1, 2, 3)
    DEFAULT_DIFFICULTY = 2

    # ==================== AI SETTINGS ====================
    # Score for a win found by minimax. The search depth is subtracted from
    # it so faster wins (and slower losses) score better.
    WIN_SCORE = 100

    # Largest board on which the hard CPU runs a full minimax search.
    # Bigger boards fall back to the heuristic strategies.
    MINIMAX_MAX_DIMENSION = 3

    # Prune the minimax tree with alpha-beta bounds. Does not change the
    # chosen move, only how many positions are evaluated.
    USE_ALPHA_BETA = _env("TICTACTOE_ALPHA_BETA", "1") not in ("0", "false", "no")

    # ==================== DISPLAY SETTINGS ====================
    BOARD_COLUMN_SEPARATOR = " │ "
    BOARD_ROW_SEPARATOR = "─"
    BOARD_INTERSECT = "─┼─"
    BANNER_WIDTH = 21

    # ==================== LOGGING SETTINGS ====================
    # Kept at WARNING by default so log lines don't interleave with prompts.
    LOG_LEVEL = _env("TICTACTOE_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    LOG_FILE = _env("TICTACTOE_LOG_FILE", "")
    LOG_MAX_MB = int(_env("TICTACTOE_LOG_MAX_MB", "5"))
    LOG_BACKUP_COUNT = int(_env("TICTACTOE_LOG_BACKUP_COUNT", "3"))

    @classmethod
    def center_index(cls, dimension: int) -> int:
        """
        Get the index of the center cell.

        Only exact for odd dimensions. On even boards this is the first cell
        of the lower half, just right of the middle.
        """
        return (dimension * dimension) // 2
