"""
Logging setup for the TicTacToe console game.

Log lines go to stderr (and optionally a rotating file) so they never
mix with the board and prompts printed on stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from tictactoe.config import GameConfig


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name. Defaults to GameConfig.LOG_LEVEL.
        log_file: Also log to this file, rotated by size. Defaults to
            GameConfig.LOG_FILE; empty means no file.
    """
    log_level = (level or GameConfig.LOG_LEVEL or "WARNING").upper()
    log_file = log_file if log_file is not None else GameConfig.LOG_FILE

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    fmt = logging.Formatter(GameConfig.LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=GameConfig.LOG_MAX_MB * 1024 * 1024,
            backupCount=GameConfig.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
