"""
CPU player for TicTacToe.

Chooses moves by running an ordered chain of strategies, picked by
difficulty, and playing the first move any of them suggests:

    EASY    random guess
    MEDIUM  win, block, take the center, else random guess
    HARD    minimax (negamax with alpha-beta pruning); on boards too big
            to search, a chain of classic perfect-play heuristics

Every strategy leaves the game exactly as it found it: any attempt() it
makes is undone before it returns.

See https://en.wikipedia.org/wiki/Tic-tac-toe#Strategy
"""

import logging
import math
import random
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

from .board import Board
from .config import GameConfig
from .errors import LogicError, OutOfRangeError
from .interfaces import TryMoves
from .players import Player
from .win_checker import Outcome

logger = logging.getLogger(__name__)

# A strategy returns a board index, or None if it has no opinion
Strategy = Callable[[TryMoves], Optional[int]]


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Some strategy
    HARD = 3      # Full minimax


class CpuPlayer(Player):
    """
    A computer-controlled player.

    On a 3x3 board the HARD level plays perfectly: it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        mark: str,
        difficulty: Union[int, Difficulty] = GameConfig.DEFAULT_DIFFICULTY,
        use_alpha_beta: bool = GameConfig.USE_ALPHA_BETA,
    ):
        """
        Initialize the CPU player.

        Args:
            mark: The string that will represent this player on the board.
            difficulty: 1 (easy), 2 (medium) or 3 (hard).
            use_alpha_beta: Prune the minimax search. Never changes the
                chosen move, only how much work it takes to find it.
        """
        super().__init__(mark)
        self.difficulty = Difficulty.MEDIUM
        self.use_alpha_beta = use_alpha_beta
        self.set_difficulty(difficulty)

        # Keep track of how many positions minimax evaluated (for debugging)
        self.moves_evaluated = 0

    def set_difficulty(self, level: Union[int, Difficulty]) -> "CpuPlayer":
        """
        Set the difficulty level. Returns self.

        Raises:
            OutOfRangeError: If level is not 1, 2 or 3.
        """
        if isinstance(level, Difficulty):
            self.difficulty = level
            return self

        message = (
            f"Difficulty must be one of {list(GameConfig.DIFFICULTY_LEVELS)}. "
            f"Received `{level!r}`."
        )
        # True and 2.0 compare equal to enum values
        if isinstance(level, bool) or not isinstance(level, int):
            raise OutOfRangeError(message)

        try:
            self.difficulty = Difficulty(level)
        except ValueError:
            raise OutOfRangeError(message) from None

        return self

    def get_best_move(self, game: TryMoves) -> int:
        """
        Run the strategy chain for the current difficulty.

        Returns:
            The first move any strategy suggests.

        Raises:
            LogicError: If no strategy produced a move.
        """
        for strategy in self.move_set():
            move = strategy(game)
            if move is not None:
                logger.debug("%s chose %d via %s", self.mark, move, strategy.__name__)
                return move

        raise LogicError(
            f"CpuPlayer difficulty `{self.difficulty.value}` resulted in no possible moves."
        )

    def move_set(self) -> List[Strategy]:
        """
        The strategies to try, in order, for the current difficulty.
        """
        if self.difficulty is Difficulty.EASY:
            return [self.random_guess]

        if self.difficulty is Difficulty.MEDIUM:
            return [
                self.win_if_possible,
                self.block_if_necessary,
                self.center_if_available,
                self.random_guess,
            ]

        # No random_guess here: a gap in this chain should raise LogicError,
        # not be papered over.
        return [
            self.minimax_or_heuristic,
            self.win_if_possible,
            self.block_if_necessary,
            self.create_fork,
            self.block_fork_potential,
            self.create_two_in_a_row,
            self.corner_opening,
            self.center_if_available,
            self.opposite_corner,
            self.empty_corner,
            self.empty_side,
            self.most_open_lines,
        ]

    # ======================================================================
    # Strategies. Each takes the game and returns a board index, or None to
    # let the next strategy in the chain decide.
    # ======================================================================

    def minimax_or_heuristic(self, game: TryMoves) -> Optional[int]:
        """
        Brute-force with minimax on small boards. On larger boards return
        None so the heuristic strategies after this one take over.
        """
        if game.get_board().dimension <= GameConfig.MINIMAX_MAX_DIMENSION:
            return self.minimax(game)
        return None

    def random_guess(self, game: TryMoves) -> Optional[int]:
        """Pick any open cell. The usual last resort."""
        available = game.get_board().available()
        if not available:
            return None
        return random.choice(available)

    def win_if_possible(self, game: TryMoves) -> Optional[int]:
        """If a cell wins the game for this player right now, take it."""
        for open_space in game.get_board().available():
            game.attempt(open_space, self.mark)
            outcome = game.game_over()
            game.undo()
            if outcome.winner == self.mark:
                return open_space

        return None

    def block_if_necessary(self, game: TryMoves) -> Optional[int]:
        """If a cell would end the game for the opponent, take it first."""
        opponent_mark = game.get_opponent().mark
        for open_space in game.get_board().available():
            game.attempt(open_space, opponent_mark)
            outcome = game.game_over()
            game.undo()
            if outcome.is_over:
                return open_space

        return None

    def create_fork(self, game: TryMoves) -> Optional[int]:
        """Play where this player gets two ways to win on the next move."""
        return self._fork_helper(game, self.mark)

    def block_fork_potential(self, game: TryMoves) -> Optional[int]:
        """Take the cell where the opponent could create a fork."""
        return self._fork_helper(game, game.get_opponent().mark)

    def create_two_in_a_row(self, game: TryMoves) -> Optional[int]:
        """Extend the most lines that already hold only our marks."""
        candidates = self.find_candidate_spots(game, self.mark)
        if candidates:
            return candidates[0][0]
        return None

    def corner_opening(self, game: TryMoves) -> Optional[int]:
        """
        Open in a corner. Against imperfect players this leaves more room
        for mistakes than opening in the center.
        """
        board = game.get_board()
        if len(board.available()) == len(board):
            return board.corners()[0]
        return None

    def center_if_available(self, game: TryMoves) -> Optional[int]:
        """Take the center cell if it is open."""
        board = game.get_board()
        center = GameConfig.center_index(board.dimension)
        if center in board.available():
            return center
        return None

    def opposite_corner(self, game: TryMoves) -> Optional[int]:
        """If the opponent holds a corner, take the one opposite it."""
        board = game.get_board()
        corners = board.corners()
        available = board.available()
        opponent_mark = game.get_opponent().mark

        for i, corner in enumerate(corners):
            counterpart = corners[3 - i]
            if board[corner] == opponent_mark and counterpart in available:
                return counterpart

        return None

    def empty_corner(self, game: TryMoves) -> Optional[int]:
        """Take the first open corner."""
        board = game.get_board()
        available = board.available()
        for corner in board.corners():
            if corner in available:
                return corner
        return None

    def empty_side(self, game: TryMoves) -> Optional[int]:
        """Take the middle of any open edge (top, left, right, bottom)."""
        board = game.get_board()
        available = board.available()
        for edge in self._edge_middles(board):
            if edge in available:
                return edge
        return None

    def most_open_lines(self, game: TryMoves) -> Optional[int]:
        """
        Take the open cell on the most lines the opponent has not blocked.

        Only reached on boards too big for minimax, once the classic
        heuristics have nothing left to say.
        """
        board = game.get_board()
        opponent_mark = game.get_opponent().mark
        best_move = None
        best_count = -1

        for open_space in board.available():
            count = sum(
                1 for line in self._intersects(board, open_space)
                if opponent_mark not in line
            )
            if count > best_count:
                best_count = count
                best_move = open_space

        return best_move

    def minimax(self, game: TryMoves) -> int:
        """
        Search the whole game tree for the best move.

        Returns:
            The best open cell. Ties go to the lowest index.
        """
        self.moves_evaluated = 0
        opponent_mark = game.get_opponent().mark

        _, best_move = self._negamax(
            game,
            self.mark,
            opponent_mark,
            depth=0,
            alpha=-math.inf,
            beta=math.inf,
        )
        game.undo()

        logger.debug(
            "%s evaluated %d positions. Best move: %s",
            self.mark, self.moves_evaluated, best_move,
        )
        return best_move

    # ==================== HELPERS ====================

    def _negamax(
        self,
        game: TryMoves,
        mark: str,
        other_mark: str,
        depth: int,
        alpha: float,
        beta: float,
    ) -> Tuple[float, Optional[int]]:
        """
        Minimax in negamax form, with optional alpha-beta pruning.

        Scores are always from the point of view of mark, the side to move
        at this node; a child's score is negated on the way back up.

        Args:
            game: The game to search (speculative moves only).
            mark: Mark to play at this node.
            other_mark: Mark of the side that moves next.
            depth: Plies played since the root.
            alpha: Lower bound for pruning.
            beta: Upper bound for pruning.

        Returns:
            (score, best_move). best_move is None at terminal positions.
        """
        self.moves_evaluated += 1

        outcome = game.game_over()
        if outcome.is_over:
            return self._score(outcome, mark, depth), None

        best_score = -math.inf
        best_move = None

        for possible_move in game.get_board().available():
            game.attempt(possible_move, mark)
            child_score, _ = self._negamax(
                game, other_mark, mark, depth + 1, -beta, -alpha
            )
            game.undo(possible_move)

            score = -child_score
            if score > best_score:
                best_score = score
                best_move = possible_move

            if self.use_alpha_beta:
                alpha = max(alpha, score)
                if alpha >= beta:
                    break  # Prune

        return best_score, best_move

    def _score(self, outcome: Outcome, mark: str, depth: int) -> int:
        """
        Score a finished game for mark.

        Faster wins score higher and slower losses score less badly.
        """
        if outcome.winner is None:
            return 0  # Tie
        if outcome.winner == mark:
            return GameConfig.WIN_SCORE - depth
        return -(GameConfig.WIN_SCORE - depth)

    def _fork_helper(self, game: TryMoves, mark: str) -> Optional[int]:
        """
        Find a cell that sets up two winning threats at once for mark.
        """
        candidates = self.find_candidate_spots(game, mark)
        if candidates and candidates[0][1] > 1:
            return candidates[0][0]
        return None

    def find_candidate_spots(self, game: TryMoves, mark: str) -> List[Tuple[int, int]]:
        """
        Rank open cells by how many lines they would leave one move from
        a win for mark.

        Returns:
            (location, count) pairs, best first. Cells that help no line
            are left out; equal counts keep ascending index order.
        """
        candidates: Dict[int, int] = {}

        for possible_move in game.get_board().available():
            game.attempt(possible_move, mark)
            board = game.get_board()

            for line in self._intersects(board, possible_move):
                if self._two_in_a_row(line, mark):
                    candidates[possible_move] = candidates.get(possible_move, 0) + 1

            game.undo(possible_move)

        game.undo()
        return sorted(candidates.items(), key=lambda item: item[1], reverse=True)

    def _intersects(self, board: Board, location: int) -> List[List[Optional[str]]]:
        """
        The row, column and (if location is on one) diagonals through location.
        """
        d = board.dimension
        intersects = [
            board.row(location // d),
            board.column(location % d),
        ]

        for left in (True, False):
            diagonal = board.diagonal(left)
            if location in diagonal:
                intersects.append(list(diagonal.values()))

        return intersects

    def _two_in_a_row(self, line: List[Optional[str]], mark: str) -> bool:
        """True if line has exactly one empty cell and mark in all the others."""
        empty = sum(1 for cell in line if cell is None)
        own = sum(1 for cell in line if cell == mark)
        return empty == 1 and own == len(line) - 1

    def _edge_middles(self, board: Board) -> List[int]:
        """Middle cell of the top, left, right and bottom edges (1, 3, 5, 7 on 3x3)."""
        d = board.dimension
        half = d // 2
        return [
            half,
            half * d,
            half * d + d - 1,
            (d - 1) * d + half,
        ]
