import logging
import time
from dataclasses import dataclass
from typing import Optional

from checkers.config import CONFIG
from checkers.core.board import Board, Side
from checkers.core.evaluator import Evaluator
from checkers.core.move import Move
from checkers.core.movegen import legal_moves
from checkers.core.rules import apply_move
from checkers.core.utils import format_info

logger = logging.getLogger(__name__)

# Score of a side with no legal move; also the initial alpha-beta window.
INF = 1000000


@dataclass(frozen=True)
class SearchResult:
    score: int
    move: Optional[Move] = None


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 alpha_beta: Optional[bool] = None):
        """
        evaluator.evaluate(board) must return an int, positive if White is better.
        depth = search depth in plies. alpha_beta=False searches full width.
        """
        self.evaluator = evaluator or Evaluator()
        self.max_depth = CONFIG.search.depth if depth is None else depth
        self.alpha_beta = CONFIG.search.alpha_beta if alpha_beta is None else alpha_beta
        self.nodes = 0

    # Public API
    def search_best_move(self, board: Board, side: Side, depth: Optional[int] = None) -> SearchResult:
        """Best move for `side` to play; White maximizes, Black minimizes."""
        target_depth = self.max_depth if depth is None else depth
        return self.best_move(board, target_depth, side, maximizing=side is Side.WHITE)

    def best_move(self, board: Board, depth: int, side: Side = Side.BLACK,
                  maximizing: bool = False) -> SearchResult:
        """
        Minimax to a fixed depth. `maximizing` must be True exactly when
        `side` is White. A result without a move means `side` cannot move
        (or depth <= 0).
        """
        if maximizing != (side is Side.WHITE):
            raise ValueError(f"maximizing={maximizing} is inconsistent with side {side.value}")

        self.nodes = 0
        start_time = time.time()
        result = self._minimax(board, depth, -INF, INF, maximizing, side)
        elapsed = time.time() - start_time
        logger.info(format_info(depth, result.score, self.nodes, elapsed, result.move, INF))
        return result

    # -------------------------
    # Core minimax (alpha-beta)
    # -------------------------
    def _minimax(self, board: Board, depth: int, alpha: int, beta: int,
                 maximizing: bool, side: Side) -> SearchResult:
        self.nodes += 1
        if depth <= 0:
            return SearchResult(self.evaluator.evaluate(board))

        moves = legal_moves(board, side)
        if not moves:
            return SearchResult(-INF if maximizing else INF)

        best_score = None
        best_move = None
        for move in moves:
            child = self._minimax(apply_move(board, move), depth - 1, alpha, beta,
                                  not maximizing, side.opponent)
            score = child.score

            # first move reaching the best score is kept
            if maximizing:
                if best_move is None or score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
            else:
                if best_move is None or score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)

            if self.alpha_beta and beta <= alpha:
                break

        return SearchResult(best_score, best_move)
