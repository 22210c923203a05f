import logging
from typing import List, Optional, Tuple

from checkers.config import CONFIG
from checkers.core.board import Board, Side, initial_board
from checkers.core.evaluator import Evaluator
from checkers.core.move import Move, parse_notation
from checkers.core.movegen import legal_moves
from checkers.core.rules import apply_move, winner
from checkers.core.search import SearchEngine

logger = logging.getLogger(__name__)


class Engine:
    """Current game: board, side to move and the computer opponent."""

    def __init__(self, depth=None):
        self.board = initial_board()
        self.turn = Side.WHITE
        self.search = SearchEngine(Evaluator())
        self.set_depth(CONFIG.search.depth if depth is None else depth)

    def set_depth(self, depth: int):
        lo, hi = CONFIG.search.min_depth, CONFIG.search.max_depth
        if not lo <= depth <= hi:
            raise ValueError(f"Depth must be in [{lo}, {hi}], got {depth}")
        self.search.max_depth = depth

    def reset(self):
        self.board = initial_board()
        self.turn = Side.WHITE

    def set_position(self, layout: str, turn: Side = Side.WHITE):
        self.board = Board.from_layout(layout)
        self.turn = Side(turn)

    def get_legal_moves(self) -> List[str]:
        return [m.notation() for m in legal_moves(self.board, self.turn)]

    def find_move(self, move_str: str) -> Optional[Move]:
        """First legal move matching the notation's origin and destination."""
        try:
            start, end = parse_notation(move_str)
        except ValueError:
            return None
        for move in legal_moves(self.board, self.turn):
            if move.from_square == start and move.to_square == end:
                return move
        return None

    def make_move(self, move_str: str) -> bool:
        """Play a move for the side to move. Returns True if it was legal."""
        move = self.find_move(move_str)
        if move is None:
            logger.info("Rejected move %r for %s", move_str, self.turn.value)
            return False
        self.push(move)
        return True

    def push(self, move: Move):
        self.board = apply_move(self.board, move)
        self.turn = self.turn.opponent
        won = self.winner()
        if won is not None:
            logger.info("Game over: %s wins", won.value)

    def get_best_move(self) -> Tuple[Optional[str], int]:
        result = self.search.search_best_move(self.board, self.turn)
        return (result.move.notation() if result.move else None), result.score

    def play_engine_move(self) -> Optional[Move]:
        result = self.search.search_best_move(self.board, self.turn)
        if result.move is not None:
            self.push(result.move)
        return result.move

    def winner(self) -> Optional[Side]:
        return winner(self.board, self.turn)

    def is_game_over(self) -> bool:
        return self.winner() is not None

    def print_board(self):
        print(self.board)
