"""Core engine components: board, move generation, rules, evaluator and search."""

from .board import Board, Piece, Position, Side, initial_board, is_king, owned_by
from .evaluator import Evaluator
from .move import Move
from .movegen import legal_moves, piece_moves
from .rules import apply_move, winner
from .search import SearchEngine, SearchResult
