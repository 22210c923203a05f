"""Move application, promotion and the derived game-over check."""

from __future__ import annotations

from typing import Optional

from .board import BOARD_SIZE, Board, Piece, Side
from .move import Move
from .movegen import legal_moves


def promote(piece: Piece, row: int) -> Piece:
    """Crown a man that reached its far row; anything else is unchanged."""
    if piece == Piece.WHITE_MAN and row == 0:
        return Piece.WHITE_KING
    if piece == Piece.BLACK_MAN and row == BOARD_SIZE - 1:
        return Piece.BLACK_KING
    return piece


def apply_move(board: Board, move: Move) -> Board:
    """Return the board after `move`. The move is not re-validated."""
    piece = board.piece_at(move.from_square)
    changes = {move.from_square: Piece.EMPTY}
    for square in move.captured:
        changes[square] = Piece.EMPTY
    changes[move.to_square] = promote(piece, move.to_square[0])
    return board.with_changes(changes)


def winner(board: Board, to_move: Side) -> Optional[Side]:
    """The opponent of `to_move` if `to_move` has no legal move, else None."""
    if legal_moves(board, to_move):
        return None
    return to_move.opponent
