"""Legal move generation with mandatory, maximal capture chains.

Every piece jumps in all four diagonal directions; only plain steps are
restricted to forward directions for men. If any piece of the side to move
can capture, only captures are legal for that side.
"""

from __future__ import annotations

from typing import FrozenSet, List, Tuple

from .board import Board, Piece, Position, Side, is_king, owned_by, side_of
from .move import Move

ALL_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
STEP_DIRECTIONS = {
    Piece.WHITE_MAN: ((-1, -1), (-1, 1)),
    Piece.BLACK_MAN: ((1, -1), (1, 1)),
}

# (captured squares in chain order, final landing square)
CaptureSequence = Tuple[Tuple[Position, ...], Position]


def legal_moves(board: Board, side: Side) -> List[Move]:
    """All legal moves for `side`, in deterministic generation order.

    An empty list means `side` has lost.
    """
    captures = []
    steps = []
    for pos, _piece in board.pieces(side):
        for move in piece_moves(board, pos):
            if move.is_capture:
                captures.append(move)
            else:
                steps.append(move)
    return captures if captures else steps


def piece_moves(board: Board, pos: Position) -> List[Move]:
    """Moves for the piece on `pos`, ignoring the other pieces' captures.

    Returns the piece's maximal capture chains if it has any, otherwise
    its simple steps.
    """
    pos = Position(*pos)
    if not pos.on_board():
        raise ValueError(f"Position off board: {pos}")
    piece = board.piece_at(pos)
    if piece == Piece.EMPTY:
        raise ValueError(f"No piece on {pos}")

    sequences = _capture_sequences(board, pos, (), frozenset())
    if sequences:
        return [Move(pos, landing, captured) for captured, landing in sequences]
    return _simple_moves(board, pos, piece)


def _simple_moves(board: Board, pos: Position, piece: Piece) -> List[Move]:
    directions = ALL_DIRECTIONS if is_king(piece) else STEP_DIRECTIONS[piece]
    moves = []
    for dr, dc in directions:
        target = Position(pos.row + dr, pos.col + dc)
        if target.on_board() and board.piece_at(target) == Piece.EMPTY:
            moves.append(Move(pos, target))
    return moves


def _capture_sequences(
    board: Board,
    pos: Position,
    path: Tuple[Position, ...],
    taken: FrozenSet[Position],
) -> List[CaptureSequence]:
    """Extend a jump chain from `pos` as far as it goes along every branch.

    `board` already has the moving piece on `pos` and previously jumped
    pieces removed; `taken` excludes them explicitly as well.
    """
    piece = board.piece_at(pos)
    opponent = side_of(piece).opponent
    sequences: List[CaptureSequence] = []

    for dr, dc in ALL_DIRECTIONS:
        over = Position(pos.row + dr, pos.col + dc)
        landing = Position(pos.row + 2 * dr, pos.col + 2 * dc)
        if not landing.on_board():
            continue
        if over in taken or not owned_by(board.piece_at(over), opponent):
            continue
        if board.piece_at(landing) != Piece.EMPTY:
            continue

        after = board.with_changes({
            pos: Piece.EMPTY,
            over: Piece.EMPTY,
            landing: piece,
        })
        chain = path + (over,)
        further = _capture_sequences(after, landing, chain, taken | {over})
        if further:
            sequences.extend(further)
        else:
            sequences.append((chain, landing))

    return sequences
