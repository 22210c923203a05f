"""Immutable 8x8 checkers board, piece kinds and side ownership."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, NamedTuple, Optional, Tuple

BOARD_SIZE = 8


class Piece(IntEnum):
    EMPTY = 0
    WHITE_MAN = 1
    BLACK_MAN = 2
    WHITE_KING = 3
    BLACK_KING = 4


class Side(str, Enum):
    WHITE = "WHITE"
    BLACK = "BLACK"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE


class Position(NamedTuple):
    row: int
    col: int

    def on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def is_dark(self) -> bool:
        return (self.row + self.col) % 2 == 1


# layout characters, row 0 first
_SYMBOLS = {
    Piece.EMPTY: ".",
    Piece.WHITE_MAN: "w",
    Piece.WHITE_KING: "W",
    Piece.BLACK_MAN: "b",
    Piece.BLACK_KING: "B",
}
_PIECES = {sym: piece for piece, sym in _SYMBOLS.items()}


def is_king(piece: Piece) -> bool:
    return piece in (Piece.WHITE_KING, Piece.BLACK_KING)


def owned_by(piece: Piece, side: Side) -> bool:
    """True if `piece` (man or king) belongs to `side`."""
    if side is Side.WHITE:
        return piece in (Piece.WHITE_MAN, Piece.WHITE_KING)
    return piece in (Piece.BLACK_MAN, Piece.BLACK_KING)


def side_of(piece: Piece) -> Optional[Side]:
    """Owning side of a piece, None for an empty square."""
    if owned_by(piece, Side.WHITE):
        return Side.WHITE
    if owned_by(piece, Side.BLACK):
        return Side.BLACK
    return None


@dataclass(frozen=True)
class Board:
    """Row-major grid of pieces. Every change produces a new Board."""

    squares: Tuple[Tuple[Piece, ...], ...]

    def piece_at(self, pos: Position) -> Piece:
        return self.squares[pos[0]][pos[1]]

    def pieces(self, side: Side) -> Iterator[Tuple[Position, Piece]]:
        """Yield (position, piece) for `side`, row-major then column order."""
        for r, row in enumerate(self.squares):
            for c, piece in enumerate(row):
                if owned_by(piece, side):
                    yield Position(r, c), piece

    def count(self, piece: Piece) -> int:
        return sum(row.count(piece) for row in self.squares)

    def with_changes(self, changes: Dict[Position, Piece]) -> "Board":
        """Return a copy with the given squares replaced."""
        rows = [list(row) for row in self.squares]
        for (r, c), piece in changes.items():
            rows[r][c] = piece
        return Board(tuple(tuple(row) for row in rows))

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple((Piece.EMPTY,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def from_layout(cls, layout: str) -> "Board":
        """Parse 8 '/'-separated rows of '.', 'w', 'W', 'b', 'B'."""
        rows = layout.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        grid = []
        for r, text in enumerate(rows):
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Row {r} must have {BOARD_SIZE} squares: {text!r}")
            row = []
            for c, ch in enumerate(text):
                if ch not in _PIECES:
                    raise ValueError(f"Unknown square symbol {ch!r} at ({r},{c})")
                piece = _PIECES[ch]
                if piece != Piece.EMPTY and not Position(r, c).is_dark():
                    raise ValueError(f"Piece on light square ({r},{c})")
                row.append(piece)
            grid.append(tuple(row))
        return cls(tuple(grid))

    def layout(self) -> str:
        return "/".join("".join(_SYMBOLS[p] for p in row) for row in self.squares)

    def __str__(self) -> str:
        lines = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for r, row in enumerate(self.squares):
            lines.append(f"{r} " + " ".join(_SYMBOLS[p] for p in row))
        return "\n".join(lines)


def initial_board() -> Board:
    """Black men on the dark squares of rows 0-2, White men on rows 5-7."""
    changes = {}
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            pos = Position(r, c)
            if not pos.is_dark():
                continue
            if r < 3:
                changes[pos] = Piece.BLACK_MAN
            elif r >= BOARD_SIZE - 3:
                changes[pos] = Piece.WHITE_MAN
    return Board.empty().with_changes(changes)
