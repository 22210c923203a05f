"""Move record and its text notation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from .board import Position


def parse_square(text: str) -> Position:
    """Parse a two-digit 'rc' square such as '52'."""
    text = text.strip()
    if len(text) != 2 or not text.isdigit():
        raise ValueError(f"Invalid square: {text!r}")
    pos = Position(int(text[0]), int(text[1]))
    if not pos.on_board():
        raise ValueError(f"Square off board: {text!r}")
    return pos


def square_name(pos: Position) -> str:
    return f"{pos[0]}{pos[1]}"


@dataclass(frozen=True)
class Move:
    """A full move. `captured` lists jumped squares in chain order."""

    from_square: Position
    to_square: Position
    captured: Tuple[Position, ...] = ()

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    def notation(self) -> str:
        """'52-43' for a step, '54x10' for a capture (origin and final landing)."""
        sep = "x" if self.is_capture else "-"
        return f"{square_name(self.from_square)}{sep}{square_name(self.to_square)}"

    def __str__(self) -> str:
        return self.notation()


def parse_notation(text: str) -> Tuple[Position, Position]:
    """Split '52-43', '54x32' or '54x32x10' into (from, to).

    Separators are interchangeable; intermediate landings are ignored.
    """
    parts = re.split(r"[-x]", text.strip().lower())
    if len(parts) < 2:
        raise ValueError(f"Invalid move notation: {text!r}")
    return parse_square(parts[0]), parse_square(parts[-1])
