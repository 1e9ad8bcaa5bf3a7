"""Move value object (compact from/to text representation)."""

from __future__ import annotations

from dataclasses import dataclass, field

from tactica.core.piece import Piece
from tactica.core.types import InvalidSquareError, Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Transient (origin, destination) pair passed between engine calls.

    ``piece`` and ``captured`` are display extras and take no part in
    equality, so a move parsed from solution text equals the same move
    produced by the generator.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece | None = field(default=None, compare=False)
    captured: Piece | None = field(default=None, compare=False)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """Compact text form, e.g. ``e2e4``."""
        return str(self)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``e2e4``; a trailing promotion letter is ignored."""
        text = text.strip()
        if len(text) < 4:
            raise InvalidSquareError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:4]))
