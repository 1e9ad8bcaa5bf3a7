"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from tactica.core.enums import Color, PieceType

# Lower-case placement letters; white uses the upper-case form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

_BY_LETTER: dict[str, tuple[Color, PieceType]] = {
    (letter.upper() if color == Color.WHITE else letter): (color, ptype)
    for ptype, letter in _LETTERS.items()
    for color in Color
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece; two pieces are equal when colour and type match."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Placement letter, upper-case for white."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a placement letter, e.g. ``'n'`` is a black knight."""
        if char not in _BY_LETTER:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(*_BY_LETTER[char])

    @staticmethod
    def is_piece_char(char: str) -> bool:
        return char in _BY_LETTER
