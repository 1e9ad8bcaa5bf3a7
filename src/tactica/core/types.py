"""Square type alias and coordinate helpers.

Board layout follows the row-major order of the placement text, top row
first (as rendered for White):
    a8=0, b8=1, ..., h8=7
    a7=8, b7=9, ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

"Rank" below always means the grid row (0 = textual rank 8), never the
textual rank digit.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


class InvalidSquareError(ValueError):
    """Raised when square text is outside the ``a1``–``h8`` grammar."""


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Grid rank 0–7, where 0 is the top row (textual rank 8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and grid rank (0–7)."""
    return rank * 8 + file


def on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    return FILE_NAMES[file_of(sq)] + str(8 - rank_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 36."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in FILE_NAMES
        or name[1] not in RANK_NAMES
    ):
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return make_square(FILE_NAMES.index(name[0]), 8 - int(name[1]))


def to_square(value: Square | str) -> Square:
    """Accept either a square index or its text form."""
    if isinstance(value, str):
        return parse_square(value)
    return value


def is_light_square(sq: Square) -> bool:
    """Whether *sq* is a light square (a8 and h1 are light)."""
    return (rank_of(sq) + file_of(sq)) % 2 == 0


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
