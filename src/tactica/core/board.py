"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from tactica.core.enums import Color, PieceType
from tactica.core.piece import Piece
from tactica.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    Engine operations never mutate a caller's board: they work on a
    :meth:`copy` and hand back a new object.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a8 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if there is none."""
        king = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == king:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate whatever stands on *from_sq*; return what was on *to_sq*."""
        captured = self._squares[to_sq]
        self._squares[to_sq] = self._squares[from_sq]
        self._squares[from_sq] = None
        return captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.WHITE, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.BLACK, pt)
            b[make_square(f, 7)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{8 - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
