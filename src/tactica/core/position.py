"""Position: board, side to move and opaque trailing fields."""

from __future__ import annotations

import logging

from tactica.core.board import Board
from tactica.core.enums import Color
from tactica.core.move import Move
from tactica.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)


class Position:
    """Game state at one ply.

    Castling rights, en-passant target and move counters are not modelled;
    they travel as ``trailing`` text and are echoed back unchanged when the
    position is encoded again.  Positions are treated as values: operations
    such as :meth:`with_move` return a new instance.
    """

    __slots__ = ("board", "side_to_move", "trailing")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        trailing: str | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.trailing = trailing

    # ── Move application ─────────────────────────────────────────────────

    def with_move(self, from_sq: Square, to_sq: Square) -> Position:
        """Successor position after relocating the piece on *from_sq*.

        No legality check is made.  Whatever stands on *to_sq* is removed
        and the side to move flips.
        """
        board = self.board.copy()
        if board.is_empty(from_sq):
            _LOGGER.warning(
                "Applying move %s%s from an empty square",
                square_name(from_sq),
                square_name(to_sq),
            )
        board.move_piece(from_sq, to_sq)
        return Position(board, self.side_to_move.opposite, self.trailing)

    def describe_move(self, from_sq: Square, to_sq: Square) -> Move:
        """Build a :class:`Move` carrying the mover and any captured piece."""
        return Move(from_sq, to_sq, self.board[from_sq], self.board[to_sq])

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(self.board.copy(), self.side_to_move, self.trailing)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.trailing == other.trailing
        )

    def __repr__(self) -> str:
        return (
            f"Position(side_to_move={self.side_to_move}, "
            f"trailing={self.trailing!r})\n{self.board!r}"
        )
