"""FEN parsing and serialization.

Decoding never raises: malformed placement text yields a partially or
entirely empty board.
"""

from __future__ import annotations

import logging

from tactica.core.board import Board
from tactica.core.enums import Color
from tactica.core.piece import Piece
from tactica.core.position import Position
from tactica.core.types import make_square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
DEFAULT_TRAILING_FIELDS = "- - 0 1"


def position_from_fen(fen: str) -> Position:
    """Parse *fen* into a :class:`Position`; never raises."""
    board = Board()
    if not isinstance(fen, str):
        return Position(board, Color.WHITE, None)

    parts = fen.split()
    if not parts:
        return Position(board, Color.WHITE, None)

    # 1. Piece placement
    for rank, rank_text in enumerate(parts[0].split("/")[:8]):
        file = 0
        for ch in rank_text:
            if file >= 8:
                break
            if ch in "12345678":
                file += int(ch)
            elif Piece.is_piece_char(ch):
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            else:
                # Unknown characters still consume a file and leave it empty.
                _LOGGER.debug("Skipping unknown placement character %r in %r", ch, fen)
                file += 1

    # 2. Side to move
    side = Color.BLACK if len(parts) > 1 and parts[1] == "b" else Color.WHITE

    # 3. Castling / en passant / clocks travel untouched
    trailing = " ".join(parts[2:]) or None

    return Position(board, side, trailing)


def placement_from_board(board: Board) -> str:
    """Placement field of *board*, top rank first."""
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_to_fen(
    pos: Position,
    trailing: str | None = None,
    *,
    flip_side: bool = True,
) -> str:
    """Serialise *pos* as the text of the position that follows it.

    The side-to-move letter is the opposite of ``pos.side_to_move`` unless
    *flip_side* is false.  Trailing fields come from *trailing*, then
    ``pos.trailing``, then :data:`DEFAULT_TRAILING_FIELDS`.
    """
    side = pos.side_to_move.opposite if flip_side else pos.side_to_move
    tail = trailing or pos.trailing or DEFAULT_TRAILING_FIELDS
    return f"{placement_from_board(pos.board)} {side.fen_char} {tail}"
