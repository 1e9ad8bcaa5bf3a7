"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from tactica.core import Rules, STARTING_FEN

    Rules.legal_destination_names(STARTING_FEN, "e2")   # {"e3", "e4"}
    fen = Rules.apply_move(STARTING_FEN, "e2", "e4")    # "... b KQkq - 0 1"
"""

from tactica.core.board import Board
from tactica.core.enums import Color, PieceType
from tactica.core.move import Move
from tactica.core.move_generator import MoveGenerator, is_square_attacked
from tactica.core.notation import (
    DEFAULT_TRAILING_FIELDS,
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)
from tactica.core.piece import Piece
from tactica.core.position import Position
from tactica.core.rules import Rules
from tactica.core.types import (
    InvalidSquareError,
    Square,
    file_of,
    is_light_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "InvalidSquareError",
    "Square",
    "file_of",
    "is_light_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    "is_square_attacked",
    # Notation
    "DEFAULT_TRAILING_FIELDS",
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
