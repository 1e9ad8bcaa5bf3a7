"""Notation package: position text parsing and serialization."""

from tactica.core.notation.fen import (
    DEFAULT_TRAILING_FIELDS,
    STARTING_FEN,
    placement_from_board,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "DEFAULT_TRAILING_FIELDS",
    "STARTING_FEN",
    "placement_from_board",
    "position_from_fen",
    "position_to_fen",
]
