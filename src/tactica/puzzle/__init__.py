"""Puzzle layer: records, the phase state machine and the solving session.

Quick start::

    from tactica.puzzle import Puzzle, PuzzleSession

    puzzle = Puzzle.from_record({"FEN": fen, "Moves": "e8e7 d1d7"})
    session = PuzzleSession(puzzle)
    session.start()
    session.play_opponent_move()
    session.submit_move("d1", "d7")

The Qt adapter lives in :mod:`tactica.puzzle.qt_bridge` and is imported
explicitly so the rest of the package works without a Qt installation.
"""

from tactica.puzzle.config import SessionOptions
from tactica.puzzle.interfaces import MoveVerdict, PuzzlePhase
from tactica.puzzle.models import InvalidPuzzleError, Puzzle
from tactica.puzzle.session import PuzzleSession, SessionEvents

__all__ = [
    "InvalidPuzzleError",
    "MoveVerdict",
    "Puzzle",
    "PuzzlePhase",
    "PuzzleSession",
    "SessionEvents",
    "SessionOptions",
]
