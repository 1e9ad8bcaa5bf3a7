"""Puzzle-session options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SessionOptions:
    """How a :class:`~tactica.puzzle.session.PuzzleSession` runs a puzzle.

    Args:
        opponent_moves_first: The first solution move belongs to the
            opponent and sets the puzzle up (Lichess puzzle dumps).
        auto_reply: After a correct player move, play the opponent's
            scripted reply straight away instead of waiting for
            :meth:`~tactica.puzzle.session.PuzzleSession.play_opponent_move`.
    """

    opponent_moves_first: bool = True
    auto_reply: bool = True
