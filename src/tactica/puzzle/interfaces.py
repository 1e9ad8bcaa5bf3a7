"""Puzzle-session state machine states and move verdicts."""

from __future__ import annotations

from enum import IntEnum, auto


class PuzzlePhase(IntEnum):
    """Finite-state-machine states for one puzzle attempt.

    ``AWAITING_OPPONENT_SETUP`` → ``PLAYER_TO_MOVE`` → ``SOLVED`` | ``FAILED``,
    with ``AWAITING_OPPONENT_REPLY`` between player moves when the
    opponent's replies are not played automatically.
    """

    NOT_STARTED = auto()
    AWAITING_OPPONENT_SETUP = auto()
    PLAYER_TO_MOVE = auto()
    AWAITING_OPPONENT_REPLY = auto()
    SOLVED = auto()
    FAILED = auto()

    @property
    def is_finished(self) -> bool:
        return self in (PuzzlePhase.SOLVED, PuzzlePhase.FAILED)


class MoveVerdict(IntEnum):
    """Outcome of submitting a move to a session."""

    CORRECT = auto()
    SOLVED = auto()  # correct, and it was the final solution move
    INCORRECT = auto()
    IGNORED = auto()  # session was not waiting for a player move
    ILLEGAL = auto()  # not a legal move for the player; nothing applied
