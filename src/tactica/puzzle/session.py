"""PuzzleSession: plays one puzzle against its scripted solution.

Coordinates: Puzzle, Rules, the phase state machine.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tactica.core.enums import Color
from tactica.core.move import Move
from tactica.core.notation.fen import position_from_fen
from tactica.core.rules import Rules
from tactica.core.types import Square, to_square
from tactica.puzzle.config import SessionOptions
from tactica.puzzle.interfaces import MoveVerdict, PuzzlePhase
from tactica.puzzle.models import InvalidPuzzleError, Puzzle

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[str, str], None]  # move text, resulting fen
PhaseCallback = Callable[[PuzzlePhase], None]
FinishedCallback = Callable[[bool], None]  # solved?


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_finished: list[FinishedCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class PuzzleSession:
    """Runs one attempt at a puzzle: applies scripted opponent moves, judges
    the player's moves against the solution and tracks the phase.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = (
        "_puzzle",
        "_options",
        "_solution",
        "_fen",
        "_played",
        "_phase",
        "_player_color",
        "events",
    )

    def __init__(self, puzzle: Puzzle, options: SessionOptions | None = None) -> None:
        self._puzzle = puzzle
        self._options = options or SessionOptions()
        self._solution: list[Move] = puzzle.solution
        if not self._solution:
            raise InvalidPuzzleError(f"Puzzle {puzzle.puzzle_id!r} has no solution")
        self._fen = puzzle.fen
        self._played: list[str] = []
        self._phase = PuzzlePhase.NOT_STARTED
        start_side = position_from_fen(puzzle.fen).side_to_move
        self._player_color = (
            start_side.opposite if self._options.opponent_moves_first else start_side
        )
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    @property
    def phase(self) -> PuzzlePhase:
        return self._phase

    @property
    def fen(self) -> str:
        """Text of the position currently on the board."""
        return self._fen

    @property
    def player_color(self) -> Color:
        return self._player_color

    @property
    def played_moves(self) -> list[str]:
        return list(self._played)

    @property
    def expected_move(self) -> str | None:
        """Next solution move, or ``None`` once the script is exhausted."""
        index = len(self._played)
        if index < len(self._solution):
            return self._solution[index].uci
        return None

    @property
    def is_finished(self) -> bool:
        return self._phase.is_finished

    # ── Commands ─────────────────────────────────────────────────────────

    def start(self) -> None:
        """(Re)start the attempt from the puzzle's position."""
        self._fen = self._puzzle.fen
        self._played = []
        if self._options.opponent_moves_first:
            self._set_phase(PuzzlePhase.AWAITING_OPPONENT_SETUP)
        else:
            self._set_phase(PuzzlePhase.PLAYER_TO_MOVE)

    def play_opponent_move(self) -> bool:
        """Play the scripted opponent move (setup or reply).

        Returns False when the session is not waiting for the opponent.
        """
        if self._phase not in (
            PuzzlePhase.AWAITING_OPPONENT_SETUP,
            PuzzlePhase.AWAITING_OPPONENT_REPLY,
        ):
            return False
        move = self._solution[len(self._played)]
        self._apply(move.from_sq, move.to_sq)
        if self._script_exhausted():
            self._finish(solved=True)
        else:
            self._set_phase(PuzzlePhase.PLAYER_TO_MOVE)
        return True

    def legal_destinations(self, square: Square | str) -> set[Square]:
        """Where the player may move the piece on *square* right now."""
        if self._phase != PuzzlePhase.PLAYER_TO_MOVE:
            return set()
        sq = to_square(square)
        position = position_from_fen(self._fen)
        piece = position.board[sq]
        if piece is None or piece.color != position.side_to_move:
            return set()
        return Rules.legal_destinations(position, sq)

    def submit_move(
        self, origin: Square | str, destination: Square | str
    ) -> MoveVerdict:
        """Judge and apply the player's move.

        Moves outside :meth:`legal_destinations` are rejected with
        ``MoveVerdict.ILLEGAL`` and leave the board and phase unchanged.
        """
        if self._phase != PuzzlePhase.PLAYER_TO_MOVE:
            return MoveVerdict.IGNORED

        move = Move(to_square(origin), to_square(destination))
        if move.to_sq not in self.legal_destinations(move.from_sq):
            _LOGGER.debug(
                "Puzzle %s: rejected illegal move %s",
                self._puzzle.puzzle_id,
                move.uci,
            )
            return MoveVerdict.ILLEGAL

        expected = self._solution[len(self._played)]
        self._apply(move.from_sq, move.to_sq)

        if move != expected:
            _LOGGER.debug(
                "Puzzle %s: played %s, expected %s",
                self._puzzle.puzzle_id,
                move.uci,
                expected.uci,
            )
            self._finish(solved=False)
            return MoveVerdict.INCORRECT

        if self._script_exhausted():
            self._finish(solved=True)
            return MoveVerdict.SOLVED

        self._set_phase(PuzzlePhase.AWAITING_OPPONENT_REPLY)
        if self._options.auto_reply:
            self.play_opponent_move()
        if self._phase == PuzzlePhase.SOLVED:
            return MoveVerdict.SOLVED
        return MoveVerdict.CORRECT

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, from_sq: Square, to_sq: Square) -> None:
        self._fen = Rules.apply_move(self._fen, from_sq, to_sq)
        text = Move(from_sq, to_sq).uci
        self._played.append(text)
        for cb in self.events.on_move:
            cb(text, self._fen)

    def _script_exhausted(self) -> bool:
        return len(self._played) >= len(self._solution)

    def _finish(self, *, solved: bool) -> None:
        self._set_phase(PuzzlePhase.SOLVED if solved else PuzzlePhase.FAILED)
        for cb in self.events.on_finished:
            cb(solved)

    def _set_phase(self, phase: PuzzlePhase) -> None:
        _LOGGER.debug(
            "Puzzle %s: %s -> %s",
            self._puzzle.puzzle_id,
            self._phase.name,
            phase.name,
        )
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
