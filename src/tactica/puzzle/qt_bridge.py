"""Qt bridge exposing a puzzle session through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from tactica.core.types import InvalidSquareError, square_name
from tactica.puzzle.config import SessionOptions
from tactica.puzzle.interfaces import MoveVerdict, PuzzlePhase
from tactica.puzzle.models import Puzzle
from tactica.puzzle.session import PuzzleSession


class PuzzleSessionBridge(QObject):
    """Main-thread adapter between a :class:`PuzzleSession` and Qt widgets."""

    move_played = pyqtSignal(str, str)  # move text, resulting fen
    phase_changed = pyqtSignal(int)  # PuzzlePhase value
    finished = pyqtSignal(bool)  # solved?
    move_judged = pyqtSignal(int)  # MoveVerdict value
    input_error = pyqtSignal(str)

    def __init__(self, options: SessionOptions | None = None) -> None:
        super().__init__()
        self._options = options
        self._session: PuzzleSession | None = None

    @property
    def session(self) -> PuzzleSession | None:
        return self._session

    def load(self, puzzle: Puzzle) -> PuzzleSession:
        """Replace the current session with a fresh one for *puzzle*."""
        session = PuzzleSession(puzzle, self._options)
        session.events.on_move.append(self.move_played.emit)
        session.events.on_phase_changed.append(
            lambda phase: self.phase_changed.emit(int(phase))
        )
        session.events.on_finished.append(self.finished.emit)
        self._session = session
        return session

    @pyqtSlot()
    def start(self) -> None:
        if self._session is not None:
            self._session.start()

    @pyqtSlot()
    def play_opponent_move(self) -> None:
        if self._session is not None:
            self._session.play_opponent_move()

    @pyqtSlot(str, str)
    def submit_move(self, origin: str, destination: str) -> None:
        """Judge a move coming from the board widget and emit the verdict."""
        if self._session is None:
            self.move_judged.emit(int(MoveVerdict.IGNORED))
            return
        try:
            verdict = self._session.submit_move(origin, destination)
        except InvalidSquareError as exc:
            self.input_error.emit(str(exc))
            return
        self.move_judged.emit(int(verdict))

    def legal_destination_names(self, square: str) -> list[str]:
        """Sorted destination names for highlighting, empty when not playable."""
        if self._session is None:
            return []
        try:
            destinations = self._session.legal_destinations(square)
        except InvalidSquareError:
            return []
        return sorted(square_name(sq) for sq in destinations)

    def current_phase(self) -> PuzzlePhase:
        if self._session is None:
            return PuzzlePhase.NOT_STARTED
        return self._session.phase
