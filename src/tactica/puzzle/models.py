"""Puzzle records as supplied by the data store."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from tactica.core.move import Move
from tactica.core.types import InvalidSquareError


class InvalidPuzzleError(ValueError):
    """Raised when a puzzle record lacks a position or a solution."""


def _split_words(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("["):
            # Some stores keep the solution as a JSON-encoded list.
            try:
                return _split_words(json.loads(text))
            except json.JSONDecodeError:
                raise InvalidPuzzleError(f"Invalid move list: {value!r}") from None
        return text.split()
    if not isinstance(value, Iterable):
        raise InvalidPuzzleError(f"Invalid word list: {value!r}")
    return [str(item).strip() for item in value if str(item).strip()]


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record and record[key] not in (None, ""):
            return record[key]
    return None


@dataclass(slots=True, frozen=True)
class Puzzle:
    """A starting position plus the move sequence that solves it."""

    puzzle_id: str
    fen: str
    moves: tuple[str, ...]
    rating: int | None = None
    themes: tuple[str, ...] = ()
    title: str = ""
    objective: str = ""
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def solution(self) -> list[Move]:
        """Solution moves parsed into :class:`Move` values."""
        return [Move.from_uci(text) for text in self.moves]

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Puzzle:
        """Build a puzzle from a data-store row.

        Both the Lichess dump column names (``PuzzleId``, ``FEN``, ``Moves``,
        ``Rating``, ``Themes``) and the trainer's own lower-case names are
        accepted.  Moves and themes may be space-separated text or lists.
        """
        fen = _first(record, "FEN", "fen")
        if not isinstance(fen, str) or not fen.strip():
            raise InvalidPuzzleError(f"Puzzle record has no position: {record!r}")

        moves = tuple(_split_words(_first(record, "Moves", "moves", "solution")))
        if not moves:
            raise InvalidPuzzleError(f"Puzzle record has no solution moves: {record!r}")
        for text in moves:
            try:
                Move.from_uci(text)
            except InvalidSquareError as exc:
                raise InvalidPuzzleError(
                    f"Invalid solution move {text!r}: {exc}"
                ) from exc

        rating_value = _first(record, "Rating", "rating")
        try:
            rating = int(rating_value) if rating_value is not None else None
        except (TypeError, ValueError):
            raise InvalidPuzzleError(
                f"Invalid puzzle rating: {rating_value!r}"
            ) from None

        known = {
            "PuzzleId", "puzzleId", "id", "FEN", "fen", "Moves", "moves",
            "solution", "Rating", "rating", "Themes", "themes", "title", "objective",
        }
        return cls(
            puzzle_id=str(_first(record, "PuzzleId", "puzzleId", "id") or ""),
            fen=fen.strip(),
            moves=moves,
            rating=rating,
            themes=tuple(_split_words(_first(record, "Themes", "themes"))),
            title=str(record.get("title") or ""),
            objective=str(record.get("objective") or ""),
            extra={k: v for k, v in record.items() if k not in known},
        )
