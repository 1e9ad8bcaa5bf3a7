"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

# Black steps its king aside and white mates on the back rank.
BACK_RANK_FEN = "6k1/5ppp/8/8/8/8/5PPP/3RR1K1 b - - 0 1"
BACK_RANK_MOVES = "g8f8 e1e8 f8e8 d1d8"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for Qt bridge tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def back_rank_record() -> dict[str, object]:
    """Data-store row in the Lichess dump layout."""
    return {
        "PuzzleId": "00sHx",
        "FEN": BACK_RANK_FEN,
        "Moves": BACK_RANK_MOVES,
        "Rating": "1320",
        "Themes": "backRankMate short",
    }
