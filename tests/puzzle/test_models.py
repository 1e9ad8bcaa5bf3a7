"""Tests for puzzle records."""

import pytest

from tactica.core.move import Move
from tactica.core.types import D1, D8, E1, E8
from tactica.puzzle.models import InvalidPuzzleError, Puzzle

BACK_RANK_FEN = "6k1/5ppp/8/8/8/8/5PPP/3RR1K1 b - - 0 1"


class TestFromRecord:
    def test_lichess_columns(self, back_rank_record: dict[str, object]) -> None:
        puzzle = Puzzle.from_record(back_rank_record)
        assert puzzle.puzzle_id == "00sHx"
        assert puzzle.fen == BACK_RANK_FEN
        assert puzzle.moves == ("g8f8", "e1e8", "f8e8", "d1d8")
        assert puzzle.rating == 1320
        assert puzzle.themes == ("backRankMate", "short")

    def test_lower_case_columns_and_lists(self) -> None:
        puzzle = Puzzle.from_record(
            {
                "id": 7,
                "fen": BACK_RANK_FEN,
                "solution": ["g8f8", "e1e8"],
                "themes": ["mate"],
                "title": "Back rank",
                "objective": "White mates in two",
            }
        )
        assert puzzle.puzzle_id == "7"
        assert puzzle.moves == ("g8f8", "e1e8")
        assert puzzle.rating is None
        assert puzzle.themes == ("mate",)
        assert puzzle.title == "Back rank"
        assert puzzle.objective == "White mates in two"

    def test_json_encoded_move_list(self) -> None:
        puzzle = Puzzle.from_record(
            {"FEN": BACK_RANK_FEN, "Moves": '["g8f8", "e1e8"]'}
        )
        assert puzzle.moves == ("g8f8", "e1e8")

    def test_unknown_columns_kept_as_extra(
        self, back_rank_record: dict[str, object]
    ) -> None:
        back_rank_record["Popularity"] = 95
        puzzle = Puzzle.from_record(back_rank_record)
        assert puzzle.extra == {"Popularity": 95}

    def test_solution_parses_moves(self, back_rank_record: dict[str, object]) -> None:
        solution = Puzzle.from_record(back_rank_record).solution
        assert solution[1] == Move(E1, E8)
        assert solution[-1] == Move(D1, D8)

    def test_fen_whitespace_stripped(self) -> None:
        puzzle = Puzzle.from_record({"FEN": f"  {BACK_RANK_FEN}\n", "Moves": "g8f8"})
        assert puzzle.fen == BACK_RANK_FEN


class TestInvalidRecords:
    def test_missing_position(self) -> None:
        with pytest.raises(InvalidPuzzleError, match="no position"):
            Puzzle.from_record({"Moves": "e2e4"})

    def test_blank_position(self) -> None:
        with pytest.raises(InvalidPuzzleError, match="no position"):
            Puzzle.from_record({"FEN": "   ", "Moves": "e2e4"})

    def test_missing_moves(self) -> None:
        with pytest.raises(InvalidPuzzleError, match="no solution moves"):
            Puzzle.from_record({"FEN": BACK_RANK_FEN, "Moves": ""})

    def test_bad_move_text(self) -> None:
        with pytest.raises(InvalidPuzzleError, match="Invalid solution move"):
            Puzzle.from_record({"FEN": BACK_RANK_FEN, "Moves": "g8f8 e1x9"})

    def test_bad_json_list(self) -> None:
        with pytest.raises(InvalidPuzzleError, match="Invalid move list"):
            Puzzle.from_record({"FEN": BACK_RANK_FEN, "Moves": "[g8f8"})

    @pytest.mark.parametrize("column", ["Moves", "Themes"])
    def test_scalar_word_list(self, column: str) -> None:
        record: dict[str, object] = {"FEN": BACK_RANK_FEN, "Moves": "g8f8"}
        record[column] = 5
        with pytest.raises(InvalidPuzzleError, match="Invalid word list"):
            Puzzle.from_record(record)

    def test_bad_rating(self, back_rank_record: dict[str, object]) -> None:
        back_rank_record["Rating"] = "strong"
        with pytest.raises(InvalidPuzzleError, match="Invalid puzzle rating"):
            Puzzle.from_record(back_rank_record)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Puzzle.from_record({})
