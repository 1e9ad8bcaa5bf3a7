"""Tests for Board."""

import pytest

from tactica.core.board import Board
from tactica.core.enums import Color, PieceType
from tactica.core.piece import Piece
from tactica.core.types import A8, E1, E2, E4, E8, H1, H8, make_square


class TestBoardInitial:
    def test_kings_on_e_file(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    @pytest.mark.parametrize(
        ("grid_rank", "color"), [(0, Color.BLACK), (7, Color.WHITE)]
    )
    def test_back_ranks_mirror(self, grid_rank: int, color: Color) -> None:
        board = Board.initial()
        types = [board[make_square(f, grid_rank)].piece_type for f in range(8)]
        assert types == [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        assert all(board[make_square(f, grid_rank)].color == color for f in range(8))

    def test_black_occupies_top_rows(self) -> None:
        board = Board.initial()
        assert board[A8] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[H1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board.pieces(Color.BLACK, PieceType.PAWN) == list(range(8, 16))
        assert board.pieces(Color.WHITE, PieceType.PAWN) == list(range(48, 56))

    def test_middle_rows_empty(self) -> None:
        board = Board.initial()
        assert all(board.is_empty(sq) for sq in range(16, 48))


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        board[E4] = knight
        assert board[E4] == knight
        assert board.is_empty(E2)

    def test_occupied_runs_from_a8(self) -> None:
        board = Board()
        board[H1] = Piece(Color.WHITE, PieceType.KING)
        board[H8] = Piece(Color.BLACK, PieceType.KING)
        assert [sq for sq, _ in board.occupied()] == [H8, H1]

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert copy == board
        copy.move_piece(E2, E4)
        assert copy != board
        assert board.is_empty(E4)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king_is_none(self) -> None:
        assert Board().king_square(Color.BLACK) is None

    def test_move_piece_returns_captured(self) -> None:
        board = Board()
        board[E2] = Piece(Color.WHITE, PieceType.ROOK)
        board[E8] = Piece(Color.BLACK, PieceType.QUEEN)
        assert board.move_piece(E2, E8) == Piece(Color.BLACK, PieceType.QUEEN)
        assert board[E8] == Piece(Color.WHITE, PieceType.ROOK)
        assert board.is_empty(E2)

    def test_move_from_empty_square_clears_target(self) -> None:
        board = Board()
        board[E4] = Piece(Color.BLACK, PieceType.PAWN)
        board.move_piece(E2, E4)
        assert board.is_empty(E4)

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert list(board.occupied()) == []

    def test_repr_top_row_first(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[-1] == "  a b c d e f g h"
