"""Legal and pseudo-legal destination generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tactica.core.enums import Color, PieceType
from tactica.core.move import Move
from tactica.core.piece import Piece
from tactica.core.types import Square, file_of, make_square, on_board, rank_of

if TYPE_CHECKING:
    from tactica.core.board import Board
    from tactica.core.position import Position


# Offsets are (file delta, grid-rank delta); grid rank 0 is the top row.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# Indexed by Color: white pawns advance towards grid rank 0.
_PAWN_STEP: tuple[int, int] = (-1, 1)
_PAWN_HOME_RANK: tuple[int, int] = (6, 1)

_ORTHOGONAL_ATTACKERS = frozenset((PieceType.ROOK, PieceType.QUEEN))
_DIAGONAL_ATTACKERS = frozenset((PieceType.BISHOP, PieceType.QUEEN))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if on_board(af, ar):
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_idx + df
            ar = rank_idx + dr
            ray: list[Square] = []
            while on_board(af, ar):
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _BISHOP_RAYS,
    PieceType.ROOK: _ROOK_RAYS,
    PieceType.QUEEN: _QUEEN_RAYS,
}


# -- Attack test -------------------------------------------------------------


def _ray_hits(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    attackers: frozenset[PieceType],
    count_king: bool,
) -> bool:
    for ray in rays:
        for distance, to_sq in enumerate(ray, start=1):
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color:
                if piece.piece_type in attackers:
                    return True
                if count_king and distance == 1 and piece.piece_type == PieceType.KING:
                    return True
            break
    return False


def is_square_attacked(
    board: Board,
    sq: Square,
    by_color: Color,
    *,
    count_king: bool = False,
) -> bool:
    """Could a piece of *by_color* capture on *sq* with its next move?

    A neighbouring king only counts when *count_king* is set.
    """
    file_idx = file_of(sq)
    rank_idx = rank_of(sq)

    # Pawns attack forward-diagonally, so they sit one step "behind" sq.
    pawn_rank = rank_idx - _PAWN_STEP[by_color]
    if 0 <= pawn_rank < 8:
        pawn = Piece(by_color, PieceType.PAWN)
        for af in (file_idx - 1, file_idx + 1):
            if 0 <= af < 8 and board[make_square(af, pawn_rank)] == pawn:
                return True

    knight = Piece(by_color, PieceType.KNIGHT)
    for from_sq in _KNIGHT_TARGETS[sq]:
        if board[from_sq] == knight:
            return True

    if _ray_hits(board, _ROOK_RAYS[sq], by_color, _ORTHOGONAL_ATTACKERS, count_king):
        return True
    return _ray_hits(
        board, _BISHOP_RAYS[sq], by_color, _DIAGONAL_ATTACKERS, count_king
    )


class MoveGenerator:
    """Generates destinations for pieces of a given :class:`Position`.

    The position is never modified: king safety is tested on a scratch
    copy of the board for every candidate move.
    """

    __slots__ = ("_pos", "_board", "_count_king_attacks")

    def __init__(self, position: Position, *, count_king_attacks: bool = False) -> None:
        self._pos = position
        self._board = position.board
        self._count_king_attacks = count_king_attacks

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, origin: Square) -> set[Square]:
        """Squares the piece on *origin* may move to without exposing its king."""
        piece = self._board[origin]
        if piece is None:
            return set()
        return {
            to_sq
            for to_sq in self.pseudo_legal_destinations(origin)
            if self._is_king_safe_after(origin, to_sq, piece.color)
        }

    def pseudo_legal_destinations(self, origin: Square) -> list[Square]:
        """Destinations allowed by movement and blocking rules alone."""
        piece = self._board[origin]
        if piece is None:
            return []

        destinations: list[Square] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(origin, piece.color, destinations)
        elif ptype == PieceType.KNIGHT:
            self._gen_step(piece.color, _KNIGHT_TARGETS[origin], destinations)
        elif ptype == PieceType.KING:
            self._gen_step(piece.color, _KING_TARGETS[origin], destinations)
        else:
            self._gen_sliding(
                piece.color, _SLIDER_RAYS[ptype][origin], destinations
            )
        return destinations

    def legal_moves(self) -> list[Move]:
        """All legal moves for the side to move, a8 first."""
        moves: list[Move] = []
        color = self._pos.side_to_move
        board = self._board
        for from_sq in board.all_pieces(color):
            piece = board[from_sq]
            for to_sq in sorted(self.legal_destinations(from_sq)):
                moves.append(Move(from_sq, to_sq, piece, board[to_sq]))
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?  False without a king."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(
            self._board, sq, by_color, count_king=self._count_king_attacks
        )

    # -- Check filter ------------------------------------------------------

    def _is_king_safe_after(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        scratch = self._board.copy()
        scratch.move_piece(from_sq, to_sq)
        king_sq = scratch.king_square(color)
        if king_sq is None:
            return True
        return not is_square_attacked(
            scratch, king_sq, color.opposite, count_king=self._count_king_attacks
        )

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, out: list[Square]) -> None:
        board = self._board
        file_idx = file_of(sq)
        rank_idx = rank_of(sq)
        step = _PAWN_STEP[color]

        one_rank = rank_idx + step
        if not 0 <= one_rank < 8:
            return

        one_step = make_square(file_idx, one_rank)
        if board.is_empty(one_step):
            out.append(one_step)
            if rank_idx == _PAWN_HOME_RANK[color]:
                two_step = make_square(file_idx, one_rank + step)
                if board.is_empty(two_step):
                    out.append(two_step)

        for af in (file_idx - 1, file_idx + 1):
            if not 0 <= af < 8:
                continue
            cap_sq = make_square(af, one_rank)
            target = board[cap_sq]
            if target is not None and target.color != color:
                out.append(cap_sq)

    def _gen_step(
        self,
        color: Color,
        targets: tuple[Square, ...],
        out: list[Square],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                out.append(to_sq)

    def _gen_sliding(
        self,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        out: list[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    out.append(to_sq)
                    continue
                if target.color != color:
                    out.append(to_sq)
                break
