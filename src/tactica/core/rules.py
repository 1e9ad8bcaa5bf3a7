"""Text-level entry points used by the trainer's board and puzzle layers.

Callers hold position text and pass it on every call; nothing is cached
between calls, so the functions are safe to use from any thread.
"""

from __future__ import annotations

from tactica.core.move_generator import MoveGenerator
from tactica.core.notation.fen import position_from_fen, position_to_fen
from tactica.core.position import Position
from tactica.core.types import Square, square_name, to_square


class Rules:
    """Static rule helpers operating on position text or a :class:`Position`."""

    @staticmethod
    def legal_destinations(
        fen: str | Position,
        origin: Square | str,
        *,
        count_king_attacks: bool = False,
    ) -> set[Square]:
        """Legal destination squares of the piece standing on *origin*."""
        position = fen if isinstance(fen, Position) else position_from_fen(fen)
        gen = MoveGenerator(position, count_king_attacks=count_king_attacks)
        return gen.legal_destinations(to_square(origin))

    @staticmethod
    def legal_destination_names(
        fen: str | Position,
        origin: Square | str,
        *,
        count_king_attacks: bool = False,
    ) -> set[str]:
        """Same as :meth:`legal_destinations`, as square names."""
        return {
            square_name(sq)
            for sq in Rules.legal_destinations(
                fen, origin, count_king_attacks=count_king_attacks
            )
        }

    @staticmethod
    def apply_move(fen: str, origin: Square | str, destination: Square | str) -> str:
        """Text of the position after moving *origin* to *destination*.

        The move is not validated.  Side to move flips; castling, en-passant
        and clock fields are forwarded as they were.
        """
        position = position_from_fen(fen)
        successor = position.with_move(to_square(origin), to_square(destination))
        return position_to_fen(successor, flip_side=False)

    @staticmethod
    def is_in_check(fen: str | Position) -> bool:
        position = fen if isinstance(fen, Position) else position_from_fen(fen)
        gen = MoveGenerator(position)
        return gen.is_in_check(position.side_to_move)
