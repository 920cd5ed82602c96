"""Castling availability flags."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CastlingRights:
    """Four independent castling flags.

    Nothing here revokes a right when a king or rook moves; that belongs to
    whoever applies moves to the position.
    """

    white_king_side: bool = True
    white_queen_side: bool = True
    black_king_side: bool = True
    black_queen_side: bool = True

    @classmethod
    def none(cls) -> CastlingRights:
        return cls(False, False, False, False)

    @classmethod
    def from_fen(cls, field: str) -> CastlingRights:
        """Decode a FEN castling field by the presence of ``K``, ``Q``, ``k``, ``q``.

        Other characters (including ``-``) are ignored.
        """
        return cls(
            white_king_side="K" in field,
            white_queen_side="Q" in field,
            black_king_side="k" in field,
            black_queen_side="q" in field,
        )

    @property
    def any(self) -> bool:
        return (
            self.white_king_side
            or self.white_queen_side
            or self.black_king_side
            or self.black_queen_side
        )

    def to_fen(self) -> str:
        text = ""
        if self.white_king_side:
            text += "K"
        if self.white_queen_side:
            text += "Q"
        if self.black_king_side:
            text += "k"
        if self.black_queen_side:
            text += "q"
        return text or "-"

    def __str__(self) -> str:
        return self.to_fen()
