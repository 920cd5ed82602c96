"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chesskit.core.enums import Color, PieceType

# FEN character ↔ (PieceType, Color)
_CHAR_MAP: dict[str, tuple[PieceType, Color]] = {
    "K": (PieceType.KING, Color.WHITE),
    "Q": (PieceType.QUEEN, Color.WHITE),
    "R": (PieceType.ROOK, Color.WHITE),
    "B": (PieceType.BISHOP, Color.WHITE),
    "N": (PieceType.KNIGHT, Color.WHITE),
    "P": (PieceType.PAWN, Color.WHITE),
    "k": (PieceType.KING, Color.BLACK),
    "q": (PieceType.QUEEN, Color.BLACK),
    "r": (PieceType.ROOK, Color.BLACK),
    "b": (PieceType.BISHOP, Color.BLACK),
    "n": (PieceType.KNIGHT, Color.BLACK),
    "p": (PieceType.PAWN, Color.BLACK),
}

_UNICODE: dict[tuple[PieceType, Color], str] = {
    (PieceType.KING, Color.WHITE): "♔",
    (PieceType.QUEEN, Color.WHITE): "♕",
    (PieceType.ROOK, Color.WHITE): "♖",
    (PieceType.BISHOP, Color.WHITE): "♗",
    (PieceType.KNIGHT, Color.WHITE): "♘",
    (PieceType.PAWN, Color.WHITE): "♙",
    (PieceType.KING, Color.BLACK): "♚",
    (PieceType.QUEEN, Color.BLACK): "♛",
    (PieceType.ROOK, Color.BLACK): "♜",
    (PieceType.BISHOP, Color.BLACK): "♝",
    (PieceType.KNIGHT, Color.BLACK): "♞",
    (PieceType.PAWN, Color.BLACK): "♟",
}

_FEN_CHARS: dict[tuple[PieceType, Color], str] = {v: k for k, v in _CHAR_MAP.items()}

_SLIDING = frozenset({PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP})


@dataclass(frozen=True, slots=True, order=True)
class Piece:
    """Immutable piece: a kind that always carries a color.

    Ordering follows the kind first, then the color.
    """

    piece_type: PieceType
    color: Color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.piece_type, self.color)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece = cls.from_fen_char(char)
        if piece is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return piece

    @classmethod
    def from_fen_char(cls, char: str) -> Piece | None:
        """Like :meth:`from_char`, but returns None for unknown characters."""
        entry = _CHAR_MAP.get(char)
        if entry is None:
            return None
        return cls(*entry)

    # ── Classification ───────────────────────────────────────────────────

    @property
    def letter(self) -> str:
        """Uppercase kind letter regardless of color, e.g. 'N'."""
        return _FEN_CHARS[(self.piece_type, Color.WHITE)]

    @property
    def name(self) -> str:
        return self.piece_type.name.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.piece_type, self.color)]

    @property
    def is_sliding(self) -> bool:
        return self.piece_type in _SLIDING
