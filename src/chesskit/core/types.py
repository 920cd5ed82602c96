"""Tile type alias and the :class:`Coordinate` value type.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesskit.core.errors import SquareParseError

Tile: TypeAlias = int  # 0–63

_FILES = "abcdefgh"
_RANKS = "12345678"


def file_of(tile: Tile) -> int:
    """File index 0–7 (a–h)."""
    return tile & 7


def rank_of(tile: Tile) -> int:
    """Rank index 0–7 (1–8)."""
    return tile >> 3


def make_tile(file: int, rank: int) -> Tile:
    """Create tile from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def is_valid_tile(tile: int) -> bool:
    """Check whether integer is a valid tile index."""
    return 0 <= tile < 64


def tile_name(tile: Tile) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return _FILES[file_of(tile)] + _RANKS[rank_of(tile)]


def parse_tile(name: str) -> Tile:
    """Parse square name, e.g. 'e4' → 28."""
    return Coordinate.parse(name).to_tile()


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable (file, rank) pair, both components in 0–7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Coordinate out of range: ({self.file}, {self.rank})")

    # ── Conversion ───────────────────────────────────────────────────────

    @classmethod
    def from_tile(cls, tile: Tile) -> Coordinate:
        if not is_valid_tile(tile):
            raise ValueError(f"Tile out of range: {tile}")
        return cls(file_of(tile), rank_of(tile))

    def to_tile(self) -> Tile:
        return make_tile(self.file, self.rank)

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse algebraic notation such as ``'e4'`` (file letter is case-insensitive)."""
        if len(text) != 2:
            raise SquareParseError(f"Invalid square name: {text!r}")
        file_char, rank_char = text[0].lower(), text[1]
        if file_char not in _FILES or rank_char not in _RANKS:
            raise SquareParseError(f"Invalid square name: {text!r}")
        return cls(_FILES.index(file_char), _RANKS.index(rank_char))

    # ── Neighbors ────────────────────────────────────────────────────────
    # Each returns None instead of stepping off the board.

    def next_up(self) -> Coordinate | None:
        return Coordinate(self.file, self.rank + 1) if self.rank < 7 else None

    def next_down(self) -> Coordinate | None:
        return Coordinate(self.file, self.rank - 1) if self.rank > 0 else None

    def next_left(self) -> Coordinate | None:
        return Coordinate(self.file - 1, self.rank) if self.file > 0 else None

    def next_right(self) -> Coordinate | None:
        return Coordinate(self.file + 1, self.rank) if self.file < 7 else None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return _FILES[self.file] + _RANKS[self.rank]


def parse_coordinate(text: str) -> Coordinate:
    """Module-level alias of :meth:`Coordinate.parse`."""
    return Coordinate.parse(text)


# ── Named tile constants ────────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
