"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chesskit.core.enums import Color
from chesskit.core.errors import FenError
from chesskit.core.fen import STARTING_PLACEMENT, decode_placement, encode_placement
from chesskit.core.piece import Piece
from chesskit.core.types import Coordinate, Tile, is_valid_tile, make_tile


@dataclass(frozen=True, slots=True)
class SelectionColor:
    """RGB highlight color, each channel 0–255."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")


@dataclass(frozen=True, slots=True)
class Selection:
    """A set of highlighted tiles. Purely cosmetic."""

    tiles: tuple[Tile, ...]
    color: SelectionColor


class Board:
    """Mutable 64-square board.

    ``perspective`` and ``selections`` are read by presentation layers only;
    they never take part in equality or FEN encoding.
    """

    __slots__ = ("_squares", "selections", "perspective")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.selections: list[Selection] = []
        self.perspective: Color = Color.WHITE

    @staticmethod
    def _check_tile(tile: Tile) -> None:
        if not is_valid_tile(tile):
            raise IndexError(f"Tile out of range: {tile}")

    # -- Element access -----------------------------------------------------

    def get_tile(self, tile: Tile) -> Piece | None:
        self._check_tile(tile)
        return self._squares[tile]

    def set_tile(self, tile: Tile, piece: Piece | None) -> None:
        self._check_tile(tile)
        self._squares[tile] = piece

    def get(self, coord: Coordinate) -> Piece | None:
        return self._squares[coord.to_tile()]

    def set(self, coord: Coordinate, piece: Piece | None) -> None:
        self._squares[coord.to_tile()] = piece

    def is_empty(self, tile: Tile) -> bool:
        return self.get_tile(tile) is None

    @property
    def squares(self) -> tuple[Piece | None, ...]:
        """Read-only snapshot of all 64 slots, indexed by tile."""
        return tuple(self._squares)

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Tile]:
        """Tiles occupied by *color*, in ascending order."""
        return [
            tile
            for tile, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    # -- FEN ----------------------------------------------------------------

    def set_position_from_fen(self, piece_placement: str) -> None:
        """Place pieces from a FEN placement field.

        Pieces are written over the current contents; empty squares in the
        field do not erase anything. The board is only touched once the whole
        field has been decoded.
        """
        decoded = decode_placement(piece_placement)
        for tile, piece in enumerate(decoded):
            if piece is not None:
                self._squares[tile] = piece

    def placement_fen(self) -> str:
        """Encode the pieces as a FEN placement field."""
        return encode_placement(self._squares)

    # -- Selections ---------------------------------------------------------

    def add_selection(self, selection: Selection) -> None:
        self.selections.append(selection)

    def clear_selections(self) -> None:
        self.selections.clear()

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b.selections = self.selections.copy()
        b.perspective = self.perspective
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self.selections.clear()
        self.perspective = Color.WHITE

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        try:
            b.set_position_from_fen(STARTING_PLACEMENT)
        except FenError as exc:
            raise RuntimeError("Starting placement failed to decode") from exc
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[make_tile(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
