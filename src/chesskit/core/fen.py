"""Field-level FEN decoding and encoding.

:class:`~chesskit.core.board.Board` and
:class:`~chesskit.core.position.Position` build their FEN methods on these
helpers. Structurally broken fields raise :class:`FenError`; a few fields are
tolerated and replaced by a default instead (side to move, unknown placement
characters, unparsable clocks), which is logged as a warning.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Final

from chesskit.core.enums import Color
from chesskit.core.errors import FenError
from chesskit.core.piece import Piece
from chesskit.core.types import Coordinate, make_tile

_LOGGER = logging.getLogger(__name__)

STARTING_PLACEMENT: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTING_FEN: Final = f"{STARTING_PLACEMENT} w KQkq - 0 1"

FEN_FIELD_COUNT: Final = 6
_DIGITS = "0123456789"
_EN_PASSANT_FILES = "abcdefgh"
_EN_PASSANT_RANKS = "36"
_MAX_CLOCK = 2**32 - 1
_FIELD_SEPARATOR = re.compile(r"[ \t\n\f\r]+")


@dataclass(frozen=True, slots=True)
class ClockDefaults:
    """Fallback values for the halfmove / fullmove fields.

    A missing fullmove number means "first move", but an unparsable one
    falls back to 0 like the halfmove clock does.
    """

    missing_halfmove: int = 0
    missing_fullmove: int = 1
    unparsable_halfmove: int = 0
    unparsable_fullmove: int = 0


DEFAULT_CLOCKS: Final = ClockDefaults()


def split_fields(fen: str) -> list[str]:
    """Split a FEN record on ASCII whitespace, requiring exactly six fields."""
    fields = [field for field in _FIELD_SEPARATOR.split(fen) if field]
    if len(fields) != FEN_FIELD_COUNT:
        raise FenError(f"Invalid FEN (need {FEN_FIELD_COUNT} fields): {fen!r}")
    return fields


# ── Piece placement ─────────────────────────────────────────────────────────


def decode_placement(placement: str) -> list[Piece | None]:
    """Decode the piece-placement field into 64 slots indexed by tile.

    Ranks are listed from rank 8 down to rank 1. Ranks that describe fewer
    than eight files leave the rest empty; ranks that run past the h-file
    raise :class:`FenError`.
    """
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    squares: list[Piece | None] = [None] * 64
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _DIGITS:
                file += int(ch)
            else:
                piece = Piece.from_fen_char(ch)
                if piece is None:
                    _LOGGER.warning(
                        "Skipping unknown FEN placement character %r in %r", ch, rank_text
                    )
                    continue
                if file >= 8:
                    raise FenError(f"Invalid FEN rank width: {rank_text!r}")
                squares[make_tile(file, rank)] = piece
                file += 1
            if file > 8:
                raise FenError(f"Invalid FEN rank width: {rank_text!r}")
    return squares


def encode_placement(squares: list[Piece | None]) -> str:
    """Inverse of :func:`decode_placement`."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = squares[make_tile(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


# ── Metadata fields ─────────────────────────────────────────────────────────


def parse_side(field: str) -> Color:
    """Side to move; anything other than w/W/b/B falls back to white."""
    if field in ("w", "W"):
        return Color.WHITE
    if field in ("b", "B"):
        return Color.BLACK
    _LOGGER.warning("Unknown FEN side-to-move %r, defaulting to white", field)
    return Color.WHITE


def parse_en_passant(field: str) -> Coordinate | None:
    """En-passant target square: lowercase file a-h, rank 3 or 6."""
    if field == "-":
        return None
    if (
        len(field) != 2
        or field[0] not in _EN_PASSANT_FILES
        or field[1] not in _EN_PASSANT_RANKS
    ):
        raise FenError(f"Invalid FEN en-passant square: {field!r}")
    return Coordinate.parse(field)


def format_en_passant(square: Coordinate | None) -> str:
    return "-" if square is None else str(square)


def parse_clock(field: str | None, *, missing: int, unparsable: int) -> int:
    """Unsigned 32-bit move counter, with separate fallbacks for absent and bad input.

    A single leading ``+`` is allowed; values above 2**32 - 1 count as unparsable.
    """
    if field is None:
        return missing
    digits = field[1:] if field.startswith("+") else field
    if not (digits.isascii() and digits.isdigit()) or int(digits) > _MAX_CLOCK:
        _LOGGER.warning("Unparsable FEN clock %r, defaulting to %d", field, unparsable)
        return unparsable
    return int(digits)
