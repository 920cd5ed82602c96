"""Position — complete game state (board + metadata) with the FEN codec."""

from __future__ import annotations

import logging
from dataclasses import replace

from chesskit.core import fen
from chesskit.core.board import Board
from chesskit.core.castling import CastlingRights
from chesskit.core.enums import Color
from chesskit.core.errors import FenError
from chesskit.core.fen import DEFAULT_CLOCKS, STARTING_FEN, ClockDefaults
from chesskit.core.piece import Piece
from chesskit.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    A bare ``Position()`` has an empty board and default metadata; use
    :meth:`initial` or :meth:`from_fen` to populate it.
    """

    __slots__ = (
        "board",
        "castling",
        "side_to_move",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights | None = None,
        en_passant: Coordinate | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board()
        self.side_to_move = side_to_move
        self.castling = castling if castling is not None else CastlingRights()
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position."""
        pos = cls()
        try:
            pos.apply_fen(STARTING_FEN)
        except FenError as exc:
            raise RuntimeError("Starting FEN failed to decode") from exc
        return pos

    @classmethod
    def from_fen(
        cls, fen_text: str, *, clock_defaults: ClockDefaults = DEFAULT_CLOCKS
    ) -> Position:
        pos = cls()
        pos.apply_fen(fen_text, clock_defaults=clock_defaults)
        return pos

    # ── FEN codec ────────────────────────────────────────────────────────

    def apply_fen(
        self, fen_text: str, *, clock_defaults: ClockDefaults = DEFAULT_CLOCKS
    ) -> None:
        """Overwrite this position from a six-field FEN record.

        A wrong field count is rejected before anything changes. Later
        failures (placement, en passant) leave the fields decoded so far in
        place, and the board is already cleared by then.
        """
        fields = fen.split_fields(fen_text)
        placement, side, castling, en_passant = fields[:4]

        self.board.clear()
        self.board.set_position_from_fen(placement)
        self.side_to_move = fen.parse_side(side)
        self.castling = CastlingRights.from_fen(castling)
        self.en_passant = fen.parse_en_passant(en_passant)
        self.halfmove_clock = fen.parse_clock(
            fields[4] if len(fields) > 4 else None,
            missing=clock_defaults.missing_halfmove,
            unparsable=clock_defaults.unparsable_halfmove,
        )
        self.fullmove_number = fen.parse_clock(
            fields[5] if len(fields) > 5 else None,
            missing=clock_defaults.missing_fullmove,
            unparsable=clock_defaults.unparsable_fullmove,
        )
        _LOGGER.debug("Applied FEN %r", fen_text)

    def to_fen(self) -> str:
        return " ".join(
            [
                self.board.placement_fen(),
                self.side_to_move.fen_char,
                self.castling.to_fen(),
                fen.format_en_passant(self.en_passant),
                str(self.halfmove_clock),
                str(self.fullmove_number),
            ]
        )

    # ── Mutation ─────────────────────────────────────────────────────────

    def clear(self) -> None:
        """Empty the board. Castling, side to move and clocks are kept."""
        self.board.clear()

    def set_piece(self, coord: Coordinate, piece: Piece) -> None:
        self.board.set(coord, piece)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=replace(self.castling),
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __str__(self) -> str:
        en_passant = str(self.en_passant) if self.en_passant is not None else "None"
        return "\n".join(
            [
                f"side to move: {self.side_to_move}\tcastling rights: {self.castling}",
                f"en passant square: {en_passant}",
                f"halfmove clock: {self.halfmove_clock}\t"
                f"fullmove number: {self.fullmove_number}",
                repr(self.board),
            ]
        )

    def __repr__(self) -> str:
        return f"Position({self.to_fen()!r})"


def position_from_fen(fen_text: str) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    return Position.from_fen(fen_text)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    return pos.to_fen()
