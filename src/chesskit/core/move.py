"""Move value object describing a single ply."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from chesskit.core.enums import Color, PieceType
from chesskit.core.piece import Piece
from chesskit.core.types import Coordinate

MOVE_LIST_HEADER = "move\tpiece\tprom.\tcapture\tdouble\tenpass.\tcastling"


def _forward(color: Color, square: Coordinate) -> Coordinate:
    """One rank towards the opponent, staying put at the last rank."""
    step = square.next_up() if color == Color.WHITE else square.next_down()
    return step if step is not None else square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single ply.

    ``piece`` is the piece being moved, never the captured one. The four
    flags are independent and not cross-checked against each other.
    """

    source: Coordinate
    target: Coordinate
    piece: Piece
    promoted_piece: Piece | None = None
    capture: bool = False
    double_push: bool = False
    en_passant: bool = False
    castling: bool = False

    # ── Copy-on-write setters ────────────────────────────────────────────

    def with_capture(self, capture: bool = True) -> Move:
        return replace(self, capture=capture)

    def with_double_push(self, double_push: bool = True) -> Move:
        return replace(self, double_push=double_push)

    def with_en_passant(self, en_passant: bool = True) -> Move:
        return replace(self, en_passant=en_passant)

    def with_castling(self, castling: bool = True) -> Move:
        return replace(self, castling=castling)

    def with_promotion(self, promoted_piece: Piece | None) -> Move:
        return replace(self, promoted_piece=promoted_piece)

    # ── Convenience constructors ─────────────────────────────────────────

    @classmethod
    def pawn_push(cls, color: Color, source: Coordinate) -> Move:
        return cls(source, _forward(color, source), Piece(PieceType.PAWN, color))

    @classmethod
    def pawn_double_push(cls, color: Color, source: Coordinate) -> Move:
        """Two ranks forward; each step saturates at the board edge."""
        target = _forward(color, _forward(color, source))
        return cls(source, target, Piece(PieceType.PAWN, color), double_push=True)

    @classmethod
    def promotion(cls, color: Color, source: Coordinate, promoted_piece: Piece) -> Move:
        if promoted_piece is None:
            raise ValueError("Promotion move requires a promoted piece")
        return cls(
            source,
            _forward(color, source),
            Piece(PieceType.PAWN, color),
            promoted_piece=promoted_piece,
        )

    @classmethod
    def knight_move(
        cls, source: Coordinate, target: Coordinate, color: Color, capture: bool
    ) -> Move:
        return cls(source, target, Piece(PieceType.KNIGHT, color), capture=capture)

    @classmethod
    def bishop_move(
        cls, source: Coordinate, target: Coordinate, color: Color, capture: bool
    ) -> Move:
        return cls(source, target, Piece(PieceType.BISHOP, color), capture=capture)

    @classmethod
    def rook_move(
        cls, source: Coordinate, target: Coordinate, color: Color, capture: bool
    ) -> Move:
        return cls(source, target, Piece(PieceType.ROOK, color), capture=capture)

    @classmethod
    def castling_move(cls, source: Coordinate, target: Coordinate, color: Color) -> Move:
        """The king's own shift; the rook is left to the caller."""
        return cls(source, target, Piece(PieceType.KING, color), castling=True)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        promoted = str(self.promoted_piece) if self.promoted_piece is not None else "None"
        return "\t".join(
            [
                f"{self.source}{self.target}",
                str(self.piece),
                promoted,
                str(self.capture),
                str(self.double_push),
                str(self.en_passant),
                str(self.castling),
            ]
        )


def format_move_list(moves: Iterable[Move]) -> str:
    """Diagnostic table: header row followed by one row per move."""
    return "\n".join([MOVE_LIST_HEADER, *(str(m) for m in moves)])


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A move name paired with how often it occurred."""

    name: str
    count: int = 0

    def incremented(self) -> MoveRecord:
        return replace(self, count=self.count + 1)
