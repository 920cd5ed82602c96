"""Tests for Position and the full FEN codec."""

import logging

import pytest

from chesskit.core.castling import CastlingRights
from chesskit.core.enums import Color, PieceType
from chesskit.core.errors import FenError
from chesskit.core.fen import STARTING_FEN, ClockDefaults
from chesskit.core.piece import Piece
from chesskit.core.position import Position, position_from_fen, position_to_fen
from chesskit.core.types import A1, E1, E4, E8, H8, Coordinate

_SICILIAN = "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 2"


class TestStartingPosition:
    def test_pieces(self, start_position: Position) -> None:
        board = start_position.board
        assert board.get_tile(A1) == Piece(PieceType.ROOK, Color.WHITE)
        assert board.get_tile(E1) == Piece(PieceType.KING, Color.WHITE)
        assert board.get_tile(E8) == Piece(PieceType.KING, Color.BLACK)
        assert board.get_tile(H8) == Piece(PieceType.ROOK, Color.BLACK)

    def test_metadata(self, start_position: Position) -> None:
        assert start_position.side_to_move == Color.WHITE
        assert start_position.halfmove_clock == 0
        assert start_position.fullmove_number == 1
        assert start_position.castling == CastlingRights(True, True, True, True)
        assert start_position.en_passant is None

    def test_initial_matches_fen(self, start_position: Position) -> None:
        assert Position.initial() == start_position

    def test_bare_position_is_empty(self, empty_position: Position) -> None:
        assert all(p is None for p in empty_position.board)
        assert empty_position.fullmove_number == 1


class TestApplyFen:
    def test_round_trip(self) -> None:
        fens = [
            STARTING_FEN,
            _SICILIAN,
            "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R b Kq - 12 40",
            "8/4P3/8/8/8/8/4k3/4K3 w - - 0 1",
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
        ]
        for fen in fens:
            assert position_to_fen(position_from_fen(fen)) == fen

    def test_black_to_move(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 B - - 0 1")
        assert pos.side_to_move == Color.BLACK

    def test_unknown_side_defaults_to_white(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="chesskit"):
            pos = position_from_fen("8/8/8/8/8/8/8/8 x - - 0 1")
        assert pos.side_to_move == Color.WHITE
        assert "side-to-move" in caplog.text

    def test_castling_presence(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 w qzK - 0 1")
        assert pos.castling == CastlingRights(True, False, False, True)

    def test_castling_dash(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 w - - 0 1")
        assert pos.castling == CastlingRights.none()

    def test_en_passant_square(self) -> None:
        pos = position_from_fen(_SICILIAN)
        assert pos.en_passant == Coordinate.parse("c6")

    def test_en_passant_cleared(self) -> None:
        pos = position_from_fen(_SICILIAN)
        pos.apply_fen(STARTING_FEN)
        assert pos.en_passant is None

    @pytest.mark.parametrize(
        "square", ["e4", "e1", "e8", "i3", "e", "e33", "33", "D6", "E3"]
    )
    def test_en_passant_bad_square(self, square: str) -> None:
        with pytest.raises(FenError, match="en-passant"):
            position_from_fen(f"8/8/8/8/8/8/8/8 w - {square} 0 1")

    def test_clocks(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 w - - 17 42")
        assert (pos.halfmove_clock, pos.fullmove_number) == (17, 42)

    @pytest.mark.parametrize(
        "halfmove, fullmove",
        [("x", "y"), ("-3", "-2"), ("1.5", "²"), ("4294967296", "99999999999")],
    )
    def test_unparsable_clocks_default_to_zero(self, halfmove: str, fullmove: str) -> None:
        pos = position_from_fen(f"8/8/8/8/8/8/8/8 w - - {halfmove} {fullmove}")
        assert pos.halfmove_clock == 0
        assert pos.fullmove_number == 0

    def test_plus_signed_clocks_parse(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/8 w - - +2 +7")
        assert (pos.halfmove_clock, pos.fullmove_number) == (2, 7)

    def test_clock_defaults_override(self) -> None:
        defaults = ClockDefaults(unparsable_halfmove=0, unparsable_fullmove=1)
        pos = Position.from_fen("8/8/8/8/8/8/8/8 w - - x y", clock_defaults=defaults)
        assert pos.fullmove_number == 1

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "invalid",
            "8/8/8/8/8/8/8/8 w - - 0",
            "8/8/8/8/8/8/8/8 w - - 0 1 extra",
        ],
    )
    def test_wrong_field_count(self, fen: str) -> None:
        pos = Position.initial()
        with pytest.raises(FenError, match="6 fields"):
            pos.apply_fen(fen)
        assert pos == Position.initial()

    def test_bad_placement_leaves_board_cleared(self) -> None:
        pos = Position.initial()
        with pytest.raises(FenError, match="8 ranks"):
            pos.apply_fen("8/8/8/8/8/8/8 b - - 5 9")
        assert all(p is None for p in pos.board)
        assert pos.side_to_move == Color.WHITE
        assert pos.halfmove_clock == 0

    def test_fen_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("invalid")


class TestClear:
    def test_clear_keeps_metadata(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b Kq e3 7 30")
        pos.clear()
        assert all(p is None for p in pos.board)
        assert pos.side_to_move == Color.BLACK
        assert pos.castling == CastlingRights(True, False, False, True)
        assert pos.en_passant == Coordinate.parse("e3")
        assert (pos.halfmove_clock, pos.fullmove_number) == (7, 30)
        assert pos.to_fen() == "8/8/8/8/8/8/8/8 b Kq e3 7 30"


class TestUtilities:
    def test_set_piece(self, empty_position: Position) -> None:
        queen = Piece(PieceType.QUEEN, Color.WHITE)
        empty_position.set_piece(Coordinate.parse("e4"), queen)
        assert empty_position.board.get_tile(E4) == queen
        assert empty_position.board.placement_fen() == "8/8/8/8/4Q3/8/8/8"

    def test_copy_independence(self, start_position: Position) -> None:
        copy = start_position.copy()
        assert copy == start_position
        copy.castling.white_king_side = False
        copy.board.set_tile(E1, None)
        assert start_position.castling.white_king_side
        assert start_position.board.get_tile(E1) is not None
        assert copy != start_position

    def test_str_summary(self) -> None:
        text = str(position_from_fen(_SICILIAN))
        assert "side to move: white" in text
        assert "castling rights: KQkq" in text
        assert "en passant square: c6" in text
        assert "fullmove number: 2" in text
        assert "a b c d e f g h" in text

    def test_repr_is_fen(self, start_position: Position) -> None:
        assert repr(start_position) == f"Position({STARTING_FEN!r})"
