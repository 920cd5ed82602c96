"""Core domain layer — the chess position model with zero external dependencies.

Quick start::

    from chesskit.core import Position, STARTING_FEN

    pos = Position.from_fen(STARTING_FEN)
    print(pos)
    print(pos.to_fen())
"""

from chesskit.core.board import Board, Selection, SelectionColor
from chesskit.core.castling import CastlingRights
from chesskit.core.enums import Color, PieceType
from chesskit.core.errors import ChessModelError, FenError, SquareParseError
from chesskit.core.fen import STARTING_FEN, STARTING_PLACEMENT, ClockDefaults
from chesskit.core.move import Move, MoveRecord, format_move_list
from chesskit.core.piece import Piece
from chesskit.core.position import Position, position_from_fen, position_to_fen
from chesskit.core.types import (
    Coordinate,
    Tile,
    file_of,
    make_tile,
    parse_coordinate,
    parse_tile,
    rank_of,
    tile_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Coordinate",
    "Tile",
    "file_of",
    "make_tile",
    "parse_coordinate",
    "parse_tile",
    "rank_of",
    "tile_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "Move",
    "MoveRecord",
    "Piece",
    "Position",
    "Selection",
    "SelectionColor",
    "format_move_list",
    # Errors
    "ChessModelError",
    "FenError",
    "SquareParseError",
    # FEN
    "STARTING_FEN",
    "STARTING_PLACEMENT",
    "ClockDefaults",
    "position_from_fen",
    "position_to_fen",
]
