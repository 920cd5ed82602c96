"""chesskit — canonical in-memory chess position model and FEN codec."""

__version__ = "0.1.0"
