"""Console entry point: decode a FEN and print what the model sees."""

from __future__ import annotations

import argparse
import logging
import sys

from chesskit.core import STARTING_FEN, ChessModelError, Position

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesskit",
        description="Decode a FEN record and print the resulting position.",
    )
    parser.add_argument(
        "fen",
        nargs="*",
        help="FEN record (fields may be passed as separate arguments); "
        "defaults to the starting position",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, print the position summary and its FEN; return an exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    fen_text = " ".join(args.fen) if args.fen else STARTING_FEN
    try:
        position = Position.from_fen(fen_text)
    except ChessModelError as exc:
        _LOGGER.error("Could not decode FEN: %s", exc)
        return 1

    print(position)
    print(position.to_fen())
    return 0


def main() -> None:
    """Launch the chesskit inspector."""
    sys.exit(run())


if __name__ == "__main__":
    main()
