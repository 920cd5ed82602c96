"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesskit.core import STARTING_FEN, Position


@pytest.fixture
def start_position() -> Position:
    """A freshly decoded standard starting position."""
    return Position.from_fen(STARTING_FEN)


@pytest.fixture
def empty_position() -> Position:
    return Position()
