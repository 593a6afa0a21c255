"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.chess.position import STARTING_FEN, Position

EMPTY_BOARD = "/".join(["8"] * 8)


@pytest.fixture
def starting_position() -> Position:
    return Position.from_fen(STARTING_FEN)


@pytest.fixture
def empty_board() -> str:
    """Piece placement of a board without any pieces. Handy to test the other FEN fields in isolation."""
    return EMPTY_BOARD
