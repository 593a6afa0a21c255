"""
Entry points for reading and writing FEN strings.

decode(fen) -> Position raises a FENParseError subclass naming the first problem found.
encode(position) -> str never fails for a Position that came out of decode (or was built with 8x8 squares).
"""

import logging

from src.chess.position import STARTING_FEN, Position
from src.core.exceptions import FENParseError

__all__ = ["STARTING_FEN", "Position", "decode", "encode", "is_valid_fen"]

logger = logging.getLogger(__name__)


def decode(fen: str) -> Position:
    try:
        position = Position.from_fen(fen)
    except FENParseError as e:
        logger.debug("Rejected FEN %r (%s): %s", fen, e.field, e)
        raise
    logger.debug("Decoded FEN %r", fen)
    return position


def encode(position: Position) -> str:
    return position.to_fen()


def is_valid_fen(fen: str) -> bool:
    """Check if given string follows proper FEN notation."""
    try:
        decode(fen)
    except FENParseError:
        return False
    return True
