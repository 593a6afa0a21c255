"""Piece placement: the first field of a FEN string, and the grid of squares it describes."""

from typing import Optional

from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import (
    InvalidRankSymbolError,
    MalformedBoardError,
    MalformedRankError,
)

Rank = tuple[Optional[Piece], ...]
Squares = tuple[Rank, ...]

EMPTY_RUN_LENGTHS = "12345678"


def squares_from_fen(placement: str) -> Squares:
    """Construct the grid of squares from the piece placement part of a FEN string.

    ex. standard starting position:
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
    means:
    * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
    * pawns cover 7th rank entirely
    * ranks 6 through 3 have 8 consecutive empty squares
    * rank 2 are the white pawns (capital letters)
    * 1st rank are the white pieces.

    The ranks are kept in the order they are written, so squares[0] is the 8th rank.
    """
    ranks = tuple(_rank_from_fen(rank_fen) for rank_fen in placement.split("/"))
    if len(ranks) != BOARD_DIMENSIONS[1]:
        raise MalformedBoardError(len(ranks))
    return ranks


def _rank_from_fen(rank_fen: str) -> Rank:
    """Squares of a single rank, a-file first."""
    rank: list[Optional[Piece]] = []
    for character in rank_fen:
        if character in EMPTY_RUN_LENGTHS:
            # A number denotes the amount of empty squares after each other
            rank.extend([None] * int(character))
        elif character.isalpha():
            rank.append(Piece.from_fen(character))
        else:
            raise InvalidRankSymbolError(character)

    if len(rank) != BOARD_DIMENSIONS[0]:
        raise MalformedRankError(rank_fen, len(rank))
    return tuple(rank)


def squares_to_fen(squares: Squares) -> str:
    """Ranks are separated by slashes in FEN string."""
    return "/".join(_rank_to_fen(rank) for rank in squares)


def _rank_to_fen(rank: Rank) -> str:
    """FEN string of a single rank"""
    fen_characters: list[str] = []
    empty_count = 0
    for piece in rank:
        if piece is not None:
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())
        else:
            empty_count += 1

    # if the entire rank is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)


def piece_at(squares: Squares, square: Square) -> Optional[Piece]:
    """Look up a square by its 0-based coordinate (rank 0 is the 1st rank, stored last)."""
    return squares[BOARD_DIMENSIONS[1] - 1 - square.rank][square.file]


def empty_squares() -> Squares:
    return tuple((None,) * BOARD_DIMENSIONS[0] for _ in range(BOARD_DIMENSIONS[1]))
