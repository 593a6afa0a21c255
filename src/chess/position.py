"""
Representation of a single position on the board. Everything that can be encoded in a FEN string.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.board import Squares, squares_from_fen, squares_to_fen
from src.chess.castling import CastlingDirection, castling_from_fen, castling_to_fen
from src.chess.pieces import Color
from src.chess.square import Square
from src.core.exceptions import (
    InvalidNumberError,
    InvalidSideToMoveError,
    MissingFieldError,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
NO_EN_PASSANT_SQUARE = "-"

# names of the six FEN fields, in the order they are written
FEN_FIELDS: tuple[str, ...] = (
    "piece placement",
    "side to move",
    "castling rights",
    "en passant square",
    "halfmove clock",
    "fullmove number",
)

COLOR_CODES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
COLOR_TO_CODE: dict[Color, str] = {value: key for key, value in COLOR_CODES.items()}

# counters are stored as unsigned 32-bit numbers
MAX_MOVE_COUNTER = 2**32 - 1


def parse_move_counter(counter: str, field: str) -> int:
    """Counters are unsigned decimal numbers: no sign, no whitespace, ASCII digits only."""
    if not (counter.isascii() and counter.isdigit()):
        raise InvalidNumberError(field, counter)
    # length check first: int() refuses very long digit strings
    significant = counter.lstrip("0") or "0"
    if (
        len(significant) > len(str(MAX_MOVE_COUNTER))
        or int(significant) > MAX_MOVE_COUNTER
    ):
        raise InvalidNumberError(field, counter)
    return int(significant)


@dataclass(frozen=True)
class Position:
    """
    Data that can be constructed from a FEN string.
    ----

    FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.
    The purpose of FEN is to provide all the necessary information to restart a game from a particular position.

    <piece placement> <active color> <castling rights> <en passant square> <half move clock> <full move number>

    * The piece placement is described in src/chess/board.py
    * The active color is either "w" or "b"
    * Castling rights are denoted as "k" for king-side or "q" for queen-side. Capital letters for the white pieces, small letters for the black pieces.
        In the starting position: KQkq (all rights available). A "-" is used once all rights have been revoked.
    * The en passant square is the square a pawn skipped over with its last double step. If not available a "-" is used.
    * The half move clock counts the number of moves made since the last pawn move or capture. (Used for the fifty-move rule)
    * The full move number starts at 1 and increments after every move black makes.

    ex) The standard starting position has a FEN
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
    i.e. it is white to move, all castling options available, no en passant square, no half moves and we are in the first turn.
    """

    squares: Squares
    side_to_move: Color
    white_kingside: bool
    white_queenside: bool
    black_kingside: bool
    black_queenside: bool
    en_passant_target: Optional[Square]
    halfmove_clock: int
    fullmove_number: int

    def __post_init__(self) -> None:
        if (
            self.en_passant_target is not None
            and not self.en_passant_target.is_within_bounds()
        ):
            raise ValueError(
                f"En passant target {self.en_passant_target} is not on the board."
            )

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data. The first problem found is raised, fields are checked left to right."""
        # FEN is whitespace separated. Anything after the sixth field is ignored
        fields = fen.split()
        for index, name in enumerate(FEN_FIELDS):
            if index >= len(fields):
                raise MissingFieldError(name)
        (
            placement,
            active_color,
            castling_str,
            en_passant_algebraic,
            half_move_clock,
            full_move_number,
        ) = fields[: len(FEN_FIELDS)]

        squares = squares_from_fen(placement)

        if active_color not in COLOR_CODES:
            raise InvalidSideToMoveError(active_color)

        castling_rights = castling_from_fen(castling_str)

        en_passant_target = (
            Square.from_algebraic(en_passant_algebraic)
            if en_passant_algebraic != NO_EN_PASSANT_SQUARE
            else None
        )

        return cls(
            squares=squares,
            side_to_move=COLOR_CODES[active_color],
            white_kingside=castling_rights[CastlingDirection.WHITE_KING_SIDE],
            white_queenside=castling_rights[CastlingDirection.WHITE_QUEEN_SIDE],
            black_kingside=castling_rights[CastlingDirection.BLACK_KING_SIDE],
            black_queenside=castling_rights[CastlingDirection.BLACK_QUEEN_SIDE],
            en_passant_target=en_passant_target,
            halfmove_clock=parse_move_counter(half_move_clock, FEN_FIELDS[4]),
            fullmove_number=parse_move_counter(full_move_number, FEN_FIELDS[5]),
        )

    def to_fen(self) -> str:
        """reverse operation: write a FEN from the given data"""
        en_passant_algebraic = (
            self.en_passant_target.to_algebraic()
            if self.en_passant_target is not None
            else NO_EN_PASSANT_SQUARE
        )
        return " ".join(
            [
                squares_to_fen(self.squares),
                COLOR_TO_CODE[self.side_to_move],
                castling_to_fen(self.castling_rights),
                en_passant_algebraic,
                str(self.halfmove_clock),
                str(self.fullmove_number),
            ]
        )

    @property
    def castling_rights(self) -> dict[CastlingDirection, bool]:
        return {
            CastlingDirection.WHITE_KING_SIDE: self.white_kingside,
            CastlingDirection.WHITE_QUEEN_SIDE: self.white_queenside,
            CastlingDirection.BLACK_KING_SIDE: self.black_kingside,
            CastlingDirection.BLACK_QUEEN_SIDE: self.black_queenside,
        }

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)
