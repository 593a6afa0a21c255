"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidRankSymbolError


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# every character that stands for a piece in a FEN string, both colors
PIECE_LETTERS = frozenset(FEN_TO_PIECE) | frozenset(
    letter.upper() for letter in FEN_TO_PIECE
)


DISPLAY_SYMBOLS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True)
class Piece:
    color: Color
    kind: PieceType

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character not in PIECE_LETTERS:
            raise InvalidRankSymbolError(character)
        color = Color.WHITE if character.isupper() else Color.BLACK
        return cls(color, FEN_TO_PIECE[character.lower()])

    def to_fen(self) -> str:
        letter = PIECE_TO_FEN[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    def to_display_symbol(self) -> str:
        """Unicode chess glyph, for printing a board to a terminal."""
        return DISPLAY_SYMBOLS[(self.color, self.kind)]
