"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.chess.pieces import Color as PieceColor
from src.chess.pieces import PIECE_LETTERS, Piece
from src.chess.position import Position
from src.chess.square import Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

EMPTY_SQUARE = "."

CastlingLetter = str


# --- REQUEST MODELS ---
class DecodeRequest(BaseModel):
    fen: str

    @field_validator("fen")
    @classmethod
    def validate_fen(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("FEN string must not be empty.")
        return value


# --- TRANSPORT MODEL ---
class PositionModel(BaseModel):
    """Transport-safe representation of a Position. Usable both as a response and as an encode request.

    The board holds one string per rank (8th rank first), one character per square: a FEN letter or '.' when empty.
    """

    board: list[str]
    side_to_move: Color
    castling: dict[CastlingLetter, bool]
    en_passant: Optional[str]
    halfmove_clock: int
    fullmove_number: int

    @field_validator("board")
    @classmethod
    def validate_board(cls, value: list[str]) -> list[str]:
        if len(value) != 8 or any(len(rank) != 8 for rank in value):
            raise InvalidRequestError("Board must contain 8 ranks of 8 squares.")

        for rank in value:
            for character in rank:
                if character != EMPTY_SQUARE and character not in PIECE_LETTERS:
                    raise InvalidRequestError(
                        f"Cannot interpret {character!r} in rank {rank!r} as a piece."
                    )
        return value

    @field_validator("castling")
    @classmethod
    def validate_castling(cls, value: dict[str, bool]) -> dict[str, bool]:
        if set(value) != set("KQkq"):
            raise InvalidRequestError("Castling rights must be given for K, Q, k and q.")
        return value

    @field_validator("halfmove_clock", "fullmove_number")
    @classmethod
    def validate_counter(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError("Move counters cannot be negative.")
        return value

    @classmethod
    def from_position(cls, position: Position) -> Self:
        return cls(
            board=[
                "".join(
                    piece.to_fen() if piece is not None else EMPTY_SQUARE
                    for piece in rank
                )
                for rank in position.squares
            ],
            side_to_move=Color[position.side_to_move.name],
            castling={
                direction.value: has_right
                for direction, has_right in position.castling_rights.items()
            },
            en_passant=(
                position.en_passant_target.to_algebraic()
                if position.en_passant_target is not None
                else None
            ),
            halfmove_clock=position.halfmove_clock,
            fullmove_number=position.fullmove_number,
        )

    def to_position(self) -> Position:
        """Board contents were checked on validation, only the en passant square can still fail (FENParseError)."""
        squares = tuple(
            tuple(
                Piece.from_fen(character) if character != EMPTY_SQUARE else None
                for character in rank
            )
            for rank in self.board
        )
        return Position(
            squares=squares,
            side_to_move=PieceColor[self.side_to_move.name],
            white_kingside=self.castling["K"],
            white_queenside=self.castling["Q"],
            black_kingside=self.castling["k"],
            black_queenside=self.castling["q"],
            en_passant_target=(
                Square.from_algebraic(self.en_passant)
                if self.en_passant is not None
                else None
            ),
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )


# --- RESPONSE MODELS ---
class DecodeResponse(BaseModel):
    fen: str
    position: PositionModel


class EncodeResponse(BaseModel):
    fen: str
