import pytest
from pydantic import ValidationError

from src.api.models import DecodeRequest, PositionModel
from src.chess.position import STARTING_FEN, Position
from src.core.exceptions import InvalidRequestError, InvalidRowError
from src.core.shared_types import Color

STARTING_BOARD = [
    "rnbqkbnr",
    "pppppppp",
    "........",
    "........",
    "........",
    "........",
    "PPPPPPPP",
    "RNBQKBNR",
]


def _model_kwargs(**overrides) -> dict:
    kwargs = {
        "board": STARTING_BOARD,
        "side_to_move": Color.WHITE,
        "castling": {"K": True, "Q": True, "k": True, "q": True},
        "en_passant": None,
        "halfmove_clock": 0,
        "fullmove_number": 1,
    }
    kwargs.update(overrides)
    return kwargs


# -- Validation - DecodeRequest --
def test_decode_request_strips_whitespace() -> None:
    request = DecodeRequest(fen=f"  {STARTING_FEN}\n")
    assert request.fen == STARTING_FEN


@pytest.mark.parametrize("fen", ["", "   ", "\n"])
def test_decode_request_rejects_empty_fen(fen: str) -> None:
    with pytest.raises(InvalidRequestError):
        DecodeRequest(fen=fen)


def test_decode_request_requires_a_string() -> None:
    with pytest.raises(ValidationError):
        DecodeRequest(fen=None)  # type: ignore[arg-type]


# -- Conversion - PositionModel --
def test_from_position(starting_position: Position) -> None:
    model = PositionModel.from_position(starting_position)
    assert model.board == STARTING_BOARD
    assert model.side_to_move == Color.WHITE
    assert model.castling == {"K": True, "Q": True, "k": True, "q": True}
    assert model.en_passant is None
    assert model.halfmove_clock == 0
    assert model.fullmove_number == 1


def test_to_position(starting_position: Position) -> None:
    assert PositionModel(**_model_kwargs()).to_position() == starting_position


def test_en_passant_and_black_to_move() -> None:
    position = Position.from_fen(
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b Kq e3 0 1"
    )
    model = PositionModel.from_position(position)
    assert model.en_passant == "e3"
    assert model.side_to_move == Color.BLACK
    assert model.castling == {"K": True, "Q": False, "k": False, "q": True}
    assert model.to_position() == position


def test_model_survives_json(starting_position: Position) -> None:
    model = PositionModel.from_position(starting_position)
    restored = PositionModel.model_validate_json(model.model_dump_json())
    assert restored.to_position() == starting_position


# -- Validation - PositionModel --
@pytest.mark.parametrize(
    "board",
    [
        STARTING_BOARD[:7],  # missing rank
        STARTING_BOARD[:7] + ["RNBQKBN"],  # short rank
        STARTING_BOARD + ["........"],  # additional rank
    ],
)
def test_invalid_board_shape(board: list[str]) -> None:
    with pytest.raises(InvalidRequestError):
        PositionModel(**_model_kwargs(board=board))


def test_missing_castling_right() -> None:
    with pytest.raises(InvalidRequestError):
        PositionModel(**_model_kwargs(castling={"K": True, "Q": True, "k": True}))


def test_negative_counter() -> None:
    with pytest.raises(InvalidRequestError):
        PositionModel(**_model_kwargs(halfmove_clock=-1))


@pytest.mark.parametrize("last_rank", ["RNBQKBNX", "RNBQ\u212aBNR", "RNBQKBN8"])
def test_unknown_piece_letter(last_rank: str) -> None:
    """Only FEN piece letters and '.' are accepted on the board"""
    with pytest.raises(InvalidRequestError):
        PositionModel(**_model_kwargs(board=STARTING_BOARD[:7] + [last_rank]))


def test_invalid_en_passant_on_conversion() -> None:
    model = PositionModel(**_model_kwargs(en_passant="e9"))
    with pytest.raises(InvalidRowError):
        model.to_position()
