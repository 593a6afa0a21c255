"""Orchestration between the boundary models and the FEN codec (in both directions)."""

import logging

from src.api.models import DecodeRequest, DecodeResponse, EncodeResponse, PositionModel
from src.chess.fen import decode, encode

logger = logging.getLogger(__name__)


class FenService:
    """Stateless: every call only reads its own request."""

    def decode(self, request: DecodeRequest) -> DecodeResponse:
        """Read a FEN string into its transport-safe representation. FENParseError propagates to the caller."""
        logger.info("Decoding FEN %r", request.fen)
        position = decode(request.fen)

        # echo the canonical form, which can differ from the request in whitespace
        return DecodeResponse(
            fen=encode(position), position=PositionModel.from_position(position)
        )

    def encode(self, model: PositionModel) -> EncodeResponse:
        """Write a FEN string for the given position."""
        fen = encode(model.to_position())
        logger.info("Encoded position as %r", fen)
        return EncodeResponse(fen=fen)
