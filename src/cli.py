"""Decode a FEN string, show what it describes and encode it back again."""

import argparse
import logging
import sys
from typing import Optional

from src.api.models import EMPTY_SQUARE, DecodeRequest, PositionModel
from src.chess.pieces import Piece
from src.core.config import LOG_FORMAT, Settings
from src.core.exceptions import ChessError
from src.services.fen_service import FenService

logger = logging.getLogger("fen-codec")


def render_board(model: PositionModel, symbols: bool = False) -> str:
    """One line per rank (8th rank on top) with rank numbers on the left and file letters underneath."""
    lines = []
    for rank_idx, rank in enumerate(model.board):
        cells = [
            Piece.from_fen(character).to_display_symbol()
            if symbols and character != EMPTY_SQUARE
            else character
            for character in rank
        ]
        lines.append(f"{len(model.board) - rank_idx} {' '.join(cells)}")
    lines.append("  a b c d e f g h")
    return "\n".join(lines)


def render_fields(model: PositionModel) -> str:
    castling = "".join(letter for letter, has_right in model.castling.items() if has_right)
    return "\n".join(
        [
            f"Side to move:    {model.side_to_move}",
            f"Castling rights: {castling or 'none'}",
            f"En passant:      {model.en_passant or 'none'}",
            f"Halfmove clock:  {model.halfmove_clock}",
            f"Fullmove number: {model.fullmove_number}",
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fen-codec",
        description="Decode a FEN string, print the position and the re-encoded FEN.",
    )
    parser.add_argument(
        "fen",
        nargs="?",
        default=None,
        help="FEN string (quote it). Defaults to $FEN_DEFAULT_FEN or the starting position.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $FEN_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--symbols",
        action="store_true",
        help="Draw pieces as Unicode chess glyphs instead of FEN letters",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        if args.log_level is not None:
            settings = Settings(log_level=args.log_level, default_fen=settings.default_fen)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    fen = args.fen if args.fen is not None else settings.default_fen
    service = FenService()
    try:
        response = service.decode(DecodeRequest(fen=fen))
    except ChessError as e:
        logger.debug("Could not decode %r", fen, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_board(response.position, symbols=args.symbols))
    print()
    print(render_fields(response.position))
    print()
    print(response.fen)
    return 0


if __name__ == "__main__":
    sys.exit(main())
