"""
Exceptions raised across layers.

Everything that can go wrong while reading a FEN string derives from FENParseError, so callers can catch one type.
"""


class ChessError(Exception):
    """Base class for all errors raised by this package."""


class InvalidRequestError(ChessError):
    """A boundary model was given data it cannot accept."""


class FENParseError(ChessError):
    """A FEN string could not be decoded. `field` names the part of the FEN that failed."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(FENParseError):
    """Fewer than six whitespace-separated fields."""

    def __init__(self, field: str) -> None:
        super().__init__(f"FEN is missing the {field} field.", field)


class InvalidSideToMoveError(FENParseError):
    def __init__(self, token: str) -> None:
        super().__init__(
            f"Side to move must be 'w' or 'b', got {token!r}.", "side to move"
        )


class InvalidRankSymbolError(FENParseError):
    """Unknown character, or an empty-square count outside 1-8."""

    def __init__(self, symbol: str) -> None:
        super().__init__(
            f"Cannot interpret {symbol!r} in the piece placement.", "piece placement"
        )


class MalformedRankError(FENParseError):
    def __init__(self, rank_fen: str, num_squares: int) -> None:
        super().__init__(
            f"Rank {rank_fen!r} describes {num_squares} squares instead of 8.",
            "piece placement",
        )


class MalformedBoardError(FENParseError):
    def __init__(self, num_ranks: int) -> None:
        super().__init__(
            f"Piece placement describes {num_ranks} ranks instead of 8.",
            "piece placement",
        )


class InvalidColumnError(FENParseError):
    def __init__(self, square: str) -> None:
        super().__init__(f"Invalid file in square {square!r}.", "en passant square")


class InvalidRowError(FENParseError):
    def __init__(self, square: str) -> None:
        super().__init__(f"Invalid rank in square {square!r}.", "en passant square")


class InvalidNumberError(FENParseError):
    """Move counters must be unsigned decimal integers."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            f"The {field} must be a non-negative integer, got {value!r}.", field
        )
