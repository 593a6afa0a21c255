"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidColumnError, InvalidRowError

# (files, ranks)
BOARD_DIMENSIONS = (8, 8)

FILE_NAMES = ascii_lowercase[: BOARD_DIMENSIONS[0]]
RANK_NAMES = "".join(str(rank) for rank in range(1, BOARD_DIMENSIONS[1] + 1))


@dataclass(frozen=True)
class Square:
    """Both coordinates are 0-based: a1 is (0, 0), h8 is (7, 7)."""

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)

        The rank character is checked before the file character.
        """
        if len(sq) != 2 or sq[1] not in RANK_NAMES:
            raise InvalidRowError(sq)
        if sq[0] not in FILE_NAMES:
            raise InvalidColumnError(sq)
        return cls(FILE_NAMES.index(sq[0]), RANK_NAMES.index(sq[1]))

    def to_algebraic(self) -> str:
        return f"{FILE_NAMES[self.file]}{RANK_NAMES[self.rank]}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )
