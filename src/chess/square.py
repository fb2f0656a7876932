"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import OutOfRangeError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    rank: int
    file: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        if len(sq) != 2 or not sq[0].isalpha() or not sq[1].isdigit():
            raise OutOfRangeError(f"Cannot interpret {sq!r} as a square name.")
        file = ord(sq[0].lower()) - ord("a") + 1
        rank = int(sq[1])
        return cls(rank, file).ensure_within_bounds()

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.rank <= BOARD_DIMENSIONS[1]) and (
            1 <= self.file <= BOARD_DIMENSIONS[0]
        )

    def ensure_within_bounds(self) -> Square:
        """Return the square itself, or raise if it is not on the board"""
        if not self.is_within_bounds():
            raise OutOfRangeError(
                f"Square (rank={self.rank}, file={self.file}) is not on the board."
            )
        return self

    def offset(self, d_rank: int, d_file: int) -> Square:
        """The square shifted by the given vector. May lie outside the board: check before using it!"""
        return Square(self.rank + d_rank, self.file + d_file)


def all_squares() -> list[Square]:
    """Every square, rank by rank starting at a1"""
    return [
        Square(rank, file)
        for rank in range(1, BOARD_DIMENSIONS[1] + 1)
        for file in range(1, BOARD_DIMENSIONS[0] + 1)
    ]
