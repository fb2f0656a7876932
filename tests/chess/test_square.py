"""Unit tests for /src/chess/square.py"""

from string import ascii_lowercase

import pytest

from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import OutOfRangeError


@pytest.mark.parametrize(
    "rank, file, notation",
    [
        (rank, file, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(rank: int, file: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to rank 1, file 1, etc."""
    square = Square.from_algebraic(notation)
    assert square.rank == rank
    assert square.file == file
    assert square.to_algebraic() == notation


@pytest.mark.parametrize("notation", ["a9", "i1", "z0", "e", "e10", "11"])
def test_invalid_algebraic_notation(notation: str) -> None:
    """Off the board, or not a square name at all"""
    with pytest.raises(OutOfRangeError):
        Square.from_algebraic(notation)


def test_square_within_bounds() -> None:
    """happy case: all 64 squares"""
    squares = all_squares()
    assert len(squares) == BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
    assert all(square.is_within_bounds() for square in squares)
    assert squares[0] == Square(1, 1)
    assert squares[-1] == Square(8, 8)


@pytest.mark.parametrize("rank, file", [(0, 1), (1, 0), (9, 4), (4, 9), (-1, -1)])
def test_square_out_of_bounds(rank: int, file: int) -> None:
    square = Square(rank, file)
    assert not square.is_within_bounds()
    with pytest.raises(OutOfRangeError):
        square.ensure_within_bounds()


def test_offset() -> None:
    """Offsets are (d_rank, d_file) and may walk off the board"""
    assert Square(1, 2).offset(2, 1) == Square(3, 3)
    assert not Square(1, 2).offset(-1, 0).is_within_bounds()
