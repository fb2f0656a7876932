"""Unit tests for /src/chess/threats.py"""

import pytest

from src.chess.board import Board, initial_board
from src.chess.pieces import Piece
from src.chess.square import Square
from src.chess.threats import (
    attackers_of,
    guarding_piece,
    guards_of,
    is_threatened,
    threatened_pieces,
)
from src.core.exceptions import EmptySquareError, OutOfRangeError
from src.core.shared_types import Color, PieceType


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


def test_nothing_threatened_at_the_start() -> None:
    board = initial_board()
    for color in Color:
        assert threatened_pieces(color, board) == []


def test_empty_square_threatened_by_moves() -> None:
    """An empty square counts as threatened when a piece could move onto it"""
    board = initial_board()
    assert is_threatened(sq("f3"), Color.WHITE, board)
    assert not is_threatened(sq("e4"), Color.BLACK, board)
    assert not is_threatened(sq("e5"), Color.WHITE, board)


def test_attackers_in_roster_order() -> None:
    queen = Piece(PieceType.QUEEN, Color.BLACK, sq("e5"))
    rook = Piece(PieceType.ROOK, Color.WHITE, sq("e1"))
    knight = Piece(PieceType.KNIGHT, Color.WHITE, sq("f3"))
    pawn = Piece(PieceType.PAWN, Color.WHITE, sq("d4"))
    board = Board.from_pieces([rook, knight, pawn, queen])

    assert attackers_of(sq("e5"), Color.WHITE, board) == [rook, knight, pawn]
    assert is_threatened(sq("e5"), Color.WHITE, board)


def test_blocked_attacker_does_not_count() -> None:
    queen = Piece(PieceType.QUEEN, Color.BLACK, sq("e5"))
    rook = Piece(PieceType.ROOK, Color.WHITE, sq("e1"))
    blocker = Piece(PieceType.BISHOP, Color.BLACK, sq("e3"))
    board = Board.from_pieces([rook, queen, blocker])

    assert attackers_of(sq("e5"), Color.WHITE, board) == []
    assert not is_threatened(sq("e5"), Color.WHITE, board)
    assert attackers_of(sq("e3"), Color.WHITE, board) == [rook]


def test_own_piece_is_never_attacked_by_own_side() -> None:
    board = initial_board()
    assert attackers_of(sq("e2"), Color.WHITE, board) == []


def test_pawn_threatens_diagonally_not_forward() -> None:
    pawn = Piece(PieceType.PAWN, Color.WHITE, sq("d4"))
    knight = Piece(PieceType.KNIGHT, Color.BLACK, sq("d5"))
    bishop = Piece(PieceType.BISHOP, Color.BLACK, sq("c5"))
    board = Board.from_pieces([pawn, knight, bishop])

    assert not is_threatened(sq("d5"), Color.WHITE, board)
    assert is_threatened(sq("c5"), Color.WHITE, board)
    assert threatened_pieces(Color.BLACK, board) == [bishop]


def test_out_of_range_square() -> None:
    with pytest.raises(OutOfRangeError):
        is_threatened(Square(9, 1), Color.WHITE, initial_board())
    with pytest.raises(OutOfRangeError):
        attackers_of(Square(0, 0), Color.BLACK, initial_board())


# --- GUARDS ---
def test_guarding_piece_found() -> None:
    """The knight on e5 is attacked by the rook, and the d4 pawn could take back"""
    knight = Piece(PieceType.KNIGHT, Color.WHITE, sq("e5"))
    pawn = Piece(PieceType.PAWN, Color.WHITE, sq("d4"))
    rook = Piece(PieceType.ROOK, Color.BLACK, sq("e8"))
    board = Board.from_pieces([knight, pawn, rook])

    assert threatened_pieces(Color.WHITE, board) == [knight]
    assert guarding_piece(sq("e5"), Color.WHITE, board) == pawn


def test_sliding_guard_behind_the_piece() -> None:
    rook = Piece(PieceType.ROOK, Color.WHITE, sq("a1"))
    bishop = Piece(PieceType.BISHOP, Color.WHITE, sq("a4"))
    board = Board.from_pieces([rook, bishop])
    assert guards_of(sq("a4"), Color.WHITE, board) == [rook]


def test_pawn_cannot_guard_the_square_in_front() -> None:
    """A pawn only takes diagonally, so it does not guard the square it could push to"""
    pawn = Piece(PieceType.PAWN, Color.WHITE, sq("d3"))
    knight = Piece(PieceType.KNIGHT, Color.WHITE, sq("d4"))
    board = Board.from_pieces([pawn, knight])
    assert guarding_piece(sq("d4"), Color.WHITE, board) is None


def test_unguarded_piece() -> None:
    knight = Piece(PieceType.KNIGHT, Color.WHITE, sq("h5"))
    rook = Piece(PieceType.ROOK, Color.WHITE, sq("a1"))
    board = Board.from_pieces([knight, rook])
    assert guarding_piece(sq("h5"), Color.WHITE, board) is None


def test_guard_lookup_leaves_board_alone() -> None:
    board = initial_board()
    before = board.snapshot()
    # NOTE: the king only steps orthogonally in this rule set, so it does not guard d2
    guards = guards_of(sq("d2"), Color.WHITE, board)
    assert [guard.kind for guard in guards] == [
        PieceType.KNIGHT,
        PieceType.BISHOP,
        PieceType.QUEEN,
    ]
    assert board == before


def test_guarding_an_empty_square() -> None:
    with pytest.raises(EmptySquareError):
        guarding_piece(sq("e4"), Color.WHITE, initial_board())
