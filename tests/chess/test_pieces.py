"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Color, Piece, PieceType
from src.chess.square import Square

E4 = Square(4, 5)


@pytest.mark.parametrize(
    "piece_type, value",
    [
        (PieceType.KING, 10),
        (PieceType.QUEEN, 9),
        (PieceType.ROOK, 5),
        (PieceType.BISHOP, 3),
        (PieceType.KNIGHT, 3),
        (PieceType.PAWN, 1),
    ],
)
def test_piece_values(piece_type: PieceType, value: int) -> None:
    """Fixed per kind. NOTE: bishop is worth the same as a knight"""
    assert Piece(piece_type, Color.WHITE, E4).value == value
    assert Piece(piece_type, Color.BLACK, E4).value == value


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char, E4)
    assert piece.kind == FEN_TO_PIECE[char.lower()]
    assert piece.side == Color.WHITE
    assert piece.position == E4


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char, E4)
    assert piece.kind == FEN_TO_PIECE[char.lower()]
    assert piece.side == Color.BLACK


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(piece_type, Color.WHITE, E4).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(piece_type, Color.BLACK, E4).to_fen() == PIECE_TO_FEN[piece_type].lower()


def test_piece_is_immutable() -> None:
    """Moving creates a new record, the old one stays as it was"""
    piece = Piece(PieceType.KNIGHT, Color.WHITE, Square(1, 2))
    moved = piece.moved_to(Square(3, 3))
    assert moved == Piece(PieceType.KNIGHT, Color.WHITE, Square(3, 3))
    assert piece.position == Square(1, 2)
    with pytest.raises(AttributeError):
        piece.position = Square(3, 3)  # type: ignore[misc]
