"""Defines the types of chess pieces"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from src.chess.square import Square
from src.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


# NOTE: bishop and knight are worth the same
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 10,
}

# Order of the pieces on the back rank, starting on the a-file
BACK_RANK_ORDER: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True)
class Piece:
    """
    Plain record of a piece standing on the board.

    No behaviour is attached: the movement rules live in moves.py and operate on (Piece, Board) pairs.
    Moving a piece means replacing the record with one that has the new position (see Board.apply_move).
    """

    kind: PieceType
    side: Color
    position: Square
    value: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", PIECE_VALUES[self.kind])

    @classmethod
    def from_fen(cls, character: str, position: Square) -> Self:
        # lower case: Black pieces, upper case: White pieces
        side = Color.WHITE if character.isupper() else Color.BLACK
        kind = FEN_TO_PIECE[character.lower()]
        return cls(kind, side, position)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.side == Color.WHITE
            else PIECE_TO_FEN[self.kind].lower()
        )

    def moved_to(self, square: Square) -> Piece:
        """Same piece, new position"""
        return Piece(self.kind, self.side, square)
