"""
Attacking rules
---

A square is threatened by a side when any piece of that side has it among its candidate squares.
Because the movement rules only produce a square holding a piece if that piece can be captured, this reads as
"could be taken on the opponent's next move" (turn order and checks are ignored).
"""

from typing import Optional

from src.chess.board import Board
from src.chess.moves import moves_for
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import EmptySquareError
from src.core.shared_types import Color, PieceType


def attackers_of(square: Square, by_color: Color, board: Board) -> list[Piece]:
    """All pieces of `by_color` that can move to (or take on) the square, in roster order"""
    square.ensure_within_bounds()
    return [piece for piece in board.pieces(by_color) if square in moves_for(piece, board)]


def is_threatened(square: Square, by_color: Color, board: Board) -> bool:
    square.ensure_within_bounds()
    return any(square in moves_for(piece, board) for piece in board.pieces(by_color))


def guards_of(square: Square, by_color: Color, board: Board) -> list[Piece]:
    """
    Pieces of `by_color` that could take back on the square if the piece standing there got captured.
    ----

    Simulated on a snapshot:
    1. take the piece off the square
    2. put a piece of the other side on it (the capturer that just arrived)
    3. ask who of `by_color` attacks the square now

    Step 2 matters for pawns: they can only take diagonally, and cannot take back by pushing forward.
    """
    occupant = board.piece_at(square)
    if occupant is None:
        raise EmptySquareError(f"No piece on {square.to_algebraic()} to guard.")

    after_capture = board.snapshot()
    after_capture.remove_piece(square)
    after_capture.place_piece(Piece(PieceType.PAWN, by_color.opponent, square))
    return attackers_of(square, by_color, after_capture)


def guarding_piece(square: Square, by_color: Color, board: Board) -> Optional[Piece]:
    """The first guard found (in roster order), if any"""
    guards = guards_of(square, by_color, board)
    return guards[0] if guards else None


def threatened_pieces(color: Color, board: Board) -> list[Piece]:
    """Pieces of `color` the opponent could take right now"""
    return [
        piece
        for piece in board.pieces(color)
        if is_threatened(piece.position, color.opponent, board)
    ]
