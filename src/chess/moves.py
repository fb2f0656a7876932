"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the candidate destination squares for each piece type.

This is a reduced rule set: no castling, en passant, promotion or pins, and the king only steps orthogonally.
All functions here are pure: they read the board, never change it.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import EmptySquareError, OutOfRangeError
from src.core.shared_types import Color, PieceType


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, square: Square) -> Optional[Piece]: ...


# (d_rank, d_file)
Vector = tuple[int, int]

STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made. Just data: applying it is up to the Board."""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface style notation: <from_square><to_square>

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "b1c3": the knight jumps from b1 to c3
        """
        if len(uci) != 4:
            raise OutOfRangeError(f"Invalid UCI notation: {uci!r}, expected <from_square><to_square>.")
        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"


def _is_opponent(piece: Optional[Piece], player_color: Color) -> bool:
    return piece is not None and piece.side != player_color


# --- MOVEMENT RULES ---
def raycasting_move(piece: Piece, board: Board, directions: list[Vector]) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.

    Every direction is walked on its own: a blocked ray does not stop any of the other rays.
    """
    squares: list[Square] = []
    for d_rank, d_file in directions:
        target_square = piece.position
        while True:
            target_square = target_square.offset(d_rank, d_file)
            if not target_square.is_within_bounds():
                break

            occupant = board.piece_at(target_square)
            if occupant is not None:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if _is_opponent(occupant, piece.side):
                    squares.append(target_square)
                break

            squares.append(target_square)
    return squares


def single_step_move(piece: Piece, board: Board, deltas: list[Vector]) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just can move a single step along a direction"""
    squares: list[Square] = []
    for d_rank, d_file in deltas:
        target_square = piece.position.offset(d_rank, d_file)
        if not target_square.is_within_bounds():
            continue

        occupant = board.piece_at(target_square)
        if occupant is None or occupant.side != piece.side:
            squares.append(target_square)
    return squares


def candidate_pawn_moves(piece: Piece, board: Board) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, if that square is empty.
    - It can move by two in their first move (so when on their starting rank), if both squares are empty
    - takes diagonally (forward), only onto a square holding an opponent's piece
    """
    # Pawn pushes : Black moves down the board, White moves up the board
    direction = 1 if piece.side == Color.WHITE else -1
    squares: list[Square] = []

    one_step = piece.position.offset(direction, 0)
    if one_step.is_within_bounds() and board.piece_at(one_step) is None:
        squares.append(one_step)

        two_steps = piece.position.offset(2 * direction, 0)
        on_starting_rank = piece.position.rank == PAWN_STARTING_RANK[piece.side]
        if on_starting_rank and board.piece_at(two_steps) is None:
            squares.append(two_steps)

    for d_file in [-1, 1]:
        target_square = piece.position.offset(direction, d_file)
        if target_square.is_within_bounds() and _is_opponent(
            board.piece_at(target_square), piece.side
        ):
            squares.append(target_square)
    return squares


def candidate_knight_moves(piece: Piece, board: Board) -> list[Square]:
    """Knights always move such that |delta_rank| + |delta_file| = 3"""
    return single_step_move(piece, board, KNIGHT_DELTAS)


def candidate_bishop_moves(piece: Piece, board: Board) -> list[Square]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(piece, board, DIAGONALS)


def candidate_rook_moves(piece: Piece, board: Board) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(piece, board, STRAIGHTS)


def candidate_queen_moves(piece: Piece, board: Board) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    horizontal_and_vertical_moves = candidate_rook_moves(piece, board)
    diagonal_moves = candidate_bishop_moves(piece, board)
    return horizontal_and_vertical_moves + diagonal_moves


def candidate_king_moves(piece: Piece, board: Board) -> list[Square]:
    """
    The king can move by a single square at the time, and in this rule set only horizontally or vertically.
    """
    return single_step_move(piece, board, STRAIGHTS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Piece, Board], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def moves_for(piece: Piece, board: Board) -> list[Square]:
    """
    Candidate destination squares for the given piece.

    The piece must still be standing where it claims to stand. A stale reference (captured piece, or the
    record from before it moved) raises EmptySquareError instead of producing moves from a ghost.
    """
    if board.piece_at(piece.position) != piece:
        raise EmptySquareError(
            f"No {piece.side} {piece.kind} on {piece.position.to_algebraic()}."
        )
    movement_rule = MOVEMENT_RULES[piece.kind]
    return movement_rule(piece, board)


def candidate_moves(piece: Piece, board: Board) -> list[Move]:
    """Same as `moves_for`, wrapped up as moves"""
    return [Move(piece.position, square) for square in moves_for(piece, board)]
