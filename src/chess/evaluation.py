"""
Scoring a single candidate move.

Material first, position second: the score says how much material is won (or put at risk) by the move,
and only quiet moves get a small bonus for heading towards the center of the board.
"""

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import Square
from src.chess.threats import guarding_piece, guards_of, is_threatened, threatened_pieces
from src.core.exceptions import EmptySquareError
from src.core.shared_types import Color

# (lowest, highest) rank/file of each band, from the center outwards
CENTER_BAND = (4, 5)
NEAR_CENTER_BAND = (3, 6)

CENTER_SCORE = 0.75
NEAR_CENTER_SCORE = 0.5
QUIET_SCORE = 0.25


def _in_band(square: Square, band: tuple[int, int]) -> bool:
    low, high = band
    return (low <= square.rank <= high) and (low <= square.file <= high)


def positional_score(square: Square) -> float:
    """Bonus for a quiet move, depending on how central the destination is"""
    if _in_band(square, CENTER_BAND):
        return CENTER_SCORE
    if _in_band(square, NEAR_CENTER_BAND):
        return NEAR_CENTER_SCORE
    return QUIET_SCORE


def score_move(piece: Piece, move: Move, board: Board, my_color: Color) -> float:
    """
    Score a move of `piece` on `board`, seen from the side `my_color`.
    ----

    The position after the move is played out on a snapshot, the board itself is left alone.
    Checked in this order:

    1. capture, and the piece can be taken back afterwards -> trade: captured value - own value
    2. capture that cannot be answered -> captured value
    3. moving into a threatened square without capturing -> minus own value
    4. fleeing from a threatened square -> value of a guard, if the origin is guarded (a fair trade is on offer anyway),
       otherwise the full value of the piece
    5. quiet move -> positional bonus, see `positional_score`

    On top of that: when the moved piece ends up guarding another friendly piece that is currently under attack,
    the score is at least the value of that piece.
    """
    if move.from_square != piece.position or board.piece_at(piece.position) != piece:
        raise EmptySquareError(
            f"Move {move.to_uci()} does not belong to the {piece.side} {piece.kind} on {piece.position.to_algebraic()}."
        )

    opponent = my_color.opponent
    target = board.piece_at(move.to_square)
    is_capture = target is not None and target.side == opponent
    captured_value = target.value if target is not None else 0

    after_move = board.snapshot()
    after_move.apply_move(move)
    threatened_after = is_threatened(move.to_square, opponent, after_move)

    if is_capture and threatened_after:
        score = float(captured_value - piece.value)
    elif is_capture:
        score = float(captured_value)
    elif threatened_after:
        score = float(-piece.value)
    elif is_threatened(piece.position, opponent, board):
        guard = guarding_piece(piece.position, my_color, board)
        score = float(guard.value if guard is not None else piece.value)
    else:
        score = positional_score(move.to_square)

    return max(score, _reinforcement_score(piece, move, board, after_move, my_color))


def _reinforcement_score(
    piece: Piece, move: Move, board: Board, after_move: Board, my_color: Color
) -> float:
    """Value of the most valuable threatened friendly piece the moved piece guards after the move (or -inf)"""
    best = float("-inf")
    for friend in threatened_pieces(my_color, board):
        if friend == piece:
            continue
        guards = guards_of(friend.position, my_color, after_move)
        if any(guard.position == move.to_square for guard in guards):
            best = max(best, float(friend.value))
    return best
