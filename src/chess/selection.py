"""Picking a move for an automated side: score every candidate move, keep the best one"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.chess.board import Board
from src.chess.evaluation import score_move
from src.chess.moves import Move, candidate_moves
from src.chess.pieces import Piece
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredMove:
    piece: Piece
    move: Move
    score: float


def select_best_move(color: Color, board: Board) -> Optional[ScoredMove]:
    """
    The highest scoring move of all pieces of `color`.

    Ties go to whatever was found first: pieces in roster order, moves in the order the movement rules list them.
    Returns None if the side has no candidate move at all.
    """
    best: Optional[ScoredMove] = None
    for piece in board.pieces(color):
        for move in candidate_moves(piece, board):
            score = score_move(piece, move, board, color)
            if best is None or score > best.score:
                best = ScoredMove(piece, move, score)

    if best is None:
        logger.info("No candidate moves for %s", color)
    else:
        logger.info(
            "Best move for %s: %s %s (score %.2f)",
            color,
            best.piece.kind,
            best.move.to_uci(),
            best.score,
        )
    return best
