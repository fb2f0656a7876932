"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating the rules engine for a single game:
applying moves, listing candidate moves, and letting the engine pick (and play) a move for one of the sides.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.chess.board import STARTING_POSITION_FEN, Board
from src.chess.moves import Move, moves_for
from src.chess.pieces import Piece
from src.chess.selection import ScoredMove, select_best_move
from src.chess.square import Square
from src.core.exceptions import EmptySquareError, GameStateError
from src.core.models import GameModel
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    starting_fen: str
    board: Board
    moves: list[Move]

    @classmethod
    def new_game(cls, starting_fen: Optional[str] = None) -> Self:
        """Start from the standard position, or from the given piece placement"""
        fen = starting_fen or STARTING_POSITION_FEN
        return cls(starting_fen=fen, board=Board.from_fen(fen), moves=[])

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """
        Define how to construct a Game from the information the Service layer actually has

        NOTE: The moves are replayed on the starting placement (instead of parsing the current placement),
        so the rosters end up in exactly the same order as in the original game.
        """
        game = cls.new_game(model.starting_fen)
        for uci in model.moves_uci:
            move = Move.from_uci(uci)
            game.board.apply_move(move)
            game.moves.append(move)
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            starting_fen=self.starting_fen,
            current_fen=self.board.to_fen(),
            moves_uci=[move.to_uci() for move in self.moves],
        )

    def candidate_squares(self, square_alg: str) -> list[str]:
        """Where can the piece on the given square go? (algebraic notation)"""
        _, squares = self.piece_with_candidates(square_alg)
        return squares

    def piece_with_candidates(self, square_alg: str) -> tuple[Piece, list[str]]:
        """The piece on the given square, together with where it can go"""
        piece = self._piece_on(Square.from_algebraic(square_alg))
        return piece, [target.to_algebraic() for target in moves_for(piece, self.board)]

    def make_move(self, move_uci: str, enforce_legality: bool = True) -> Optional[Piece]:
        """Attempt to make a move. Returns the captured piece (if any)."""
        move = Move.from_uci(move_uci)
        captured = self.board.apply_move(move, enforce_legality=enforce_legality)
        self.moves.append(move)
        return captured

    def best_move(self, color: Color) -> ScoredMove:
        """The move the engine would play for `color`"""
        best = select_best_move(color, self.board)
        if best is None:
            raise GameStateError(f"{color} has no moves left to play.")
        return best

    def play_best_move(self, color: Color) -> tuple[ScoredMove, Optional[Piece]]:
        """Let the engine play for `color`"""
        best = self.best_move(color)
        captured = self.board.apply_move(best.move)
        self.moves.append(best.move)
        logger.info("%s played %s", color, best.move.to_uci())
        return best, captured

    # -- PRIVATE HELPERS ---
    def _piece_on(self, square: Square) -> Piece:
        piece = self.board.piece_at(square)
        if piece is None:
            raise EmptySquareError(f"No piece on {square.to_algebraic()}.")
        return piece
