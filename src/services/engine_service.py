"""Orchestration of communication from API models to business logic and persistence layers (and the reverse direction)."""

import logging
import threading
from typing import Optional
from uuid import UUID

from src.api.models import (
    BestMoveRequest,
    BestMoveResponse,
    CandidateMovesRequest,
    CandidateMovesResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
)
from src.chess.game import Game
from src.chess.pieces import Piece
from src.chess.selection import ScoredMove
from src.core.config import Settings, get_settings
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class EngineService:
    """
    Orchestration of layers for the chess engine.

    Anything that changes a game (load -> apply move -> store) runs under a single lock:
    one move gets applied at a time, and move generation/evaluation always see a stable position.
    """

    def __init__(self, repository: GameRepository, settings: Optional[Settings] = None) -> None:
        self.repo = repository
        self.settings = settings or get_settings()
        self._write_lock = threading.Lock()

    # -- API logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Create a new game, from the standard position unless a placement is given."""
        new_game = Game.new_game(starting_fen=request.starting_fen)
        _, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, new_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def candidate_moves(self, request: CandidateMovesRequest) -> CandidateMovesResponse:
        """Where can the piece on the requested square go?"""
        game = Game.from_model(self._fetch_game(request.game_id))
        piece, squares = game.piece_with_candidates(request.square)
        return CandidateMovesResponse(
            game_id=request.game_id,
            square=request.square,
            piece=piece.kind,
            color=piece.side,
            candidate_squares=squares,
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt."""
        move_uci = f"{request.from_square}{request.to_square}"
        with self._write_lock:
            game = Game.from_model(self._fetch_game(request.game_id))
            captured = game.make_move(move_uci, enforce_legality=self.settings.enforce_legality)
            self._store(request.game_id, game)

        logger.info(
            "Game %s: %s%s",
            request.game_id,
            move_uci,
            f" captured {captured.side} {captured.kind}" if captured else "",
        )
        return self._create_game_response(request.game_id, game)

    def suggest_move(self, request: BestMoveRequest) -> BestMoveResponse:
        """What would the engine play? (does not change the game)"""
        game = Game.from_model(self._fetch_game(request.game_id))
        best = game.best_move(request.color)
        return self._create_best_move_response(request, best, captured=None)

    def play_engine_move(self, request: BestMoveRequest) -> BestMoveResponse:
        """Let the engine play a move for the requested side."""
        with self._write_lock:
            game = Game.from_model(self._fetch_game(request.game_id))
            best, captured = game.play_best_move(request.color)
            self._store(request.game_id, game)
        return self._create_best_move_response(request, best, captured)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self._write_lock:
            deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            starting_fen=model.starting_fen,
            current_fen=model.current_fen,
            move_history=model.moves_uci,
            material=game.board.count_material(),
        )

    def _create_best_move_response(
        self, request: BestMoveRequest, best: ScoredMove, captured: Optional[Piece]
    ) -> BestMoveResponse:
        return BestMoveResponse(
            game_id=request.game_id,
            color=request.color,
            piece=best.piece.kind,
            move=best.move.to_uci(),
            score=best.score,
            captured=captured.kind if captured else None,
        )

    def _store(self, game_id: UUID, game: Game) -> None:
        if self.repo.update_game(game_id, game.to_model()) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
