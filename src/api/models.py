"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType

FEN_PIECE_CHARACTERS = set("pnbrqkPNBRQK")


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    return ("a" <= first_character <= "h") and ("1" <= second_character <= "8")


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        """Only the piece placement part of a FEN string: 8 ranks separated by slashes"""
        if value is None:
            return value

        ranks = value.strip().split("/")
        if len(ranks) != 8:
            raise InvalidRequestError("Piece placement must contain 8 ranks separated by '/'.")
        for rank in ranks:
            if not all(char in FEN_PIECE_CHARACTERS or char in "12345678" for char in rank):
                raise InvalidRequestError(f"Cannot interpret rank {rank!r} of the piece placement.")
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class CandidateMovesRequest(BaseModel):
    game_id: UUID
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(f"Cannot interpret square: {value!r} as a valid square name.")
        return value


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(f"Cannot interpret square: {value!r} as a valid square name.")
        return value


class BestMoveRequest(BaseModel):
    game_id: UUID
    color: Color


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    starting_fen: str
    current_fen: str
    move_history: list[str]
    material: dict[Color, int]


class CandidateMovesResponse(BaseModel):
    game_id: UUID
    square: str
    piece: PieceType
    color: Color
    candidate_squares: list[str]


class BestMoveResponse(BaseModel):
    game_id: UUID
    color: Color
    piece: PieceType
    move: str
    score: float
    captured: Optional[PieceType] = None
