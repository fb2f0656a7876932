"""The Game board: source of truth for which piece stands where, and the only place a position gets changed"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable, Optional, Self

from src.chess.moves import Move, moves_for
from src.chess.pieces import BACK_RANK_ORDER, FEN_TO_PIECE, Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import (
    EmptySquareError,
    IllegalMoveError,
    InvalidFENError,
)
from src.core.shared_types import Color, PieceType

logger = logging.getLogger(__name__)

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
# digits allowed for a run of empty squares within one rank
EMPTY_SQUARE_COUNTS = "12345678"


@dataclass
class Board:
    """
    Only occupied squares are stored in `position`.

    The rosters hold every piece of a side, in a fixed order (used for tie-breaking when picking a move).
    Both are kept in sync by `apply_move`: a piece's position always equals its key in `position`.
    """

    position: dict[Square, Piece] = field(default_factory=dict)
    rosters: dict[Color, list[Piece]] = field(
        default_factory=lambda: {Color.WHITE: [], Color.BLACK: []}
    )

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Self:
        """Build a board from loose pieces. Rosters follow the order the pieces are given in."""
        board = cls()
        for piece in pieces:
            board.place_piece(piece)
        return board

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.

        Rosters are filled walking from a1 upwards (rank by rank), so white starts with its back rank, black with its pawns.
        """
        fen_by_ranks = fen_str.strip().split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise InvalidFENError(
                f"Expected {BOARD_DIMENSIONS[1]} ranks in {fen_str!r}, found {len(fen_by_ranks)}."
            )

        pieces_by_square: dict[Square, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - rank_idx
            # ... but the first character is the a-file, so reads in normal direction
            file = 1
            for character in fen_one_rank:
                if character.lower() in FEN_TO_PIECE:
                    square = Square(rank, file)
                    if not square.is_within_bounds():
                        raise InvalidFENError(f"Rank {rank} is too long in {fen_str!r}.")
                    pieces_by_square[square] = Piece.from_fen(character, square)
                    file += 1
                elif character in EMPTY_SQUARE_COUNTS:
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
                else:
                    raise InvalidFENError(
                        f"Unexpected character {character!r} in {fen_str!r}."
                    )
            if file != BOARD_DIMENSIONS[0] + 1:
                raise InvalidFENError(
                    f"Rank {rank} does not cover exactly {BOARD_DIMENSIONS[0]} files in {fen_str!r}."
                )

        ordered = sorted(pieces_by_square, key=lambda sq: (sq.rank, sq.file))
        return cls.from_pieces(pieces_by_square[square] for square in ordered)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1], 0, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(1, BOARD_DIMENSIONS[0] + 1):
            piece = self.piece_at(Square(rank, file))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- QUERIES ---
    def piece_at(self, square: Square) -> Optional[Piece]:
        square.ensure_within_bounds()
        return self.position.get(square)

    def is_occupied(self, square: Square) -> bool:
        return self.piece_at(square) is not None

    def pieces(self, color: Color) -> list[Piece]:
        """The roster of a side (a copy: changing it does not change the board)"""
        return list(self.rosters[color])

    def snapshot(self) -> Self:
        """Deep copy, to try out 'what if' scenarios without touching the live game"""
        return deepcopy(self)

    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {
            color: sum(piece.value for piece in roster)
            for color, roster in self.rosters.items()
        }

    # --- UPDATES ---
    def apply_move(self, move: Move, enforce_legality: bool = False) -> Optional[Piece]:
        """
        Update the position on the board
        ----

        1. The piece on the from-square moves to the to-square.
        2. An opponent's piece on the to-square is captured: removed from board and roster, and returned.
        3. The moving piece's record is replaced by one with the new position, in the same slot of its roster.

        Self-capture is never allowed. When asked to enforce legality, the destination must also be one of the
        candidate squares the movement rules produce for the piece.
        """
        moving_piece = self.piece_at(move.from_square)
        if moving_piece is None:
            raise EmptySquareError(
                f"No piece on {move.from_square.to_algebraic()} to move."
            )

        captured_piece = self.piece_at(move.to_square)
        if captured_piece is not None and captured_piece.side == moving_piece.side:
            raise IllegalMoveError(
                f"Cannot capture your own piece: {move.to_uci()} lands on a {captured_piece.side} {captured_piece.kind}."
            )

        if enforce_legality and move.to_square not in moves_for(moving_piece, self):
            raise IllegalMoveError(
                f"Move not allowed for the {moving_piece.side} {moving_piece.kind}: {move.to_uci()}"
            )

        if captured_piece is not None:
            self.remove_piece(move.to_square)

        moved_piece = moving_piece.moved_to(move.to_square)
        del self.position[move.from_square]
        self.position[move.to_square] = moved_piece
        roster = self.rosters[moving_piece.side]
        roster[roster.index(moving_piece)] = moved_piece

        logger.debug(
            "%s %s %s%s",
            moving_piece.side,
            moving_piece.kind,
            move.to_uci(),
            f" takes {captured_piece.kind}" if captured_piece else "",
        )
        return captured_piece

    def apply_moves(self, moves: list[Move]) -> None:
        """convenience method to apply multiple moves (if you quickly want to start a board in a given position reached after some moves)"""
        for move in moves:
            self.apply_move(move)

    def place_piece(self, piece: Piece) -> None:
        """Put a piece on an empty square, at the end of its side's roster"""
        if self.piece_at(piece.position) is not None:
            raise IllegalMoveError(
                f"Square {piece.position.to_algebraic()} is already occupied."
            )
        self.position[piece.position] = piece
        self.rosters[piece.side].append(piece)

    def remove_piece(self, square: Square) -> Piece:
        """Take the piece off the board (and out of its roster)"""
        piece = self.piece_at(square)
        if piece is None:
            raise EmptySquareError(f"No piece on {square.to_algebraic()} to remove.")
        del self.position[square]
        self.rosters[piece.side].remove(piece)
        return piece


def initial_board() -> Board:
    """The standard starting position"""
    pieces: list[Piece] = []
    for side, back_rank, pawn_rank in [
        (Color.WHITE, 1, 2),
        (Color.BLACK, 8, 7),
    ]:
        back_rank_pieces = [
            Piece(kind, side, Square(back_rank, file))
            for file, kind in enumerate(BACK_RANK_ORDER, start=1)
        ]
        pawns = [
            Piece(PieceType.PAWN, side, Square(pawn_rank, file))
            for file in range(1, BOARD_DIMENSIONS[0] + 1)
        ]
        # rosters walk from a1 upwards, same as Board.from_fen
        pieces.extend(
            back_rank_pieces + pawns if side == Color.WHITE else pawns + back_rank_pieces
        )
    return Board.from_pieces(pieces)


def apply_move(board: Board, move: Move, enforce_legality: bool = False) -> Optional[Piece]:
    """Function form of `Board.apply_move`, for drivers that prefer not to call methods on the board"""
    return board.apply_move(move, enforce_legality=enforce_legality)
