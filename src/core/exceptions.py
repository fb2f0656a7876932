"""
Custom exceptions, shared by all layers.

Everything derives from GameError, so a driver (service / API) can catch a single top-level type and re-prompt.
The domain layer never recovers from these itself.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


class OutOfRangeError(GameError):
    """A square outside of the 8x8 board was used."""


class IllegalMoveError(GameError):
    """Self-capture, or a destination the movement rules do not allow."""


class EmptySquareError(GameError):
    """Operating on a piece whose square is empty (or holds a different piece by now)."""


class InvalidFENError(GameError):
    """Could not parse the piece placement."""


class GameStateError(GameError):
    """The game cannot do what was asked in its current state."""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested record."""


class InvalidRequestError(GameError):
    """Request data failed validation at the boundary layer."""
