"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass


@dataclass
class GameModel:
    """Transport-safe representation of a game used between API, Service, DB, and Game layers.

    The current placement is redundant (it can be replayed from the starting placement + moves),
    but it is what consumers ask for most of the time.
    """

    starting_fen: str
    current_fen: str
    moves_uci: list[str]
