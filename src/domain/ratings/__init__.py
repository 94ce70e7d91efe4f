"""Rating-system domain modules."""

from domain.ratings.common import Player, TournamentResult
from domain.ratings.errors import (
    DegenerateTournamentError,
    InvalidResultSetError,
    PairingMismatchError,
    RatingEngineError,
)

__all__ = [
    "DegenerateTournamentError",
    "InvalidResultSetError",
    "PairingMismatchError",
    "Player",
    "RatingEngineError",
    "TournamentResult",
]
