"""Errors raised for malformed tournament input."""

from __future__ import annotations


class RatingEngineError(ValueError):
    """Base class for rejected rating engine input."""


class InvalidResultSetError(RatingEngineError):
    """Positions in a tournament do not form a permutation of 1..total_players."""


class DegenerateTournamentError(RatingEngineError):
    """A tournament with fewer than two participants cannot be rated."""


class PairingMismatchError(RatingEngineError):
    """Players and results do not refer to the same set of ids."""


__all__ = [
    "DegenerateTournamentError",
    "InvalidResultSetError",
    "PairingMismatchError",
    "RatingEngineError",
]
