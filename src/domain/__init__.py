"""Tournament rating domain modules."""

from domain.ratings.common import Player, TournamentResult

__all__ = ["Player", "TournamentResult"]
