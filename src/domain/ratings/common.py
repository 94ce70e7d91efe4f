"""Shared types for the tournament rating engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Competitive state of one platform user."""

    id: int
    rating: int
    is_calibrating: bool = True
    calibration_games: int = 0
    wins: int = 0
    losses: int = 0


@dataclass(frozen=True)
class TournamentResult:
    """One player's finishing position in one tournament."""

    player_id: int
    position: int
    total_players: int
