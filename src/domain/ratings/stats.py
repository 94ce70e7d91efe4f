"""Derived per-player statistics for profile and leaderboard displays."""

from __future__ import annotations

from dataclasses import dataclass

from domain.ratings.common import Player
from domain.ratings.elo.calculator import DEFAULT_PARAMETERS, EngineParameters


@dataclass(frozen=True)
class CalibrationProgress:
    games_played: int
    games_required: int
    percent: float
    is_complete: bool

    def describe(self) -> str:
        return f"{self.games_played}/{self.games_required}"


def win_rate_pct(player: Player) -> float:
    """Wins as a percentage of counted results; 0 when there are none.

    Placements between the win and loss thresholds count as neither, so they
    do not move the win rate.
    """
    counted = player.wins + player.losses
    if counted == 0:
        return 0.0
    return player.wins / counted * 100.0


def calibration_progress(
    player: Player,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> CalibrationProgress:
    """Calibration games played so far, capped at the configured threshold."""
    required = params.calibration_games
    is_complete = not player.is_calibrating or player.calibration_games >= required
    played = required if is_complete else player.calibration_games
    percent = 100.0 if required == 0 else played * 100.0 / required
    return CalibrationProgress(
        games_played=played,
        games_required=required,
        percent=percent,
        is_complete=is_complete,
    )


__all__ = ["CalibrationProgress", "calibration_progress", "win_rate_pct"]
