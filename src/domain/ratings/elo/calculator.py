"""Per-player Elo logic for placement-based tournaments."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal

from domain.ratings.common import Player, TournamentResult
from domain.ratings.errors import DegenerateTournamentError, InvalidResultSetError


@dataclass(frozen=True)
class EngineParameters:
    initial_rating: int = 1500
    scale_factor: float = 400.0
    calibrating_k_factor: float = 40.0
    established_k_factor: float = 25.0
    calibration_games: int = 10
    placement_score_decimals: int = 2
    win_max_position: int = 1
    loss_min_position: int = 3
    draw_probability_pct: int = 5


DEFAULT_PARAMETERS = EngineParameters()

_MAX_EXPECTED_SCORE_EXPONENT = 300.0


@dataclass(frozen=True)
class RatingPreview:
    """Rating change a player would receive, without applying it."""

    current_rating: int
    new_rating: int
    change: int
    expected_score: float
    actual_score: float
    k_factor: float


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_expected_score(
    rating: float,
    reference_rating: float,
    scale_factor: float = 400.0,
) -> float:
    """Compute the Elo expected score of a rating against a reference rating.

    The exponent is clamped to +/-300 so extreme rating gaps or small scale
    factors saturate towards 0 or 1 instead of overflowing a float.
    """
    exponent = (reference_rating - rating) / scale_factor
    exponent = max(-_MAX_EXPECTED_SCORE_EXPONENT, min(exponent, _MAX_EXPECTED_SCORE_EXPONENT))
    return 1.0 / (1.0 + 10.0**exponent)


def calculate_actual_score(
    position: int,
    total_players: int,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> float:
    """Map a finishing position to a score in [0, 1].

    The linear placement score ``(n - p) / (n - 1)`` is truncated to
    ``params.placement_score_decimals`` decimals with integer arithmetic, so a
    4-player tournament scores 1.0, 0.66, 0.33 and 0.0.
    """
    if total_players <= 1:
        raise DegenerateTournamentError(
            f"total_players={total_players} cannot be rated; at least 2 players are required"
        )
    if not 1 <= position <= total_players:
        raise InvalidResultSetError(
            f"position={position} is outside 1..{total_players}"
        )

    scale = 10**params.placement_score_decimals
    return ((total_players - position) * scale // (total_players - 1)) / scale


def k_factor(is_calibrating: bool, *, params: EngineParameters = DEFAULT_PARAMETERS) -> float:
    if is_calibrating:
        return params.calibrating_k_factor
    return params.established_k_factor


def calculate_new_rating(
    player: Player,
    result: TournamentResult,
    tournament_average: float,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> int:
    """Return the player's rating after one tournament."""
    return preview_rating_change(
        player,
        result,
        tournament_average,
        params=params,
    ).new_rating


def preview_rating_change(
    player: Player,
    result: TournamentResult,
    tournament_average: float,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> RatingPreview:
    expected = calculate_expected_score(
        rating=player.rating,
        reference_rating=tournament_average,
        scale_factor=params.scale_factor,
    )
    actual = calculate_actual_score(result.position, result.total_players, params=params)
    effective_k = k_factor(player.is_calibrating, params=params)
    new_rating = round_half_away_from_zero(player.rating + effective_k * (actual - expected))

    return RatingPreview(
        current_rating=player.rating,
        new_rating=new_rating,
        change=new_rating - player.rating,
        expected_score=expected,
        actual_score=actual,
        k_factor=effective_k,
    )


def update_player_after_tournament(
    player: Player,
    result: TournamentResult,
    tournament_average: float,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> Player:
    """Derive the player's state after one tournament."""
    preview = preview_rating_change(player, result, tournament_average, params=params)
    return advance_player_state(player, result, preview.new_rating, params=params)


def advance_player_state(
    player: Player,
    result: TournamentResult,
    new_rating: int,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> Player:
    """Apply an already computed rating plus calibration and win/loss bookkeeping.

    A position at or above ``win_max_position`` counts as a win and one at or
    below ``loss_min_position`` as a loss; the runner-up of a 4-player
    tournament gets neither.
    """
    calibration_games = player.calibration_games + 1

    return replace(
        player,
        rating=new_rating,
        calibration_games=calibration_games,
        is_calibrating=player.is_calibrating and calibration_games < params.calibration_games,
        wins=player.wins + (1 if result.position <= params.win_max_position else 0),
        losses=player.losses + (1 if result.position >= params.loss_min_position else 0),
    )
