"""Elo rating modules."""

from domain.ratings.elo.calculator import (
    DEFAULT_PARAMETERS,
    EngineParameters,
    RatingPreview,
    advance_player_state,
    calculate_actual_score,
    calculate_expected_score,
    calculate_new_rating,
    k_factor,
    preview_rating_change,
    round_half_away_from_zero,
    update_player_after_tournament,
)
from domain.ratings.elo.config import (
    DEFAULT_SYSTEM_NAME,
    EloSystemConfig,
    get_elo_system,
    load_elo_system_configs,
)
from domain.ratings.elo.tournament import (
    PlayerRatingChange,
    calculate_tournament_average,
    ensure_valid_results,
    process_tournament,
    score_tournament,
    validate_results,
)

__all__ = [
    "DEFAULT_PARAMETERS",
    "DEFAULT_SYSTEM_NAME",
    "EloSystemConfig",
    "EngineParameters",
    "PlayerRatingChange",
    "RatingPreview",
    "advance_player_state",
    "calculate_actual_score",
    "calculate_expected_score",
    "calculate_new_rating",
    "calculate_tournament_average",
    "ensure_valid_results",
    "k_factor",
    "get_elo_system",
    "load_elo_system_configs",
    "preview_rating_change",
    "process_tournament",
    "round_half_away_from_zero",
    "score_tournament",
    "update_player_after_tournament",
    "validate_results",
]
