"""Head-to-head win odds between two individual ratings."""

from __future__ import annotations

from dataclasses import dataclass

from domain.ratings.elo.calculator import (
    DEFAULT_PARAMETERS,
    EngineParameters,
    calculate_expected_score,
    round_half_away_from_zero,
)


@dataclass(frozen=True)
class MatchProbability:
    """Integer percentages for one pairwise match.

    ``win_a_pct + win_b_pct`` is always 100. ``draw_pct`` is a flat estimate
    reported alongside them rather than taken out of them.
    """

    win_a_pct: int
    win_b_pct: int
    draw_pct: int


def calculate_match_probability(
    rating_a: float,
    rating_b: float,
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> MatchProbability:
    expected_a = calculate_expected_score(
        rating=rating_a,
        reference_rating=rating_b,
        scale_factor=params.scale_factor,
    )
    win_a_pct = round_half_away_from_zero(expected_a * 100.0)
    return MatchProbability(
        win_a_pct=win_a_pct,
        win_b_pct=100 - win_a_pct,
        draw_pct=params.draw_probability_pct,
    )


__all__ = ["MatchProbability", "calculate_match_probability"]
