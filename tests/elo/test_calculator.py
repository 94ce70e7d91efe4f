"""Unit tests for per-player tournament Elo calculations."""

from __future__ import annotations

import pytest

from domain.ratings.common import Player, TournamentResult
from domain.ratings.elo.calculator import (
    EngineParameters,
    advance_player_state,
    calculate_actual_score,
    calculate_expected_score,
    calculate_new_rating,
    k_factor,
    preview_rating_change,
    round_half_away_from_zero,
    update_player_after_tournament,
)
from domain.ratings.errors import DegenerateTournamentError, InvalidResultSetError


def _player(**overrides: object) -> Player:
    fields: dict[str, object] = {"id": 1, "rating": 1500}
    fields.update(overrides)
    return Player(**fields)  # type: ignore[arg-type]


def _result(position: int, total_players: int = 4) -> TournamentResult:
    return TournamentResult(player_id=1, position=position, total_players=total_players)


def test_engine_parameters_defaults_are_expected_constants() -> None:
    params = EngineParameters()
    assert params.initial_rating == 1500
    assert params.scale_factor == pytest.approx(400.0)
    assert params.calibrating_k_factor == pytest.approx(40.0)
    assert params.established_k_factor == pytest.approx(25.0)
    assert params.calibration_games == 10
    assert params.placement_score_decimals == 2
    assert params.win_max_position == 1
    assert params.loss_min_position == 3
    assert params.draw_probability_pct == 5


@pytest.mark.parametrize("rating", [0, 850, 1500, 2999])
def test_expected_score_against_own_rating_is_half(rating: int) -> None:
    assert calculate_expected_score(rating, rating) == pytest.approx(0.5)


def test_expected_score_is_monotonic_in_rating() -> None:
    reference = 1500
    scores = [calculate_expected_score(rating, reference) for rating in (1200, 1400, 1500, 1700)]
    assert scores == sorted(scores)
    assert len(set(scores)) == len(scores)


def test_expected_score_stays_inside_open_interval() -> None:
    assert 0.0 < calculate_expected_score(100, 2900) < 0.5
    assert 0.5 < calculate_expected_score(2900, 100) < 1.0


def test_expected_score_saturates_for_small_scale_factor() -> None:
    low = calculate_expected_score(0, 3000, scale_factor=1.0)
    high = calculate_expected_score(3000, 0, scale_factor=1.0)
    assert 0.0 <= low < 1e-200
    assert high == pytest.approx(1.0)
    assert low < high


def test_scale_factor_flattens_expected_score() -> None:
    narrow = calculate_expected_score(1700, 1500, 400.0)
    wide = calculate_expected_score(1700, 1500, 800.0)
    assert 0.5 < wide < narrow


def test_four_player_actual_scores_match_placement_table() -> None:
    assert calculate_actual_score(1, 4) == 1.0
    assert calculate_actual_score(2, 4) == 0.66
    assert calculate_actual_score(3, 4) == 0.33
    assert calculate_actual_score(4, 4) == 0.0


def test_actual_scores_are_strictly_ordered_by_position() -> None:
    assert 1.0 > calculate_actual_score(2, 4) > calculate_actual_score(3, 4) > 0.0


def test_actual_score_uses_linear_placement_for_other_sizes() -> None:
    assert calculate_actual_score(1, 2) == 1.0
    assert calculate_actual_score(2, 2) == 0.0
    assert calculate_actual_score(2, 3) == 0.5
    assert calculate_actual_score(3, 5) == 0.5
    assert calculate_actual_score(2, 8) == 0.85


def test_actual_score_precision_is_configurable() -> None:
    params = EngineParameters(placement_score_decimals=3)
    assert calculate_actual_score(2, 4, params=params) == 0.666


@pytest.mark.parametrize("total_players", [0, 1])
def test_degenerate_tournament_raises(total_players: int) -> None:
    with pytest.raises(DegenerateTournamentError, match=r"at least 2 players"):
        calculate_actual_score(1, total_players)


@pytest.mark.parametrize("position", [0, 5, -1])
def test_out_of_range_position_raises(position: int) -> None:
    with pytest.raises(InvalidResultSetError, match=r"outside 1\.\.4"):
        calculate_actual_score(position, 4)


def test_k_factor_depends_on_calibration() -> None:
    assert k_factor(True) == 40
    assert k_factor(False) == 25


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1512.5, 1513),
        (1487.5, 1488),
        (2.5, 3),
        (-2.5, -3),
        (-0.4, 0),
        (0.49999999999999994, 0),
        (1506.4, 1506),
    ],
)
def test_round_half_away_from_zero(value: float, expected: int) -> None:
    assert round_half_away_from_zero(value) == expected


@pytest.mark.parametrize(
    ("position", "expected_rating"),
    [(1, 1520), (2, 1506), (3, 1493), (4, 1480)],
)
def test_calibrating_player_even_field_ratings(position: int, expected_rating: int) -> None:
    player = _player(is_calibrating=True)
    assert calculate_new_rating(player, _result(position), 1500) == expected_rating


def test_established_player_ties_round_away_from_zero() -> None:
    player = _player(is_calibrating=False, calibration_games=10)
    assert calculate_new_rating(player, _result(1), 1500) == 1513
    assert calculate_new_rating(player, _result(4), 1500) == 1488


def test_underdog_win_gains_more_than_even_field_win() -> None:
    player = _player(rating=1300)
    new_rating = calculate_new_rating(player, _result(1), 1500)
    assert new_rating - player.rating > 20


def test_preview_reports_components_without_mutating_player() -> None:
    player = _player()
    preview = preview_rating_change(player, _result(1), 1500)

    assert preview.current_rating == 1500
    assert preview.new_rating == 1520
    assert preview.change == 20
    assert preview.expected_score == pytest.approx(0.5)
    assert preview.actual_score == 1.0
    assert preview.k_factor == 40
    assert player.rating == 1500


def test_first_place_counts_as_win() -> None:
    updated = update_player_after_tournament(_player(), _result(1), 1500)
    assert updated.wins == 1
    assert updated.losses == 0
    assert updated.rating == 1520
    assert updated.calibration_games == 1
    assert updated.is_calibrating is True


def test_runner_up_counts_as_neither_win_nor_loss() -> None:
    updated = update_player_after_tournament(_player(wins=3, losses=2), _result(2), 1500)
    assert updated.wins == 3
    assert updated.losses == 2


@pytest.mark.parametrize("position", [3, 4])
def test_lower_half_counts_as_loss(position: int) -> None:
    updated = update_player_after_tournament(_player(), _result(position), 1500)
    assert updated.wins == 0
    assert updated.losses == 1


def test_win_loss_policy_is_configurable() -> None:
    params = EngineParameters(win_max_position=1, loss_min_position=2)
    updated = update_player_after_tournament(_player(), _result(2), 1500, params=params)
    assert updated.losses == 1


def test_calibration_ends_when_threshold_reached() -> None:
    updated = update_player_after_tournament(_player(calibration_games=9), _result(3), 1500)
    assert updated.calibration_games == 10
    assert updated.is_calibrating is False


def test_calibration_continues_below_threshold() -> None:
    updated = update_player_after_tournament(_player(calibration_games=8), _result(3), 1500)
    assert updated.calibration_games == 9
    assert updated.is_calibrating is True


def test_finished_calibration_never_restarts() -> None:
    player = _player(is_calibrating=False, calibration_games=2)
    updated = update_player_after_tournament(player, _result(1), 1500)
    assert updated.is_calibrating is False
    assert updated.calibration_games == 3


def test_update_returns_new_value_and_keeps_identity() -> None:
    player = _player(id=42)
    updated = update_player_after_tournament(player, _result(1), 1500)
    assert updated is not player
    assert updated.id == 42
    assert player.calibration_games == 0


def test_advance_player_state_applies_given_rating_and_bookkeeping() -> None:
    player = _player(calibration_games=9, wins=3, losses=2)
    updated = advance_player_state(player, _result(4), 1480)
    assert updated.rating == 1480
    assert updated.calibration_games == 10
    assert updated.is_calibrating is False
    assert (updated.wins, updated.losses) == (3, 3)
