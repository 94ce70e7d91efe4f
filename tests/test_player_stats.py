"""Unit tests for derived player statistics."""

from __future__ import annotations

import pytest

from domain.ratings.common import Player, TournamentResult
from domain.ratings.elo.calculator import EngineParameters, update_player_after_tournament
from domain.ratings.stats import CalibrationProgress, calibration_progress, win_rate_pct


def test_win_rate_without_counted_results_is_zero() -> None:
    assert win_rate_pct(Player(id=1, rating=1500)) == 0.0


def test_runner_up_finishes_leave_win_rate_at_zero() -> None:
    player = Player(id=1, rating=1500)
    for _ in range(3):
        player = update_player_after_tournament(
            player,
            TournamentResult(player_id=1, position=2, total_players=4),
            1500,
        )

    assert (player.wins, player.losses) == (0, 0)
    assert win_rate_pct(player) == 0.0


def test_win_rate_counts_only_wins_and_losses() -> None:
    assert win_rate_pct(Player(id=1, rating=1720, wins=42, losses=8)) == pytest.approx(84.0)
    assert win_rate_pct(Player(id=2, rating=1100, wins=0, losses=5)) == 0.0
    assert win_rate_pct(Player(id=3, rating=2100, wins=7, losses=0)) == pytest.approx(100.0)


def test_calibration_progress_while_calibrating() -> None:
    progress = calibration_progress(Player(id=1, rating=1500, calibration_games=3))
    assert progress == CalibrationProgress(
        games_played=3,
        games_required=10,
        percent=30.0,
        is_complete=False,
    )
    assert progress.describe() == "3/10"


def test_finished_calibration_is_capped_at_threshold() -> None:
    player = Player(id=1, rating=1850, is_calibrating=False, calibration_games=37)
    progress = calibration_progress(player)
    assert progress.games_played == 10
    assert progress.percent == pytest.approx(100.0)
    assert progress.is_complete is True
    assert progress.describe() == "10/10"


def test_calibration_threshold_comes_from_parameters() -> None:
    params = EngineParameters(calibration_games=4)
    progress = calibration_progress(Player(id=1, rating=1500, calibration_games=1), params=params)
    assert progress.describe() == "1/4"
    assert progress.percent == pytest.approx(25.0)


def test_zero_game_calibration_is_already_complete() -> None:
    params = EngineParameters(calibration_games=0)
    progress = calibration_progress(Player(id=1, rating=1500), params=params)
    assert progress.is_complete is True
    assert progress.percent == pytest.approx(100.0)
    assert progress.describe() == "0/0"
