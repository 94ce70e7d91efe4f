"""Tournament-level Elo processing: field average, result validation, batch updates."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from domain.ratings.common import Player, TournamentResult
from domain.ratings.elo.calculator import (
    DEFAULT_PARAMETERS,
    EngineParameters,
    advance_player_state,
    preview_rating_change,
    round_half_away_from_zero,
)
from domain.ratings.errors import (
    DegenerateTournamentError,
    InvalidResultSetError,
    PairingMismatchError,
)


@dataclass(frozen=True)
class PlayerRatingChange:
    player_id: int
    position: int
    total_players: int
    tournament_average: int
    expected_score: float
    actual_score: float
    k_factor: float
    pre_rating: int
    rating_delta: int
    post_rating: int
    player: Player

    def describe(self) -> str:
        """Audit line in the form ``rating changed: 1825 -> 1850 (+25)``."""
        return f"rating changed: {self.pre_rating} -> {self.post_rating} ({self.rating_delta:+d})"


def calculate_tournament_average(players: Sequence[Player]) -> int:
    """Rounded mean rating of the tournament field."""
    if not players:
        raise DegenerateTournamentError("cannot average the ratings of an empty tournament")
    return round_half_away_from_zero(sum(player.rating for player in players) / len(players))


def _result_set_problems(results: Sequence[TournamentResult]) -> list[str]:
    if not results:
        return ["result set is empty"]

    problems: list[str] = []
    totals = sorted({result.total_players for result in results})
    if len(totals) > 1:
        problems.append(f"results disagree on total_players: {totals}")
    elif totals[0] != len(results):
        problems.append(
            f"total_players={totals[0]} does not match the {len(results)} submitted results"
        )

    positions = Counter(result.position for result in results)
    duplicates = sorted(position for position, count in positions.items() if count > 1)
    if duplicates:
        problems.append(f"duplicate positions: {duplicates}")

    out_of_range = sorted(
        result.position
        for result in results
        if not 1 <= result.position <= result.total_players
    )
    if out_of_range:
        problems.append(f"positions out of range: {out_of_range}")

    player_ids = Counter(result.player_id for result in results)
    duplicate_ids = sorted(player_id for player_id, count in player_ids.items() if count > 1)
    if duplicate_ids:
        problems.append(f"duplicate player ids: {duplicate_ids}")

    return problems


def validate_results(results: Sequence[TournamentResult]) -> bool:
    """Return True when positions form a permutation of 1..total_players."""
    return not _result_set_problems(results)


def ensure_valid_results(results: Sequence[TournamentResult]) -> None:
    problems = _result_set_problems(results)
    if problems:
        raise InvalidResultSetError("invalid tournament results: " + "; ".join(problems))


def _pair_results(
    players: Sequence[Player],
    results: Sequence[TournamentResult],
) -> dict[int, TournamentResult]:
    player_ids = Counter(player.id for player in players)
    duplicate_ids = sorted(player_id for player_id, count in player_ids.items() if count > 1)
    if duplicate_ids:
        raise PairingMismatchError(f"players listed more than once: {duplicate_ids}")

    results_by_player = {result.player_id: result for result in results}
    missing_results = sorted(set(player_ids) - set(results_by_player))
    unknown_players = sorted(set(results_by_player) - set(player_ids))
    if missing_results or unknown_players:
        raise PairingMismatchError(
            f"players without results: {missing_results}; "
            f"results for unknown players: {unknown_players}"
        )
    return results_by_player


def score_tournament(
    players: Sequence[Player],
    results: Sequence[TournamentResult],
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> list[PlayerRatingChange]:
    """Rate one tournament, pairing players with results by id.

    Every check runs before any player is rated, so either all players get a
    change record or an error is raised.
    """
    ensure_valid_results(results)
    total_players = results[0].total_players
    if total_players <= 1:
        raise DegenerateTournamentError(
            f"total_players={total_players} cannot be rated; at least 2 players are required"
        )
    results_by_player = _pair_results(players, results)

    average = calculate_tournament_average(players)

    changes: list[PlayerRatingChange] = []
    for player in players:
        result = results_by_player[player.id]
        preview = preview_rating_change(player, result, average, params=params)
        updated = advance_player_state(player, result, preview.new_rating, params=params)
        changes.append(
            PlayerRatingChange(
                player_id=player.id,
                position=result.position,
                total_players=result.total_players,
                tournament_average=average,
                expected_score=preview.expected_score,
                actual_score=preview.actual_score,
                k_factor=preview.k_factor,
                pre_rating=player.rating,
                rating_delta=preview.change,
                post_rating=updated.rating,
                player=updated,
            )
        )
    return changes


def process_tournament(
    players: Sequence[Player],
    results: Sequence[TournamentResult],
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
) -> list[Player]:
    """Return updated players in input order."""
    return [change.player for change in score_tournament(players, results, params=params)]


__all__ = [
    "PlayerRatingChange",
    "calculate_tournament_average",
    "ensure_valid_results",
    "process_tournament",
    "score_tournament",
    "validate_results",
]
