"""Leaderboard ordering for display collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from domain.ratings.common import Player
from domain.ratings.tiers import DEFAULT_RANK_TIERS, RankTier, get_rank_tier


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    player: Player
    tier: RankTier


def build_leaderboard(
    players: Sequence[Player],
    *,
    top_n: int | None = None,
    tiers: Sequence[RankTier] = DEFAULT_RANK_TIERS,
) -> list[LeaderboardEntry]:
    """Order players by rating, breaking ties by wins, then fewer losses, then id."""
    if top_n is not None and top_n <= 0:
        raise ValueError("top_n must be greater than 0")

    ordered = sorted(
        players,
        key=lambda player: (-player.rating, -player.wins, player.losses, player.id),
    )
    if top_n is not None:
        ordered = ordered[:top_n]

    return [
        LeaderboardEntry(rank=index, player=player, tier=get_rank_tier(player.rating, tiers))
        for index, player in enumerate(ordered, start=1)
    ]


__all__ = ["LeaderboardEntry", "build_leaderboard"]
