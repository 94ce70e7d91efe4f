"""Rank tiers derived from a player's rating."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RankTier:
    """Named rating band; bounds are inclusive and ``None`` means unbounded."""

    title: str
    color: str
    min_rating: int | None
    max_rating: int | None

    def contains(self, rating: int) -> bool:
        if self.min_rating is not None and rating < self.min_rating:
            return False
        if self.max_rating is not None and rating > self.max_rating:
            return False
        return True


DEFAULT_RANK_TIERS: tuple[RankTier, ...] = (
    RankTier(title="Novice", color="#6B7280", min_rating=None, max_rating=1199),
    RankTier(title="Amateur", color="#059669", min_rating=1200, max_rating=1399),
    RankTier(title="Experienced", color="#3B82F6", min_rating=1400, max_rating=1599),
    RankTier(title="Expert", color="#8B5CF6", min_rating=1600, max_rating=1799),
    RankTier(title="Master", color="#F59E0B", min_rating=1800, max_rating=1999),
    RankTier(title="Grandmaster", color="#DC2626", min_rating=2000, max_rating=None),
)


def validate_rank_tiers(tiers: Sequence[RankTier]) -> None:
    """Require ascending, gap-free bands that cover every integer rating."""
    if not tiers:
        raise ValueError("rank tier table is empty")
    if tiers[0].min_rating is not None:
        raise ValueError(f"lowest tier {tiers[0].title!r} must have no lower bound")
    if tiers[-1].max_rating is not None:
        raise ValueError(f"highest tier {tiers[-1].title!r} must have no upper bound")

    for lower, upper in zip(tiers, tiers[1:]):
        if lower.max_rating is None or upper.min_rating is None:
            raise ValueError(
                f"tiers {lower.title!r}/{upper.title!r} have an unbounded inner edge"
            )
        if upper.min_rating != lower.max_rating + 1:
            raise ValueError(
                f"tiers {lower.title!r}/{upper.title!r} are not contiguous: "
                f"{lower.max_rating} -> {upper.min_rating}"
            )

    for tier in tiers:
        if (
            tier.min_rating is not None
            and tier.max_rating is not None
            and tier.min_rating > tier.max_rating
        ):
            raise ValueError(f"tier {tier.title!r} has min_rating > max_rating")


def get_rank_tier(rating: int, tiers: Sequence[RankTier] = DEFAULT_RANK_TIERS) -> RankTier:
    """Return the tier containing ``rating``; custom tables are validated first."""
    if tiers is not DEFAULT_RANK_TIERS:
        validate_rank_tiers(tiers)
    for tier in tiers:
        if tier.contains(rating):
            return tier
    raise ValueError(f"rating={rating} is not covered by any rank tier")


__all__ = ["DEFAULT_RANK_TIERS", "RankTier", "get_rank_tier", "validate_rank_tiers"]
