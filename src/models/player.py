"""players table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class PlayerRecord(Base):
    """Current competitive state of one player (no rating history)."""

    __tablename__ = "players"
    __table_args__ = (
        CheckConstraint("calibration_games >= 0", name="ck_players_calibration_games"),
        CheckConstraint("wins >= 0", name="ck_players_wins"),
        CheckConstraint("losses >= 0", name="ck_players_losses"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    is_calibrating: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    calibration_games: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
