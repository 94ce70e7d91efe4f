"""Persistence helpers for current player state using SQLAlchemy."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.ratings.common import Player
from models import Base, PlayerRecord


def ensure_player_schema(engine: Engine) -> None:
    """Create the players table if it does not exist."""
    Base.metadata.create_all(bind=engine, tables=[PlayerRecord.__table__])


def _to_domain(record: PlayerRecord) -> Player:
    return Player(
        id=record.id,
        rating=record.rating,
        is_calibrating=record.is_calibrating,
        calibration_games=record.calibration_games,
        wins=record.wins,
        losses=record.losses,
    )


def add_player(session: Session, player_id: int, *, rating: int) -> Player:
    """Register a new player at the given starting rating, still calibrating."""
    if session.get(PlayerRecord, player_id) is not None:
        raise ValueError(f"player_id={player_id} already exists")

    record = PlayerRecord(
        id=player_id,
        rating=rating,
        is_calibrating=True,
        calibration_games=0,
        wins=0,
        losses=0,
    )
    session.add(record)
    session.flush()
    return _to_domain(record)


def select_players_statement(player_ids: Iterable[int], *, for_update: bool = False) -> Select:
    """Select player rows by id; ``for_update`` adds a row lock held until commit."""
    statement = (
        select(PlayerRecord)
        .where(PlayerRecord.id.in_(list(player_ids)))
        .order_by(PlayerRecord.id)
    )
    if for_update:
        statement = statement.with_for_update()
    return statement


def fetch_players(
    session: Session,
    player_ids: Iterable[int],
    *,
    for_update: bool = False,
) -> list[Player]:
    """Fetch players by id in the requested order; unknown ids raise KeyError."""
    requested = list(player_ids)
    records = session.execute(
        select_players_statement(requested, for_update=for_update)
    ).scalars()
    by_id = {record.id: record for record in records}

    missing = sorted(set(requested) - set(by_id))
    if missing:
        raise KeyError(f"Unknown player ids: {missing}")
    return [_to_domain(by_id[player_id]) for player_id in requested]


def fetch_all_players(session: Session) -> list[Player]:
    statement = select(PlayerRecord).order_by(PlayerRecord.rating.desc(), PlayerRecord.id)
    return [_to_domain(record) for record in session.execute(statement).scalars()]


def save_players(session: Session, players: Sequence[Player]) -> None:
    """Write player state back onto existing rows."""
    if not players:
        return

    records = session.execute(
        select_players_statement([player.id for player in players])
    ).scalars()
    by_id = {record.id: record for record in records}

    for player in players:
        record = by_id.get(player.id)
        if record is None:
            raise KeyError(f"Cannot save unknown player_id={player.id}")
        record.rating = player.rating
        record.is_calibrating = player.is_calibrating
        record.calibration_games = player.calibration_games
        record.wins = player.wins
        record.losses = player.losses
    session.flush()


def count_players(session: Session) -> int:
    result = session.scalar(select(func.count(PlayerRecord.id)))
    return int(result or 0)
