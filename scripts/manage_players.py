#!/usr/bin/env python3
"""Create the players table and register players."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.ratings.elo.config import DEFAULT_SYSTEM_NAME, EloSystemConfig, get_elo_system
from domain.ratings.tiers import get_rank_tier
from repositories.player_repository import add_player, count_players, ensure_player_schema

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings" / "elo"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Player store jobs.",
)


def _load_system(config_dir: Path, system_name: str) -> EloSystemConfig:
    try:
        return get_elo_system(config_dir, system_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--system-name") from exc


@app.command("init-db")
def init_db(
    db_url: Annotated[str, typer.Option("--db-url", help="Database URL.")] = DEFAULT_DB_URL,
) -> None:
    """Create the players table if it is missing."""
    engine = create_db_engine(db_url)
    ensure_player_schema(engine)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        typer.echo(f"schema ready players={count_players(session)}")


@app.command("add")
def add(
    player_id: Annotated[int, typer.Argument(help="Player id.")],
    rating: Annotated[
        int | None,
        typer.Option("--rating", help="Starting rating. Defaults to the config initial_rating."),
    ] = None,
    config_dir: Annotated[
        Path,
        typer.Option(
            "--config-dir",
            help="Directory containing Elo system TOML config files.",
        ),
    ] = DEFAULT_CONFIG_DIR,
    system_name: Annotated[
        str,
        typer.Option("--system-name", help="Elo system name from [system].name."),
    ] = DEFAULT_SYSTEM_NAME,
    db_url: Annotated[str, typer.Option("--db-url", help="Database URL.")] = DEFAULT_DB_URL,
) -> None:
    """Register a new calibrating player."""
    system = _load_system(config_dir, system_name)
    starting_rating = system.parameters.initial_rating if rating is None else rating

    engine = create_db_engine(db_url)
    ensure_player_schema(engine)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        try:
            player = add_player(session, player_id, rating=starting_rating)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        session.commit()

    tier = get_rank_tier(player.rating)
    typer.echo(f"added player_id={player.id} rating={player.rating} tier={tier.title}")


if __name__ == "__main__":
    app()
