#!/usr/bin/env python3
"""Show top players by rating with their rank tiers."""

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
from domain.ratings.leaderboard import build_leaderboard
from domain.ratings.stats import calibration_progress, win_rate_pct
from repositories.player_repository import ensure_player_schema, fetch_all_players

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings" / "elo"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Query the player leaderboard.",
)


def _load_system(config_dir: Path, system_name: str) -> EloSystemConfig:
    try:
        return get_elo_system(config_dir, system_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--system-name") from exc


@app.command()
def show_leaderboard(
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of players to return."),
    ] = 20,
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
    """Print top players by rating."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")
    system = _load_system(config_dir, system_name)

    engine = create_db_engine(db_url)
    ensure_player_schema(engine)
    session_factory = create_session_factory(engine)
    with session_factory() as session:
        players = fetch_all_players(session)

    entries = build_leaderboard(players, top_n=top_n)
    if not entries:
        typer.echo("No players found.")
        return

    typer.echo(f"top_n={top_n} players={len(players)}")
    for entry in entries:
        player = entry.player
        progress = calibration_progress(player, params=system.parameters)
        calibrating = "" if progress.is_complete else f" calibrating={progress.describe()}"
        typer.echo(
            f"{entry.rank:2d}. player_id={player.id:<8d} "
            f"rating={player.rating:5d} tier={entry.tier.title:<12} "
            f"wins={player.wins:3d} losses={player.losses:3d} "
            f"win_rate={win_rate_pct(player):5.1f}%{calibrating}"
        )


if __name__ == "__main__":
    app()
