#!/usr/bin/env python3
"""Apply one tournament's placements to stored player ratings."""

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
from domain.pipeline import apply_tournament
from domain.ratings.common import TournamentResult
from domain.ratings.elo.config import DEFAULT_SYSTEM_NAME, EloSystemConfig, get_elo_system
from domain.ratings.errors import RatingEngineError
from repositories.player_repository import ensure_player_schema

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings" / "elo"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Tournament rating jobs.",
)


def _load_system(config_dir: Path, system_name: str) -> EloSystemConfig:
    try:
        return get_elo_system(config_dir, system_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--system-name") from exc


def parse_results(raw_results: list[str]) -> list[TournamentResult]:
    """Parse ``PLAYER_ID:POSITION`` pairs; the field size is the pair count."""
    parsed: list[tuple[int, int]] = []
    for raw in raw_results:
        player_part, separator, position_part = raw.partition(":")
        if not separator:
            raise typer.BadParameter(f"--result must look like PLAYER_ID:POSITION, got {raw!r}")
        try:
            parsed.append((int(player_part), int(position_part)))
        except ValueError as exc:
            raise typer.BadParameter(
                f"--result must contain integers, got {raw!r}"
            ) from exc

    total_players = len(parsed)
    return [
        TournamentResult(player_id=player_id, position=position, total_players=total_players)
        for player_id, position in parsed
    ]


@app.command()
def apply(
    results: Annotated[
        list[str],
        typer.Option("--result", help="PLAYER_ID:POSITION, repeated once per participant."),
    ],
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
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Compute rating changes without writing them."),
    ] = False,
) -> None:
    """Validate placements, rate the tournament and store all players atomically."""
    tournament_results = parse_results(results)
    system = _load_system(config_dir, system_name)

    engine = create_db_engine(db_url)
    ensure_player_schema(engine)
    session_factory = create_session_factory(engine)

    typer.echo(f"system={system.name} participants={len(tournament_results)}")
    typer.echo(
        " ".join(f"{key}={value}" for key, value in system.as_config_json().items())
    )
    try:
        apply_tournament(
            session_factory,
            tournament_results,
            params=system.parameters,
            dry_run=dry_run,
            echo=typer.echo,
        )
    except RatingEngineError as exc:
        typer.echo(f"rejected: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
