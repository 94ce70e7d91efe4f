#!/usr/bin/env python3
"""Print head-to-head win odds for two ratings."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.ratings.elo.config import DEFAULT_SYSTEM_NAME, EloSystemConfig, get_elo_system
from domain.ratings.probability import calculate_match_probability
from domain.ratings.tiers import get_rank_tier

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings" / "elo"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Pairwise match odds.",
)


def _load_system(config_dir: Path, system_name: str) -> EloSystemConfig:
    try:
        return get_elo_system(config_dir, system_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--system-name") from exc


@app.command()
def match_odds(
    rating_a: Annotated[int, typer.Argument(help="Rating of player A.")],
    rating_b: Annotated[int, typer.Argument(help="Rating of player B.")],
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
) -> None:
    system = _load_system(config_dir, system_name)
    odds = calculate_match_probability(rating_a, rating_b, params=system.parameters)
    typer.echo(
        f"a={rating_a} ({get_rank_tier(rating_a).title}) "
        f"b={rating_b} ({get_rank_tier(rating_b).title})"
    )
    typer.echo(f"win_a={odds.win_a_pct}% win_b={odds.win_b_pct}% draw={odds.draw_pct}%")


if __name__ == "__main__":
    app()
