"""Database repository helpers."""

from repositories.player_repository import (
    add_player,
    count_players,
    ensure_player_schema,
    fetch_all_players,
    fetch_players,
    save_players,
    select_players_statement,
)

__all__ = [
    "add_player",
    "count_players",
    "ensure_player_schema",
    "fetch_all_players",
    "fetch_players",
    "save_players",
    "select_players_statement",
]
