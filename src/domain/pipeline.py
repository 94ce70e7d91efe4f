"""Apply one tournament's results to stored player state."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker

from domain.ratings.common import TournamentResult
from domain.ratings.elo.calculator import DEFAULT_PARAMETERS, EngineParameters
from domain.ratings.elo.tournament import PlayerRatingChange, ensure_valid_results, score_tournament
from domain.ratings.errors import PairingMismatchError
from repositories.player_repository import fetch_players, save_players


@dataclass(frozen=True)
class TournamentApplySummary:
    """Outcome of applying one tournament."""

    tournament_average: int
    changes: tuple[PlayerRatingChange, ...]
    dry_run: bool

    @property
    def processed_players(self) -> int:
        return len(self.changes)


def apply_tournament(
    session_factory: sessionmaker[Session],
    results: Sequence[TournamentResult],
    *,
    params: EngineParameters = DEFAULT_PARAMETERS,
    dry_run: bool = False,
    echo: Callable[[str], None] | None = None,
) -> TournamentApplySummary:
    """Rate one tournament and store every participant in a single transaction.

    Results are validated before the store is read. Participant rows are read
    with ``SELECT ... FOR UPDATE`` so concurrent applies touching the same
    players serialize. Any failure rolls the transaction back so no
    participant is partially updated.
    """
    ensure_valid_results(results)

    with session_factory() as session:
        try:
            try:
                players = fetch_players(
                    session,
                    [result.player_id for result in results],
                    for_update=True,
                )
            except KeyError as exc:
                raise PairingMismatchError(str(exc.args[0])) from exc

            changes = score_tournament(players, results, params=params)

            if dry_run:
                session.rollback()
            else:
                save_players(session, [change.player for change in changes])
                session.commit()
        except Exception:
            session.rollback()
            raise

    if echo is not None:
        prefix = "[dry-run] " if dry_run else ""
        for change in changes:
            echo(
                f"{prefix}player_id={change.player_id} "
                f"position={change.position}/{change.total_players} "
                f"{change.describe()}"
            )
        echo(
            f"{prefix}completed processed_players={len(changes)} "
            f"tournament_average={changes[0].tournament_average}"
        )

    return TournamentApplySummary(
        tournament_average=changes[0].tournament_average,
        changes=tuple(changes),
        dry_run=dry_run,
    )


__all__ = ["TournamentApplySummary", "apply_tournament"]
