import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from cbb_pitching.config import TrackerConfig
from cbb_pitching.db.connection import create_connection
from cbb_pitching.repos.game_repo import SqliteGameRepo
from cbb_pitching.repos.participation_repo import SqliteParticipationRepo
from cbb_pitching.repos.pitcher_repo import SqlitePitcherRepo
from cbb_pitching.repos.team_repo import SqliteTeamRepo
from cbb_pitching.services.completeness import CompletenessAuditService
from cbb_pitching.services.duplicate_cleanup import DuplicateCleanupService
from cbb_pitching.services.roster_reconciliation import RosterReconciliationService
from cbb_pitching.services.season_stats import SeasonStatsService
from cbb_pitching.services.standings import StandingsService


@dataclass(frozen=True)
class TrackerContext:
    conn: sqlite3.Connection
    config: TrackerConfig
    season_stats: SeasonStatsService
    duplicates: DuplicateCleanupService
    roster: RosterReconciliationService
    standings: StandingsService
    completeness: CompletenessAuditService
    team_repo: SqliteTeamRepo
    pitcher_repo: SqlitePitcherRepo


@contextmanager
def build_tracker_context(config: TrackerConfig) -> Iterator[TrackerContext]:
    """Composition root: opens the database, wires repos and services, closes it."""
    conn = create_connection(config.db_path)
    try:
        team_repo = SqliteTeamRepo(conn)
        pitcher_repo = SqlitePitcherRepo(conn)
        game_repo = SqliteGameRepo(conn)
        participation_repo = SqliteParticipationRepo(conn)
        yield TrackerContext(
            conn=conn,
            config=config,
            season_stats=SeasonStatsService(participation_repo, game_repo, completed_only=config.completed_only),
            duplicates=DuplicateCleanupService(pitcher_repo, participation_repo, conn),
            roster=RosterReconciliationService(pitcher_repo, participation_repo, conn),
            standings=StandingsService(team_repo, game_repo),
            completeness=CompletenessAuditService(team_repo, pitcher_repo),
            team_repo=team_repo,
            pitcher_repo=pitcher_repo,
        )
    finally:
        conn.close()
