import logging
from collections.abc import Iterable

from cbb_pitching.domain.game import Participation
from cbb_pitching.domain.pitching_stats import GameStats, SeasonStats
from cbb_pitching.repos.protocols import GameRepo, ParticipationRepo
from cbb_pitching.stats.aggregation import aggregate_season_stats, recent_form
from cbb_pitching.stats.game_stats import to_game_stats

logger = logging.getLogger(__name__)


class SeasonStatsService:
    """Builds per-game and season pitching lines from stored box scores.

    A pitcher with no usable participation yields ``None`` (or no entry in
    a list), never a zeroed line, so "no data" stays distinct from "zero".
    """

    def __init__(
        self,
        participation_repo: ParticipationRepo,
        game_repo: GameRepo,
        *,
        completed_only: bool = True,
    ) -> None:
        self._participation_repo = participation_repo
        self._game_repo = game_repo
        self._completed_only = completed_only

    def _to_game_stats(self, rows: list[Participation]) -> list[GameStats]:
        games = {g.game_id: g for g in self._game_repo.get_by_ids(sorted({r.game_id for r in rows}))}
        result: list[GameStats] = []
        for row in rows:
            game = games.get(row.game_id)
            if game is None:
                logger.warning("Participation for %s references unknown game %s", row.pitcher_name, row.game_id)
                continue
            if self._completed_only and not game.completed:
                continue
            result.append(to_game_stats(row, game))
        return result

    def _aggregate(self, game_stats: Iterable[GameStats]) -> list[SeasonStats]:
        by_pitcher: dict[str, list[GameStats]] = {}
        skipped = 0
        for stats in game_stats:
            if not stats.pitcher_id:
                skipped += 1
                continue
            by_pitcher.setdefault(stats.pitcher_id, []).append(stats)
        if skipped:
            logger.warning("Skipped %d participation rows with no pitcher id", skipped)

        season: list[SeasonStats] = []
        for pitcher_id, games in by_pitcher.items():
            latest = max(games, key=lambda g: g.date)
            season.append(aggregate_season_stats(games, pitcher_id, latest.pitcher_name, latest.team_id))
        return season

    def game_stats_for_pitcher(self, pitcher_id: str) -> list[GameStats]:
        """Every counted game for the pitcher, newest first."""
        rows = self._participation_repo.get_by_pitcher(pitcher_id)
        return sorted(self._to_game_stats(rows), key=lambda g: g.date, reverse=True)

    def recent_stats(self, pitcher_id: str, last_n: int = 3) -> list[GameStats]:
        return recent_form(self.game_stats_for_pitcher(pitcher_id), last_n)

    def season_stats_for_pitcher(self, pitcher_id: str) -> SeasonStats | None:
        games = self.game_stats_for_pitcher(pitcher_id)
        if not games:
            return None
        latest = games[0]
        return aggregate_season_stats(games, pitcher_id, latest.pitcher_name, latest.team_id)

    def season_stats_for_team(self, team_id: str) -> list[SeasonStats]:
        return self._aggregate(self._to_game_stats(self._participation_repo.get_by_team(team_id)))

    def all_season_stats(self) -> list[SeasonStats]:
        season = self._aggregate(self._to_game_stats(self._participation_repo.all()))
        logger.debug("Aggregated season stats for %d pitchers", len(season))
        return season

    def compute_season_stats(self, *, pitcher_id: str | None = None, team_id: str | None = None) -> list[SeasonStats]:
        """Season lines for one pitcher, one team, or everybody."""
        if pitcher_id is not None and team_id is not None:
            raise ValueError("Pass pitcher_id or team_id, not both")
        if pitcher_id is not None:
            stats = self.season_stats_for_pitcher(pitcher_id)
            return [stats] if stats is not None else []
        if team_id is not None:
            return self.season_stats_for_team(team_id)
        return self.all_season_stats()
