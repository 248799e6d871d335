from cbb_pitching.domain.errors import NotFoundError
from cbb_pitching.domain.result import Err, Ok, Result
from cbb_pitching.domain.team_record import TeamRecord
from cbb_pitching.repos.protocols import GameRepo, TeamRepo
from cbb_pitching.stats.team_records import compute_team_record, conference_standings


class StandingsService:
    def __init__(self, team_repo: TeamRepo, game_repo: GameRepo) -> None:
        self._team_repo = team_repo
        self._game_repo = game_repo

    def team_record(self, team_id: str) -> Result[TeamRecord, NotFoundError]:
        team = self._team_repo.get_by_id(team_id)
        if team is None:
            return Err(NotFoundError(message=f"No team with id '{team_id}'", entity="team", key=team_id))
        games = self._game_repo.get_by_team(team_id, completed_only=True)
        teams_by_id = {t.team_id: t for t in self._team_repo.all()}
        return Ok(compute_team_record(team, games, teams_by_id))

    def conference_standings(self, conference: str) -> list[TeamRecord]:
        teams = self._team_repo.get_by_conference(conference)
        if not teams:
            return []
        games = {g.game_id: g for t in teams for g in self._game_repo.get_by_team(t.team_id, completed_only=True)}
        return conference_standings(conference, teams, games.values())
