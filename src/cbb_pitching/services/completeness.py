from collections.abc import Iterable

from cbb_pitching.domain.completeness import TRACKED_FIELDS, TeamCompleteness
from cbb_pitching.domain.pitcher import Pitcher
from cbb_pitching.domain.team import Team
from cbb_pitching.repos.protocols import PitcherRepo, TeamRepo


def audit_completeness(teams: Iterable[Team], pitchers: Iterable[Pitcher]) -> list[TeamCompleteness]:
    """Per-team counts of filled biographical fields, most missing data first."""
    by_team: dict[str, list[Pitcher]] = {}
    for pitcher in pitchers:
        by_team.setdefault(pitcher.team_id, []).append(pitcher)

    audits = []
    for team in teams:
        roster = by_team.get(team.team_id, [])
        audits.append(
            TeamCompleteness(
                team_id=team.team_id,
                team_name=team.label,
                conference=team.conference,
                total_pitchers=len(roster),
                present={f: sum(1 for p in roster if getattr(p, f)) for f in TRACKED_FIELDS},
            )
        )
    audits.sort(key=lambda a: a.total_missing, reverse=True)
    return audits


class CompletenessAuditService:
    def __init__(self, team_repo: TeamRepo, pitcher_repo: PitcherRepo) -> None:
        self._team_repo = team_repo
        self._pitcher_repo = pitcher_repo

    def audit(self) -> list[TeamCompleteness]:
        return audit_completeness(self._team_repo.all(), self._pitcher_repo.all())
