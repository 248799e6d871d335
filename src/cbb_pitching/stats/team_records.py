from collections.abc import Iterable, Mapping

from cbb_pitching.domain.game import Game
from cbb_pitching.domain.team import Team
from cbb_pitching.domain.team_record import TeamGameResult, TeamRecord
from cbb_pitching.stats.innings import parse_count

_STREAK_WINDOW = 10


def _is_conference_game(team: Team, opponent_id: str, teams_by_id: Mapping[str, Team]) -> bool:
    if not team.conference:
        return False
    opponent = teams_by_id.get(opponent_id)
    return opponent is not None and opponent.conference == team.conference


def team_game_results(
    team: Team,
    games: Iterable[Game],
    teams_by_id: Mapping[str, Team] | None = None,
) -> list[TeamGameResult]:
    """Completed games for ``team`` from its own side, oldest first."""
    teams_by_id = teams_by_id or {}
    results: list[TeamGameResult] = []
    for game in games:
        if not game.completed:
            continue
        if team.team_id not in (game.home_team_id, game.away_team_id):
            continue
        is_home = game.home_team_id == team.team_id
        team_score = parse_count(game.home_score if is_home else game.away_score)
        opponent_score = parse_count(game.away_score if is_home else game.home_score)
        opponent_id = game.away_team_id if is_home else game.home_team_id
        results.append(
            TeamGameResult(
                game_id=game.game_id,
                date=game.date,
                team_id=team.team_id,
                team_name=game.home_name if is_home else game.away_name,
                opponent_id=opponent_id,
                opponent_name=game.away_name if is_home else game.home_name,
                team_score=team_score,
                opponent_score=opponent_score,
                is_home=is_home,
                is_win=team_score > opponent_score,
                is_conference=_is_conference_game(team, opponent_id, teams_by_id),
            )
        )
    results.sort(key=lambda r: r.date)
    return results


def _win_loss(results: list[TeamGameResult]) -> tuple[int, int]:
    wins = sum(1 for r in results if r.is_win)
    return wins, len(results) - wins


def _streak(results: list[TeamGameResult]) -> str:
    if not results:
        return ""
    recent = list(reversed(results[-_STREAK_WINDOW:]))
    winning = recent[0].is_win
    count = 0
    for result in recent:
        if result.is_win != winning:
            break
        count += 1
    return f"{'W' if winning else 'L'}{count}"


def compute_team_record(
    team: Team,
    games: Iterable[Game],
    teams_by_id: Mapping[str, Team] | None = None,
) -> TeamRecord:
    results = team_game_results(team, games, teams_by_id)

    wins, losses = _win_loss(results)
    home_wins, home_losses = _win_loss([r for r in results if r.is_home])
    away_wins, away_losses = _win_loss([r for r in results if not r.is_home])
    conf_wins, conf_losses = _win_loss([r for r in results if r.is_conference])
    ten_wins, ten_losses = _win_loss(results[-_STREAK_WINDOW:])

    return TeamRecord(
        team_id=team.team_id,
        team_name=team.label,
        conference=team.conference,
        wins=wins,
        losses=losses,
        win_pct=wins / len(results) if results else 0.0,
        home_record=f"{home_wins}-{home_losses}",
        away_record=f"{away_wins}-{away_losses}",
        conference_wins=conf_wins,
        conference_losses=conf_losses,
        conference_win_pct=conf_wins / (conf_wins + conf_losses) if conf_wins + conf_losses else 0.0,
        streak=_streak(results),
        last_ten=f"{ten_wins}-{ten_losses}",
    )


def conference_standings(
    conference: str,
    teams: Iterable[Team],
    games: Iterable[Game],
) -> list[TeamRecord]:
    """Records for every team in ``conference``, best win percentage first."""
    all_teams = list(teams)
    all_games = list(games)
    teams_by_id = {t.team_id: t for t in all_teams}
    records = [
        compute_team_record(team, all_games, teams_by_id) for team in all_teams if team.conference == conference
    ]
    records.sort(key=lambda r: r.team_name)
    records.sort(key=lambda r: r.win_pct, reverse=True)
    return records
