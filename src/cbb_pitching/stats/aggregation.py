from collections.abc import Sequence

from cbb_pitching.domain.pitching_stats import GameStats, SeasonStats
from cbb_pitching.stats import rates


def aggregate_season_stats(
    games: Sequence[GameStats],
    pitcher_id: str,
    pitcher_name: str,
    team_id: str,
) -> SeasonStats:
    """Fold per-game lines into season totals.

    Rates come from the summed totals, never from averaging per-game rates:
    1 ER in 1 IP plus 0 ER in 9 IP is a 0.90 ERA, not 4.50.
    """
    innings_pitched = float(sum(g.innings_pitched for g in games))
    earned_runs = sum(g.earned_runs for g in games)
    strikeouts = sum(g.strikeouts for g in games)
    walks = sum(g.walks for g in games)
    hits = sum(g.hits for g in games)

    return SeasonStats(
        pitcher_id=pitcher_id,
        pitcher_name=pitcher_name,
        team_id=team_id,
        games_played=len(games),
        innings_pitched=innings_pitched,
        earned_runs=earned_runs,
        strikeouts=strikeouts,
        walks=walks,
        hits=hits,
        home_runs=sum(g.home_runs for g in games),
        runs=sum(g.runs for g in games),
        era=rates.era(earned_runs, innings_pitched),
        whip=rates.whip(walks, hits, innings_pitched),
        k_per_9=rates.k_per_9(strikeouts, innings_pitched),
        bb_per_9=rates.bb_per_9(walks, innings_pitched),
        k_bb_ratio=rates.k_bb_ratio(strikeouts, walks),
    )


def recent_form(games: Sequence[GameStats], last_n: int = 3) -> list[GameStats]:
    """Most recent ``last_n`` games, newest first."""
    if last_n <= 0:
        return []
    return sorted(games, key=lambda g: g.date, reverse=True)[:last_n]
