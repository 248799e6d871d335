from cbb_pitching.domain.game import Game, Participation
from cbb_pitching.domain.pitching_stats import GameStats
from cbb_pitching.stats import rates
from cbb_pitching.stats.innings import parse_count, parse_innings


def opponent_of(team_id: str, game: Game) -> tuple[str, str | None]:
    """Return (opponent_id, opponent_name) for ``team_id`` in ``game``."""
    if team_id == game.home_team_id:
        return game.away_team_id, game.away_name
    return game.home_team_id, game.home_name


def to_game_stats(participation: Participation, game: Game) -> GameStats:
    """Normalize one scraped pitching line joined with its game.

    The per-game rates are for display; season figures are always rebuilt
    from summed counting stats.
    """
    stats = participation.stats or {}
    opponent_id, opponent_name = opponent_of(participation.team_id, game)

    innings_pitched = parse_innings(stats.get("IP"))
    earned_runs = parse_count(stats.get("ER"))
    strikeouts = parse_count(stats.get("K"))
    walks = parse_count(stats.get("BB"))
    hits = parse_count(stats.get("H"))

    return GameStats(
        game_id=participation.game_id,
        pitcher_id=participation.pitcher_id,
        pitcher_name=participation.pitcher_name,
        team_id=participation.team_id,
        date=game.date,
        opponent_id=opponent_id,
        opponent_name=opponent_name,
        innings_pitched=innings_pitched,
        earned_runs=earned_runs,
        strikeouts=strikeouts,
        walks=walks,
        hits=hits,
        home_runs=parse_count(stats.get("HR")),
        runs=parse_count(stats.get("R")),
        pitch_count=parse_count(stats.get("PC")),
        era=rates.era(earned_runs, innings_pitched),
        whip=rates.whip(walks, hits, innings_pitched),
        k_per_9=rates.k_per_9(strikeouts, innings_pitched),
        bb_per_9=rates.bb_per_9(walks, innings_pitched),
        k_bb_ratio=rates.k_bb_ratio(strikeouts, walks),
    )
