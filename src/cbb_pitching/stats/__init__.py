from cbb_pitching.stats.aggregation import aggregate_season_stats, recent_form
from cbb_pitching.stats.game_stats import to_game_stats
from cbb_pitching.stats.innings import parse_count, parse_innings
from cbb_pitching.stats.leaderboards import get_leaders
from cbb_pitching.stats.rates import K_BB_SENTINEL, bb_per_9, era, k_bb_ratio, k_per_9, whip

__all__ = [
    "K_BB_SENTINEL",
    "aggregate_season_stats",
    "bb_per_9",
    "era",
    "get_leaders",
    "k_bb_ratio",
    "k_per_9",
    "parse_count",
    "parse_innings",
    "recent_form",
    "to_game_stats",
    "whip",
]
