import logging
from collections.abc import Iterable

from cbb_pitching.domain.leaderboard import Direction, LeaderboardCategory, LeaderboardEntry
from cbb_pitching.domain.pitching_stats import SeasonStats

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_MIN_INNINGS = 10.0


def qualified(pitchers: Iterable[SeasonStats], min_innings: float) -> list[SeasonStats]:
    return [p for p in pitchers if p.innings_pitched >= min_innings]


def get_leaders(
    pitchers: Iterable[SeasonStats],
    category: LeaderboardCategory | str,
    limit: int = DEFAULT_LIMIT,
    min_innings: float = DEFAULT_MIN_INNINGS,
) -> list[LeaderboardEntry]:
    """Rank qualified pitchers in one category.

    Pitchers under ``min_innings`` are dropped, not ranked last. Equal values
    are ordered by pitcher id ascending.
    """
    category = LeaderboardCategory(category)
    pool = qualified(pitchers, min_innings)
    logger.debug("%d pitchers qualify for %s at %.1f IP", len(pool), category, min_innings)

    field = category.stat_field
    by_id = sorted(pool, key=lambda p: p.pitcher_id)
    # sorted() is stable in both directions, so the id order survives as the tiebreak
    ranked = sorted(
        by_id,
        key=lambda p: getattr(p, field),
        reverse=category.direction is Direction.HIGHER,
    )
    return [LeaderboardEntry(rank=i + 1, stats=p) for i, p in enumerate(ranked[: max(limit, 0)])]
