from dataclasses import dataclass
from enum import StrEnum

from cbb_pitching.domain.pitching_stats import SeasonStats


class Direction(StrEnum):
    HIGHER = "higher"
    LOWER = "lower"


class LeaderboardCategory(StrEnum):
    ERA = "era"
    WHIP = "whip"
    STRIKEOUTS = "k"
    INNINGS = "ip"
    K_PER_9 = "k_per_9"
    BB_PER_9 = "bb_per_9"
    K_BB_RATIO = "k_bb_ratio"

    @property
    def direction(self) -> Direction:
        return _DIRECTIONS[self]

    @property
    def stat_field(self) -> str:
        return _STAT_FIELDS[self]


_DIRECTIONS: dict[LeaderboardCategory, Direction] = {
    LeaderboardCategory.ERA: Direction.LOWER,
    LeaderboardCategory.WHIP: Direction.LOWER,
    LeaderboardCategory.STRIKEOUTS: Direction.HIGHER,
    LeaderboardCategory.INNINGS: Direction.HIGHER,
    LeaderboardCategory.K_PER_9: Direction.HIGHER,
    LeaderboardCategory.BB_PER_9: Direction.LOWER,
    LeaderboardCategory.K_BB_RATIO: Direction.HIGHER,
}

_STAT_FIELDS: dict[LeaderboardCategory, str] = {
    LeaderboardCategory.ERA: "era",
    LeaderboardCategory.WHIP: "whip",
    LeaderboardCategory.STRIKEOUTS: "strikeouts",
    LeaderboardCategory.INNINGS: "innings_pitched",
    LeaderboardCategory.K_PER_9: "k_per_9",
    LeaderboardCategory.BB_PER_9: "bb_per_9",
    LeaderboardCategory.K_BB_RATIO: "k_bb_ratio",
}


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    stats: SeasonStats

    @property
    def pitcher_id(self) -> str:
        return self.stats.pitcher_id
