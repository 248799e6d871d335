from dataclasses import dataclass


@dataclass(frozen=True)
class GameStats:
    game_id: str
    pitcher_id: str | None
    pitcher_name: str
    team_id: str
    date: str
    opponent_id: str
    opponent_name: str | None = None
    innings_pitched: float = 0.0
    earned_runs: int = 0
    strikeouts: int = 0
    walks: int = 0
    hits: int = 0
    home_runs: int = 0
    runs: int = 0
    pitch_count: int = 0
    era: float = 0.0
    whip: float = 0.0
    k_per_9: float = 0.0
    bb_per_9: float = 0.0
    k_bb_ratio: float = 0.0


@dataclass(frozen=True)
class SeasonStats:
    pitcher_id: str
    pitcher_name: str
    team_id: str
    games_played: int = 0
    innings_pitched: float = 0.0
    earned_runs: int = 0
    strikeouts: int = 0
    walks: int = 0
    hits: int = 0
    home_runs: int = 0
    runs: int = 0
    era: float = 0.0
    whip: float = 0.0
    k_per_9: float = 0.0
    bb_per_9: float = 0.0
    k_bb_ratio: float = 0.0
