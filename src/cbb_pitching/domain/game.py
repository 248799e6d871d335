from dataclasses import dataclass, field


@dataclass(frozen=True)
class Game:
    game_id: str
    date: str
    home_team_id: str
    away_team_id: str
    completed: bool = False
    home_name: str | None = None
    away_name: str | None = None
    home_score: str | None = None
    away_score: str | None = None
    season: int | None = None
    week: int | None = None
    status: str | None = None
    venue: str | None = None


@dataclass(frozen=True)
class Participation:
    """One pitcher's raw box-score line for one game, as scraped.

    ``stats`` holds the scraped strings keyed by box-score column
    (``IP``, ``H``, ``R``, ``ER``, ``BB``, ``K``, ``HR``, ``PC``); any key
    may be missing.
    """

    game_id: str
    team_id: str
    pitcher_name: str
    pitcher_id: str | None = None
    stats: dict[str, str] = field(default_factory=dict)
    id: int | None = None
