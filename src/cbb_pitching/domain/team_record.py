from dataclasses import dataclass


@dataclass(frozen=True)
class TeamGameResult:
    game_id: str
    date: str
    team_id: str
    team_name: str | None
    opponent_id: str
    opponent_name: str | None
    team_score: int
    opponent_score: int
    is_home: bool
    is_win: bool
    is_conference: bool = False


@dataclass(frozen=True)
class TeamRecord:
    team_id: str
    team_name: str
    conference: str | None
    wins: int = 0
    losses: int = 0
    win_pct: float = 0.0
    home_record: str = "0-0"
    away_record: str = "0-0"
    conference_wins: int = 0
    conference_losses: int = 0
    conference_win_pct: float = 0.0
    streak: str = ""
    last_ten: str = "0-0"

    @property
    def games(self) -> int:
        return self.wins + self.losses
