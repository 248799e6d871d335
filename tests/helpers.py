import sqlite3

from cbb_pitching.domain.game import Game, Participation
from cbb_pitching.domain.pitcher import Pitcher
from cbb_pitching.domain.team import Team
from cbb_pitching.repos.game_repo import SqliteGameRepo
from cbb_pitching.repos.participation_repo import SqliteParticipationRepo
from cbb_pitching.repos.pitcher_repo import SqlitePitcherRepo
from cbb_pitching.repos.team_repo import SqliteTeamRepo


def seed_team(
    conn: sqlite3.Connection,
    *,
    team_id: str = "t1",
    name: str = "Test Tech",
    conference: str | None = "SEC",
    display_name: str | None = None,
) -> str:
    team_id = SqliteTeamRepo(conn).upsert(
        Team(team_id=team_id, name=name, display_name=display_name, conference=conference)
    )
    conn.commit()
    return team_id


def seed_pitcher(
    conn: sqlite3.Connection,
    *,
    pitcher_id: str = "p1",
    team_id: str = "t1",
    name: str = "John Doe",
    **fields: object,
) -> str:
    """Insert a pitcher; any other ``Pitcher`` field may be passed by keyword."""
    pitcher_id = SqlitePitcherRepo(conn).upsert(
        Pitcher(pitcher_id=pitcher_id, team_id=team_id, name=name, **fields)  # type: ignore[arg-type]
    )
    conn.commit()
    return pitcher_id


def seed_game(
    conn: sqlite3.Connection,
    *,
    game_id: str = "g1",
    date: str = "2025-03-01",
    home_team_id: str = "t1",
    away_team_id: str = "t2",
    completed: bool = True,
    home_score: str | None = None,
    away_score: str | None = None,
    home_name: str | None = None,
    away_name: str | None = None,
) -> str:
    game_id = SqliteGameRepo(conn).upsert(
        Game(
            game_id=game_id,
            date=date,
            home_team_id=home_team_id,
            away_team_id=away_team_id,
            completed=completed,
            home_score=home_score,
            away_score=away_score,
            home_name=home_name,
            away_name=away_name,
        )
    )
    conn.commit()
    return game_id


def seed_participation(
    conn: sqlite3.Connection,
    *,
    game_id: str = "g1",
    team_id: str = "t1",
    pitcher_id: str | None = "p1",
    pitcher_name: str = "John Doe",
    stats: dict[str, str] | None = None,
) -> int:
    row_id = SqliteParticipationRepo(conn).upsert(
        Participation(
            game_id=game_id,
            team_id=team_id,
            pitcher_id=pitcher_id,
            pitcher_name=pitcher_name,
            stats=stats or {},
        )
    )
    conn.commit()
    return row_id


def make_pitcher(pitcher_id: str = "p1", team_id: str = "t1", name: str = "John Doe", **fields: object) -> Pitcher:
    return Pitcher(pitcher_id=pitcher_id, team_id=team_id, name=name, **fields)  # type: ignore[arg-type]


def make_game(
    game_id: str = "g1",
    date: str = "2025-03-01",
    home_team_id: str = "t1",
    away_team_id: str = "t2",
    **fields: object,
) -> Game:
    return Game(
        game_id=game_id,
        date=date,
        home_team_id=home_team_id,
        away_team_id=away_team_id,
        completed=bool(fields.pop("completed", True)),
        **fields,  # type: ignore[arg-type]
    )
