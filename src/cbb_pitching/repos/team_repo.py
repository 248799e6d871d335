import sqlite3

from cbb_pitching.domain.team import Team


class SqliteTeamRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, team: Team) -> str:
        self._conn.execute(
            """INSERT INTO teams (team_id, name, display_name, conference, logo)
               VALUES (?, ?, ?, ?, ?)
               ON CONFLICT(team_id) DO UPDATE SET
                   name=excluded.name, display_name=excluded.display_name,
                   conference=excluded.conference, logo=excluded.logo""",
            (team.team_id, team.name, team.display_name, team.conference, team.logo),
        )
        return team.team_id

    def get_by_id(self, team_id: str) -> Team | None:
        row = self._conn.execute("SELECT * FROM teams WHERE team_id = ?", (team_id,)).fetchone()
        return self._row_to_team(row) if row else None

    def get_by_conference(self, conference: str) -> list[Team]:
        rows = self._conn.execute(
            "SELECT * FROM teams WHERE conference = ? ORDER BY name",
            (conference,),
        ).fetchall()
        return [self._row_to_team(row) for row in rows]

    def all(self) -> list[Team]:
        rows = self._conn.execute("SELECT * FROM teams ORDER BY name").fetchall()
        return [self._row_to_team(row) for row in rows]

    @staticmethod
    def _row_to_team(row: sqlite3.Row) -> Team:
        return Team(
            team_id=row["team_id"],
            name=row["name"],
            display_name=row["display_name"],
            conference=row["conference"],
            logo=row["logo"],
        )
