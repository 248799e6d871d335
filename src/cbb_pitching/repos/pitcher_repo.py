import sqlite3

from cbb_pitching.domain.pitcher import Pitcher
from cbb_pitching.repos.errors import PitcherDeleteError, UnknownFieldError

_UPDATABLE_FIELDS = frozenset(
    {
        "display_name",
        "number",
        "position",
        "year",
        "height",
        "weight",
        "hometown",
        "high_school",
        "bats_throws",
        "headshot",
        "espn_link",
    }
)


class SqlitePitcherRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, pitcher: Pitcher) -> str:
        self._conn.execute(
            """INSERT INTO pitchers
                   (pitcher_id, team_id, name, display_name, number, position,
                    year, height, weight, hometown, high_school, bats_throws,
                    headshot, espn_link, ip, era)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
               ON CONFLICT(pitcher_id) DO UPDATE SET
                   team_id=excluded.team_id, name=excluded.name,
                   display_name=excluded.display_name, number=excluded.number,
                   position=excluded.position, year=excluded.year,
                   height=excluded.height, weight=excluded.weight,
                   hometown=excluded.hometown, high_school=excluded.high_school,
                   bats_throws=excluded.bats_throws, headshot=excluded.headshot,
                   espn_link=excluded.espn_link, ip=excluded.ip, era=excluded.era""",
            (
                pitcher.pitcher_id,
                pitcher.team_id,
                pitcher.name,
                pitcher.display_name,
                pitcher.number,
                pitcher.position,
                pitcher.year,
                pitcher.height,
                pitcher.weight,
                pitcher.hometown,
                pitcher.high_school,
                pitcher.bats_throws,
                pitcher.headshot,
                pitcher.espn_link,
                pitcher.ip,
                pitcher.era,
            ),
        )
        return pitcher.pitcher_id

    def get_by_id(self, pitcher_id: str) -> Pitcher | None:
        row = self._conn.execute("SELECT * FROM pitchers WHERE pitcher_id = ?", (pitcher_id,)).fetchone()
        return self._row_to_pitcher(row) if row else None

    def get_by_team(self, team_id: str) -> list[Pitcher]:
        rows = self._conn.execute(
            "SELECT * FROM pitchers WHERE team_id = ? ORDER BY rowid",
            (team_id,),
        ).fetchall()
        return [self._row_to_pitcher(row) for row in rows]

    def all(self) -> list[Pitcher]:
        rows = self._conn.execute("SELECT * FROM pitchers ORDER BY team_id, rowid").fetchall()
        return [self._row_to_pitcher(row) for row in rows]

    def update_fields(self, pitcher_id: str, fields: dict[str, str]) -> None:
        if not fields:
            return
        for name in fields:
            if name not in _UPDATABLE_FIELDS:
                raise UnknownFieldError(name)
        assignments = ", ".join(f"{name} = ?" for name in fields)
        self._conn.execute(
            f"UPDATE pitchers SET {assignments} WHERE pitcher_id = ?",
            (*fields.values(), pitcher_id),
        )

    def delete(self, pitcher_id: str) -> None:
        try:
            self._conn.execute("DELETE FROM pitchers WHERE pitcher_id = ?", (pitcher_id,))
        except sqlite3.Error as exc:
            raise PitcherDeleteError(pitcher_id, exc) from exc

    @staticmethod
    def _row_to_pitcher(row: sqlite3.Row) -> Pitcher:
        return Pitcher(
            pitcher_id=row["pitcher_id"],
            team_id=row["team_id"],
            name=row["name"],
            display_name=row["display_name"],
            number=row["number"],
            position=row["position"],
            year=row["year"],
            height=row["height"],
            weight=row["weight"],
            hometown=row["hometown"],
            high_school=row["high_school"],
            bats_throws=row["bats_throws"],
            headshot=row["headshot"],
            espn_link=row["espn_link"],
            ip=row["ip"],
            era=row["era"],
        )
