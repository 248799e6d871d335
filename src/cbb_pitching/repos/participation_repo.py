import json
import sqlite3

from cbb_pitching.domain.game import Participation
from cbb_pitching.repos.errors import LinkError, RepointError


class SqliteParticipationRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, participation: Participation) -> int:
        cursor = self._conn.execute(
            """INSERT INTO participation (game_id, team_id, pitcher_id, pitcher_name, stats)
               VALUES (?, ?, ?, ?, ?)
               ON CONFLICT(game_id, pitcher_id, pitcher_name) DO UPDATE SET
                   team_id=excluded.team_id, stats=excluded.stats""",
            (
                participation.game_id,
                participation.team_id,
                participation.pitcher_id,
                participation.pitcher_name,
                json.dumps(participation.stats or {}),
            ),
        )
        return cursor.lastrowid  # type: ignore[return-value]

    def get_by_pitcher(self, pitcher_id: str) -> list[Participation]:
        rows = self._conn.execute(
            "SELECT * FROM participation WHERE pitcher_id = ? ORDER BY id",
            (pitcher_id,),
        ).fetchall()
        return [self._row_to_participation(row) for row in rows]

    def get_by_team(self, team_id: str) -> list[Participation]:
        rows = self._conn.execute(
            "SELECT * FROM participation WHERE team_id = ? ORDER BY id",
            (team_id,),
        ).fetchall()
        return [self._row_to_participation(row) for row in rows]

    def get_unlinked(self) -> list[Participation]:
        rows = self._conn.execute("SELECT * FROM participation WHERE pitcher_id IS NULL ORDER BY id").fetchall()
        return [self._row_to_participation(row) for row in rows]

    def all(self) -> list[Participation]:
        rows = self._conn.execute("SELECT * FROM participation ORDER BY id").fetchall()
        return [self._row_to_participation(row) for row in rows]

    def count_by_pitcher(self, pitcher_id: str) -> int:
        row = self._conn.execute(
            "SELECT COUNT(*) FROM participation WHERE pitcher_id = ?",
            (pitcher_id,),
        ).fetchone()
        return row[0]

    def repoint(self, from_pitcher_id: str, to_pitcher_id: str) -> int:
        try:
            cursor = self._conn.execute(
                "UPDATE participation SET pitcher_id = ? WHERE pitcher_id = ?",
                (to_pitcher_id, from_pitcher_id),
            )
        except sqlite3.Error as exc:
            raise RepointError(from_pitcher_id, to_pitcher_id, exc) from exc
        return cursor.rowcount

    def link(self, participation_id: int, pitcher_id: str) -> None:
        try:
            self._conn.execute(
                "UPDATE participation SET pitcher_id = ? WHERE id = ?",
                (pitcher_id, participation_id),
            )
        except sqlite3.IntegrityError as exc:
            raise LinkError(participation_id, pitcher_id, exc) from exc

    @staticmethod
    def _row_to_participation(row: sqlite3.Row) -> Participation:
        raw_stats = json.loads(row["stats"]) if row["stats"] else {}
        return Participation(
            id=row["id"],
            game_id=row["game_id"],
            team_id=row["team_id"],
            pitcher_id=row["pitcher_id"],
            pitcher_name=row["pitcher_name"],
            stats={str(k): str(v) for k, v in raw_stats.items() if v is not None},
        )
