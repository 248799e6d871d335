import sqlite3

from cbb_pitching.domain.game import Game


class SqliteGameRepo:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def upsert(self, game: Game) -> str:
        self._conn.execute(
            """INSERT INTO games
                   (game_id, date, home_team_id, away_team_id, completed,
                    home_name, away_name, home_score, away_score,
                    season, week, status, venue)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
               ON CONFLICT(game_id) DO UPDATE SET
                   date=excluded.date, home_team_id=excluded.home_team_id,
                   away_team_id=excluded.away_team_id, completed=excluded.completed,
                   home_name=excluded.home_name, away_name=excluded.away_name,
                   home_score=excluded.home_score, away_score=excluded.away_score,
                   season=excluded.season, week=excluded.week,
                   status=excluded.status, venue=excluded.venue""",
            (
                game.game_id,
                game.date,
                game.home_team_id,
                game.away_team_id,
                int(game.completed),
                game.home_name,
                game.away_name,
                game.home_score,
                game.away_score,
                game.season,
                game.week,
                game.status,
                game.venue,
            ),
        )
        return game.game_id

    def get_by_id(self, game_id: str) -> Game | None:
        row = self._conn.execute("SELECT * FROM games WHERE game_id = ?", (game_id,)).fetchone()
        return self._row_to_game(row) if row else None

    def get_by_ids(self, game_ids: list[str]) -> list[Game]:
        if not game_ids:
            return []
        placeholders = ",".join("?" * len(game_ids))
        rows = self._conn.execute(
            f"SELECT * FROM games WHERE game_id IN ({placeholders})",
            game_ids,
        ).fetchall()
        return [self._row_to_game(row) for row in rows]

    def get_by_team(self, team_id: str, *, completed_only: bool = False) -> list[Game]:
        sql = "SELECT * FROM games WHERE (home_team_id = ? OR away_team_id = ?)"
        if completed_only:
            sql += " AND completed = 1"
        rows = self._conn.execute(sql + " ORDER BY date", (team_id, team_id)).fetchall()
        return [self._row_to_game(row) for row in rows]

    def all(self) -> list[Game]:
        rows = self._conn.execute("SELECT * FROM games ORDER BY date").fetchall()
        return [self._row_to_game(row) for row in rows]

    @staticmethod
    def _row_to_game(row: sqlite3.Row) -> Game:
        return Game(
            game_id=row["game_id"],
            date=row["date"],
            home_team_id=row["home_team_id"],
            away_team_id=row["away_team_id"],
            completed=bool(row["completed"]),
            home_name=row["home_name"],
            away_name=row["away_name"],
            home_score=row["home_score"],
            away_score=row["away_score"],
            season=row["season"],
            week=row["week"],
            status=row["status"],
            venue=row["venue"],
        )
