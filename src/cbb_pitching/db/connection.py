"""SQLite connection setup and schema migrations.

Migrations are numbered ``NNN_name.sql`` scripts in ``migrations/``. Each
pending script runs as one transaction together with its ``schema_version``
row, so a broken script leaves neither its tables nor its version behind.
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"

_VERSION_TABLE_DDL = """CREATE TABLE IF NOT EXISTS schema_version (
    version    INTEGER PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
)"""


def create_connection(path: str | Path, *, migrations_dir: Path | None = None) -> sqlite3.Connection:
    """Open the tracker database with foreign keys on and migrations applied."""
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    if str(path) != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL")
    migrate(conn, migrations_dir or MIGRATIONS_DIR)
    return conn


def schema_version(conn: sqlite3.Connection) -> int:
    """Highest applied migration number, 0 on a fresh database."""
    exists = conn.execute("SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_version'").fetchone()
    if exists is None:
        return 0
    return conn.execute("SELECT COALESCE(MAX(version), 0) FROM schema_version").fetchone()[0]


def pending_migrations(migrations_dir: Path, applied_version: int) -> list[tuple[int, Path]]:
    scripts = sorted((int(path.stem.split("_", 1)[0]), path) for path in migrations_dir.glob("*.sql"))
    return [(version, path) for version, path in scripts if version > applied_version]


def migrate(conn: sqlite3.Connection, migrations_dir: Path) -> int:
    """Apply pending scripts in order and return how many ran."""
    conn.execute(_VERSION_TABLE_DDL)
    conn.commit()
    applied = 0
    for version, path in pending_migrations(migrations_dir, schema_version(conn)):
        script = f"BEGIN;\n{path.read_text()}\n;\nINSERT INTO schema_version (version) VALUES ({version});\nCOMMIT;"
        try:
            conn.executescript(script)
        except sqlite3.Error:
            if conn.in_transaction:
                conn.rollback()
            raise
        logger.debug("Applied migration %s", path.name)
        applied += 1
    return applied


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Commit on success, roll back and re-raise on any error."""
    try:
        yield conn
    except Exception:
        conn.rollback()
        raise
    conn.commit()
