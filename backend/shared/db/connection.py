"""SQLite database connection and schema management."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shared.dal.models import GameRecord

logger = structlog.get_logger()

_DB_FILE_PERMISSIONS = 0o600

# AUTOINCREMENT keeps ids monotonic: an id freed by a delete is never handed out again.
_SCHEMA_SQL = """\
CREATE TABLE IF NOT EXISTS games (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL CHECK (length(title) BETWEEN 1 AND 200),
    platform TEXT NOT NULL DEFAULT '' CHECK (length(platform) <= 100),
    genre TEXT CHECK (genre IS NULL OR length(genre) <= 100),
    release_year INTEGER,
    description TEXT CHECK (description IS NULL OR length(description) <= 1000),
    is_completed INTEGER NOT NULL DEFAULT 0,
    rating INTEGER
);
"""


class Database:
    """SQLite database wrapper with schema management and sample-data seeding."""

    def __init__(self, path: str | Path) -> None:
        self._path = str(path)
        self._conn: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Return the active connection.

        Raises sqlite3.ProgrammingError when disconnected, the same error
        sqlite3 gives for a closed connection.
        """
        if self._conn is None:
            raise sqlite3.ProgrammingError("Database is not connected")
        return self._conn

    def connect(self) -> None:
        """Open the database, apply pragmas, create schema, and harden file permissions."""
        Path(self._path).parent.mkdir(parents=True, exist_ok=True)

        self._conn = sqlite3.connect(self._path, check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute("PRAGMA foreign_keys=ON")
        self._conn.execute("PRAGMA busy_timeout=5000")
        self._conn.executescript(_SCHEMA_SQL)

        self._harden_permissions()
        logger.info("database connected", path=self._path)

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def seed_games(self, games: Sequence[GameRecord]) -> int:
        """Insert sample games, keeping their ids, into a catalog that has never held a row.

        Returns the number of games inserted; 0 when the table has ever issued
        an id, even if it is empty now, so later ids keep sorting after the
        seeded ones. All rows go in as one transaction, so a failure leaves
        the table untouched.
        """
        conn = self.connection
        issued = conn.execute("SELECT 1 FROM sqlite_sequence WHERE name = 'games'").fetchone()
        if issued is not None:
            logger.info("games table has been used, skipping seed")
            return 0

        try:
            conn.execute("BEGIN")
            conn.executemany(
                "INSERT INTO games "
                "(id, title, platform, genre, release_year, description, is_completed, rating) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                [
                    (
                        game.id,
                        game.title,
                        game.platform,
                        game.genre,
                        game.release_year,
                        game.description,
                        game.is_completed,
                        game.rating,
                    )
                    for game in games
                ],
            )
            conn.execute("COMMIT")
        except Exception:
            conn.execute("ROLLBACK")
            raise

        logger.info("seeded sample games", count=len(games))
        return len(games)

    def _harden_permissions(self) -> None:
        """Restrict the database file and its WAL/SHM siblings to the owner (best effort)."""
        if os.name != "posix":  # pragma: no cover
            return
        for suffix in ("", "-wal", "-shm"):
            p = Path(self._path + suffix)
            if p.exists():
                try:
                    p.chmod(_DB_FILE_PERMISSIONS)
                except OSError:
                    logger.warning("could not set file permissions", permissions=oct(_DB_FILE_PERMISSIONS), path=str(p))
