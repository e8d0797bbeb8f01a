"""SQLite-backed game repository."""

from __future__ import annotations

import asyncio
import sqlite3
from typing import TYPE_CHECKING

from shared.dal.game_repository import GameRepository
from shared.dal.models import GameRecord, fits_integer_column

if TYPE_CHECKING:
    from shared.dal.models import NewGameRecord
    from shared.db.connection import Database

_SELECT_GAMES = "SELECT id, title, platform, genre, release_year, description, is_completed, rating FROM games"


def _row_to_record(row: tuple) -> GameRecord:
    game_id, title, platform, genre, release_year, description, is_completed, rating = row
    return GameRecord(
        id=game_id,
        title=title,
        platform=platform,
        genre=genre,
        release_year=release_year,
        description=description,
        is_completed=bool(is_completed),
        rating=rating,
    )


class SqliteGameRepository(GameRepository):
    """SQLite implementation of GameRepository.

    Writes run one at a time under an asyncio lock and are committed
    immediately. A failed write is rolled back and the sqlite3 error is
    re-raised as-is.

    An id wider than SQLite INTEGER cannot name a stored row, so lookups,
    replaces and deletes report it as missing without querying.
    """

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def list_games(self) -> list[GameRecord]:
        """Return every game in insertion order."""
        rows = self._db.connection.execute(f"{_SELECT_GAMES} ORDER BY id").fetchall()
        return [_row_to_record(row) for row in rows]

    async def get_game(self, game_id: int) -> GameRecord | None:
        if not fits_integer_column(game_id):
            return None
        row = self._db.connection.execute(f"{_SELECT_GAMES} WHERE id = ?", (game_id,)).fetchone()
        if row is None:
            return None
        return _row_to_record(row)

    async def insert_game(self, game: NewGameRecord) -> GameRecord:
        """Insert a game and return it with the id SQLite assigned."""
        async with self._lock:
            cursor = self._write(
                "INSERT INTO games "
                "(title, platform, genre, release_year, description, is_completed, rating) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    game.title,
                    game.platform,
                    game.genre,
                    game.release_year,
                    game.description,
                    game.is_completed,
                    game.rating,
                ),
            )
        return GameRecord(id=cursor.lastrowid, **game.model_dump())

    async def replace_game(self, game: GameRecord) -> bool:
        """Overwrite every column except id. Returns False when no row has that id."""
        if not fits_integer_column(game.id):
            return False
        async with self._lock:
            cursor = self._write(
                "UPDATE games SET "
                "title = ?, platform = ?, genre = ?, release_year = ?, "
                "description = ?, is_completed = ?, rating = ? "
                "WHERE id = ?",
                (
                    game.title,
                    game.platform,
                    game.genre,
                    game.release_year,
                    game.description,
                    game.is_completed,
                    game.rating,
                    game.id,
                ),
            )
        return cursor.rowcount > 0

    async def delete_game(self, game_id: int) -> bool:
        """Delete a game. Returns False when no row has that id."""
        if not fits_integer_column(game_id):
            return False
        async with self._lock:
            cursor = self._write("DELETE FROM games WHERE id = ?", (game_id,))
        return cursor.rowcount > 0

    def _write(self, sql: str, params: tuple) -> sqlite3.Cursor:
        conn = self._db.connection
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        return cursor
