"""SQLite database layer: connection management and repository implementations."""

from shared.db.connection import Database
from shared.db.game_repository import SqliteGameRepository
from shared.db.sample_games import SAMPLE_GAMES

__all__ = [
    "SAMPLE_GAMES",
    "Database",
    "SqliteGameRepository",
]
