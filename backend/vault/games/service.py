"""Game catalog service: CRUD over the repository with storage errors translated to domain errors."""

from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING

import structlog

from vault.games.mapping import apply_update, to_dto, to_new_record
from vault.games.types import NOT_FOUND, Found

if TYPE_CHECKING:
    from shared.dal.game_repository import GameRepository
    from vault.games.types import CreateGameRequest, GameDto, Lookup, UpdateGameRequest

logger = structlog.get_logger()


class GameServiceError(Exception):
    """Base class for catalog failures that callers cannot recover from by changing input."""


class ConstraintViolation(GameServiceError):
    """The store rejected a write because it breaks a data constraint."""


class ConcurrencyConflict(GameServiceError):
    """The record changed between the read and the write of an update."""


class StorageFailure(GameServiceError):
    """Any other persistence error (I/O, locking, closed connection, schema mismatch)."""


class GameService:
    """Create, read, update, and delete games.

    Lookups of a missing id return NOT_FOUND (or False for delete) instead of
    raising. Every sqlite3 error is logged here, once, and re-raised as a
    GameServiceError subclass chained to the original.
    """

    def __init__(self, repository: GameRepository) -> None:
        self._repo = repository

    async def list_all(self) -> list[GameDto]:
        logger.info("listing games")
        try:
            records = await self._repo.list_games()
        except sqlite3.Error as exc:
            logger.exception("failed to list games", operation="list_all")
            raise StorageFailure("Could not retrieve games") from exc
        return [to_dto(record) for record in records]

    async def get_by_id(self, game_id: int) -> Lookup[GameDto]:
        logger.info("getting game", game_id=game_id)
        try:
            record = await self._repo.get_game(game_id)
        except sqlite3.Error as exc:
            logger.exception("failed to get game", operation="get_by_id", game_id=game_id)
            raise StorageFailure(f"Could not retrieve game ID {game_id}") from exc
        if record is None:
            return NOT_FOUND
        return Found(to_dto(record))

    async def create(self, request: CreateGameRequest) -> GameDto:
        logger.info("creating game", title=request.title, platform=request.platform)
        try:
            record = await self._repo.insert_game(to_new_record(request))
        except sqlite3.IntegrityError as exc:
            logger.exception("database constraint rejected new game", operation="create", title=request.title)
            raise ConstraintViolation(f"Could not save game '{request.title}' due to database constraint") from exc
        except sqlite3.Error as exc:
            logger.exception("failed to create game", operation="create", title=request.title)
            raise StorageFailure(f"Could not save game '{request.title}'") from exc
        logger.info("created game", game_id=record.id)
        return to_dto(record)

    async def update(self, game_id: int, request: UpdateGameRequest) -> Lookup[GameDto]:
        """Replace every mutable field of the game with the request's values."""
        logger.info("updating game", game_id=game_id)
        try:
            existing = await self._repo.get_game(game_id)
            if existing is None:
                logger.warning("game not found for update", game_id=game_id)
                return NOT_FOUND
            replacement = apply_update(existing, request)
            written = await self._repo.replace_game(replacement)
        except sqlite3.IntegrityError as exc:
            logger.exception("database constraint rejected game update", operation="update", game_id=game_id)
            raise ConstraintViolation(f"Could not update game ID {game_id} due to database constraint") from exc
        except sqlite3.Error as exc:
            logger.exception("failed to update game", operation="update", game_id=game_id)
            raise StorageFailure(f"Could not update game ID {game_id}") from exc

        if not written:
            logger.error("game changed between read and write", operation="update", game_id=game_id)
            raise ConcurrencyConflict(
                f"Game with ID {game_id} was modified by another request. Please refresh and try again.",
            )
        logger.info("updated game", game_id=game_id, title=replacement.title)
        return Found(to_dto(replacement))

    async def delete(self, game_id: int) -> bool:
        """Delete the game. Returns False when there was nothing to delete."""
        logger.info("deleting game", game_id=game_id)
        try:
            existing = await self._repo.get_game(game_id)
            if existing is None:
                logger.warning("game not found for deletion", game_id=game_id)
                return False
            deleted = await self._repo.delete_game(game_id)
        except sqlite3.IntegrityError as exc:
            logger.exception(
                "database constraint blocked game deletion",
                operation="delete",
                game_id=game_id,
            )
            raise ConstraintViolation(
                f"Cannot delete game ID {game_id} because it is referenced by other records",
            ) from exc
        except sqlite3.Error as exc:
            logger.exception("failed to delete game", operation="delete", game_id=game_id)
            raise StorageFailure(f"Could not delete game ID {game_id}") from exc

        if not deleted:
            # Another request removed it after our read.
            logger.warning("game already deleted", game_id=game_id)
            return False
        logger.info("deleted game", game_id=game_id, title=existing.title)
        return True
