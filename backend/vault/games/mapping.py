"""Pure conversions between stored game records and the catalog's request/response types."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.dal.models import GameRecord, NewGameRecord
from vault.games.types import GameDto

if TYPE_CHECKING:
    from vault.games.types import CreateGameRequest, UpdateGameRequest


def to_dto(record: GameRecord) -> GameDto:
    return GameDto(
        id=record.id,
        title=record.title,
        platform=record.platform,
        genre=record.genre,
        release_year=record.release_year,
        description=record.description,
        is_completed=record.is_completed,
        rating=record.rating,
    )


def to_new_record(request: CreateGameRequest) -> NewGameRecord:
    """Copy a create request into an insertable record; the id is left to the store."""
    return NewGameRecord(
        title=request.title,
        platform=request.platform,
        genre=request.genre,
        release_year=request.release_year,
        description=request.description,
        is_completed=request.is_completed,
        rating=request.rating,
    )


def apply_update(existing: GameRecord, request: UpdateGameRequest) -> GameRecord:
    """Build the replacement for existing: its id, and every other field from the request."""
    return GameRecord(
        id=existing.id,
        title=request.title,
        platform=request.platform,
        genre=request.genre,
        release_year=request.release_year,
        description=request.description,
        is_completed=request.is_completed,
        rating=request.rating,
    )
