"""Data access layer: repository interfaces and shared persistence models."""

from shared.dal.game_repository import GameRepository
from shared.dal.models import GameRecord, NewGameRecord

__all__ = [
    "GameRecord",
    "GameRepository",
    "NewGameRecord",
]
