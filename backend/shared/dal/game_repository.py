"""Abstract interface for game catalog persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import GameRecord, NewGameRecord


class GameRepository(ABC):
    """Abstract interface for game catalog persistence.

    Implementations let storage errors propagate unchanged; callers decide
    how to translate them.
    """

    @abstractmethod
    async def list_games(self) -> list[GameRecord]: ...

    @abstractmethod
    async def get_game(self, game_id: int) -> GameRecord | None: ...

    @abstractmethod
    async def insert_game(self, game: NewGameRecord) -> GameRecord: ...

    @abstractmethod
    async def replace_game(self, game: GameRecord) -> bool: ...

    @abstractmethod
    async def delete_game(self, game_id: int) -> bool: ...
