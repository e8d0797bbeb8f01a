"""Request, response, and lookup-outcome types for the game catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from shared.dal.models import INTEGER_MAX, INTEGER_MIN

MIN_RELEASE_YEAR = 1970
MAX_RELEASE_YEAR = 2100


class CreateGameRequest(BaseModel):
    """Body of POST /games. Field names are camelCase on the wire."""

    model_config = ConfigDict(extra="forbid", strict=True, alias_generator=to_camel, populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    platform: str = Field(min_length=1, max_length=100)
    genre: str | None = Field(default=None, max_length=100)
    release_year: int | None = Field(default=None, ge=MIN_RELEASE_YEAR, le=MAX_RELEASE_YEAR)
    description: str | None = Field(default=None, max_length=1000)
    is_completed: bool = False
    # 1-5 stars by convention; only the storage range is checked
    rating: int | None = Field(default=None, ge=INTEGER_MIN, le=INTEGER_MAX)

    @field_validator("title", "platform")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class UpdateGameRequest(CreateGameRequest):
    """Body of PUT /games/{id}: the complete new state of the game.

    Omitted optional fields reset to their defaults; nothing is merged from
    the stored record.
    """


class GameDto(BaseModel):
    """External representation of a stored game."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    platform: str
    genre: str | None = None
    release_year: int | None = None
    description: str | None = None
    is_completed: bool = False
    rating: int | None = None

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class Found[T]:
    value: T


class NotFound:
    """Outcome of a lookup for an id that is not in the catalog."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = NotFound()

type Lookup[T] = Found[T] | NotFound
