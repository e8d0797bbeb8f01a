"""Persistence models for the data access layer."""

from pydantic import BaseModel

# SQLite INTEGER is a signed 64-bit value; the sqlite3 module refuses to bind anything wider.
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


def fits_integer_column(value: int) -> bool:
    return INTEGER_MIN <= value <= INTEGER_MAX


class NewGameRecord(BaseModel, frozen=True):
    """A game row that has not been inserted yet; the store assigns its id."""

    title: str
    platform: str = ""
    genre: str | None = None
    release_year: int | None = None
    description: str | None = None
    is_completed: bool = False
    rating: int | None = None  # 1-5 by convention, not enforced


class GameRecord(NewGameRecord, frozen=True):
    """A game row as stored in the catalog."""

    id: int
