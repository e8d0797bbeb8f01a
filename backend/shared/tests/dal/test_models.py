"""Tests for DAL persistence models."""

import pytest
from pydantic import ValidationError

from shared.dal.models import GameRecord, NewGameRecord, fits_integer_column


class TestNewGameRecord:
    def test_defaults(self):
        game = NewGameRecord(title="Hades")

        assert game.platform == ""
        assert game.genre is None
        assert game.is_completed is False
        assert game.rating is None

    def test_is_frozen(self):
        game = NewGameRecord(title="Hades")
        with pytest.raises(ValidationError):
            game.title = "Celeste"  # type: ignore[misc]


class TestGameRecord:
    def test_requires_id(self):
        with pytest.raises(ValidationError, match="id"):
            GameRecord(title="Hades")  # type: ignore[call-arg]

    def test_carries_new_record_fields(self):
        game = GameRecord(id=3, title="Hades", platform="PC", rating=5)

        assert isinstance(game, NewGameRecord)
        assert game.model_dump() == {
            "title": "Hades",
            "platform": "PC",
            "genre": None,
            "release_year": None,
            "description": None,
            "is_completed": False,
            "rating": 5,
            "id": 3,
        }


class TestFitsIntegerColumn:
    @pytest.mark.parametrize("value", [0, 2**63 - 1, -(2**63)])
    def test_signed_64_bit_values_fit(self, value):
        assert fits_integer_column(value) is True

    @pytest.mark.parametrize("value", [2**63, -(2**63) - 1, 10**20])
    def test_wider_values_do_not_fit(self, value):
        assert fits_integer_column(value) is False
