from shared.dal.models import GameRecord, NewGameRecord
from vault.games.mapping import apply_update, to_dto, to_new_record
from vault.games.types import CreateGameRequest, GameDto, UpdateGameRequest


def _record() -> GameRecord:
    return GameRecord(
        id=7,
        title="Celeste",
        platform="Nintendo Switch",
        genre="Platformer",
        release_year=2018,
        description="Climb the mountain.",
        is_completed=True,
        rating=5,
    )


class TestToDto:
    def test_copies_every_field(self):
        record = _record()
        dto = to_dto(record)

        assert isinstance(dto, GameDto)
        assert dto.model_dump() == record.model_dump()


class TestToNewRecord:
    def test_copies_every_request_field(self):
        request = CreateGameRequest(
            title="Hades",
            platform="PC",
            genre="Roguelike",
            release_year=2020,
            description="Escape.",
            is_completed=True,
            rating=4,
        )

        record = to_new_record(request)

        assert record == NewGameRecord(**request.model_dump())
        assert not hasattr(record, "id")


class TestApplyUpdate:
    def test_keeps_id_and_takes_everything_else_from_request(self):
        request = UpdateGameRequest(title="Celeste 64", platform="PC")

        updated = apply_update(_record(), request)

        assert updated == GameRecord(id=7, title="Celeste 64", platform="PC")

    def test_does_not_mutate_existing(self):
        existing = _record()
        apply_update(existing, UpdateGameRequest(title="Other", platform="PC"))

        assert existing == _record()
