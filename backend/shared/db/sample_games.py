"""Starter catalog seeded into an empty database on request."""

from shared.dal.models import GameRecord

SAMPLE_GAMES: tuple[GameRecord, ...] = (
    GameRecord(
        id=100,
        title="The Legend of Zelda: Breath of the Wild",
        platform="Nintendo Switch",
        genre="Action-Adventure",
        release_year=2017,
        description="An open-world action-adventure game set in the kingdom of Hyrule.",
    ),
    GameRecord(
        id=101,
        title="Red Dead Redemption 2",
        platform="PlayStation 5",
        genre="Action-Adventure",
        release_year=2018,
        description="An epic tale of life in America's unforgiving heartland.",
    ),
    GameRecord(
        id=102,
        title="Hades",
        platform="PC",
        genre="Roguelike",
        release_year=2020,
        description="A rogue-like dungeon crawler where you defy the god of the dead.",
    ),
    GameRecord(
        id=103,
        title="Elden Ring",
        platform="PC",
        genre="Action RPG",
        release_year=2022,
        description="A fantasy action RPG developed by FromSoftware and George R.R. Martin.",
    ),
    GameRecord(
        id=104,
        title="Celeste",
        platform="Nintendo Switch",
        genre="Platformer",
        release_year=2018,
        description="A challenging platformer about climbing a mountain and overcoming personal struggles.",
    ),
)
