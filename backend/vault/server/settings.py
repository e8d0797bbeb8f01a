"""Catalog server configuration via environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings.sources.base import PydanticBaseSettingsSource

from shared.validators import StringListEnvSettingsSource, parse_string_list


class VaultServerSettings(BaseSettings):
    model_config = {"env_prefix": "VAULT_"}

    # SQLite database file -- required, no default.
    # The server refuses to start if VAULT_DATABASE_PATH is not set.
    database_path: str = Field(min_length=1)

    log_dir: str = Field(default="backend/logs/vault", min_length=1)
    cors_origins: list[str] = ["http://localhost:5173"]

    # Load the starter catalog into an empty games table at startup.
    seed_sample_games: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def validate_cors_origins(cls, v: str | list[str]) -> list[str]:
        return parse_string_list(v, allow_empty=True)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, StringListEnvSettingsSource(settings_cls), dotenv_settings, file_secret_settings)
