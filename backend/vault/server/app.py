from __future__ import annotations

import contextlib
from http import HTTPStatus
from typing import TYPE_CHECKING

import structlog
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from shared.build_info import APP_VERSION, GIT_COMMIT
from shared.db import SAMPLE_GAMES, Database, SqliteGameRepository
from shared.logging import setup_logging
from vault.games.service import GameService, GameServiceError
from vault.server.middleware import SecurityHeadersMiddleware, SlashNormalizationMiddleware
from vault.server.settings import VaultServerSettings
from vault.views.game_handlers import create_game, delete_game, get_game, list_games, update_game

logger = structlog.get_logger()

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.requests import Request

    from shared.dal.game_repository import GameRepository


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "version": APP_VERSION, "commit": GIT_COMMIT})


async def _service_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Report catalog failures as server errors; the service has already logged them."""
    return JSONResponse({"message": str(exc)}, status_code=HTTPStatus.INTERNAL_SERVER_ERROR)


def create_app(
    settings: VaultServerSettings | None = None,
    game_repository: GameRepository | None = None,
) -> Starlette:
    if settings is None:  # pragma: no cover
        settings = VaultServerSettings()  # ty: ignore[missing-argument]

    # When the app opens its own database, it owns the connection lifecycle.
    owned_db: Database | None = None

    if game_repository is None:
        db = Database(settings.database_path)
        db.connect()
        if settings.seed_sample_games:
            db.seed_games(SAMPLE_GAMES)
        owned_db = db
        game_repository = SqliteGameRepository(db)

    routes = [
        Route("/health", health, methods=["GET"], name="health"),
        Route("/games", list_games, methods=["GET"], name="list_games"),
        Route("/games", create_game, methods=["POST"], name="create_game"),
        Route("/games/{game_id:int}", get_game, methods=["GET"], name="get_game"),
        Route("/games/{game_id:int}", update_game, methods=["PUT"], name="update_game"),
        Route("/games/{game_id:int}", delete_game, methods=["DELETE"], name="delete_game"),
    ]

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncGenerator[None]:
        yield
        if owned_db is not None:
            owned_db.close()

    app = Starlette(
        routes=routes,
        lifespan=lifespan,
        exception_handlers={GameServiceError: _service_error_handler},
    )
    app.add_middleware(SlashNormalizationMiddleware)  # type: ignore[arg-type]
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
        expose_headers=["Location"],
    )
    app.add_middleware(SecurityHeadersMiddleware)  # type: ignore[arg-type]

    app.state.settings = settings
    app.state.game_service = GameService(game_repository)

    logger.info("catalog server ready")
    return app


def get_app() -> Starlette:  # pragma: no cover  # deadcode: ignore
    """ASGI application factory for production use (uvicorn --factory vault.server.app:get_app)."""
    settings = VaultServerSettings()  # ty: ignore[missing-argument]
    setup_logging(log_dir=settings.log_dir)
    return create_app(settings=settings)
