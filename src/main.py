"""
Entrypoint of the Game Catalog API.

``create_app`` wires settings, logging, the repository backend and the router together.
Serve it with ``uvicorn src.main:app`` or the ``game-catalog`` script.
"""

import logging
from threading import RLock

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.router import router as games_router
from src.core.config import Settings, settings
from src.core.exceptions import (
    DuplicateGameError,
    GameNotFoundError,
    InvalidRequestError,
)
from src.core.logging_config import setup_logging
from src.db.database import build_session_factory
from src.db.memory_repository import InMemoryGameRepository
from src.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

DUPLICATE_GAME_MESSAGE = "A game with this title already exists for this publisher"
GAME_NOT_FOUND_MESSAGE = "Game not found"


def create_app(
    app_settings: Settings | None = None, service: CatalogService | None = None
) -> FastAPI:
    """Build a configured FastAPI application.

    Passing a ``service`` bypasses the configured backend (handy for tests).
    """
    app_settings = app_settings or settings
    if app_settings.backend not in {"memory", "sql"}:
        raise ValueError(f"Unknown CATALOG_BACKEND {app_settings.backend!r}, expected 'memory' or 'sql'.")
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.catalog_lock = service.lock if service else RLock()
    app.state.session_factory = None
    app.state.catalog_service = service

    if service is None and app_settings.backend == "sql":
        app.state.session_factory = build_session_factory(
            app_settings.database_url, echo=app_settings.database_echo
        )
        logger.info("Using SQL catalog at %s", app_settings.database_url)
    elif service is None:
        repository = InMemoryGameRepository(seed=app_settings.seed_catalog)
        app.state.catalog_service = CatalogService(repository, app.state.catalog_lock)
        logger.info("Using in-memory catalog with %d games", repository.count_games())

    app.include_router(games_router, prefix=app_settings.api_prefix)
    _register_exception_handlers(app)
    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into status codes + plain text messages."""

    @app.exception_handler(DuplicateGameError)
    async def duplicate_game(request: Request, exc: DuplicateGameError) -> PlainTextResponse:
        return PlainTextResponse(DUPLICATE_GAME_MESSAGE, status_code=422)

    @app.exception_handler(GameNotFoundError)
    async def game_not_found(request: Request, exc: GameNotFoundError) -> PlainTextResponse:
        return PlainTextResponse(GAME_NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(InvalidRequestError)
    async def invalid_request(request: Request, exc: InvalidRequestError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    # Validation errors are client errors (400)
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            {"detail": jsonable_encoder(exc.errors())},
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


app = create_app()
