"""FastAPI dependencies resolving the objects create_app() stored on app.state."""

from typing import Generator

from fastapi import Request

from src.core.config import Settings
from src.db.sql_repository import SQLGameRepository
from src.services.catalog_service import CatalogService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog_service(request: Request) -> Generator[CatalogService, None, None]:
    """Service for the current request.

    With the SQL backend each request gets its own session; the lock is shared by all of them.
    """
    state = request.app.state
    if state.session_factory is None:
        yield state.catalog_service
        return

    db = state.session_factory()
    try:
        yield CatalogService(SQLGameRepository(db), state.catalog_lock)
    finally:
        db.close()
