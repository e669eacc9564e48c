"""
Routes of the /games resource.

Handlers only translate HTTP to service calls. Domain exceptions raised by the service are turned into
status codes by the handlers registered in src/main.py.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.dependencies import get_catalog_service, get_settings
from src.api.models import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, GameRequest, GameResponse
from src.core.config import Settings
from src.services.catalog_service import CatalogService

router = APIRouter(prefix="/games", tags=["games"])


@router.get("", response_model=list[GameResponse])
def list_games(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[GameResponse] | Response:
    """Page through the catalog. 204 when the page holds no games."""
    games = service.list_games(page, page_size)
    if not games:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return games


@router.get("/{game_id}", response_model=GameResponse)
def get_game(
    game_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
    settings: Settings = Depends(get_settings),
) -> GameResponse | Response:
    game = service.get_game(game_id)
    if game is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    if settings.legacy_empty_get:
        return Response(status_code=status.HTTP_200_OK)
    return game


@router.post("", response_model=GameResponse)
def add_game(
    request: GameRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> GameResponse:
    return service.add_game(request)


@router.put("/{game_id}")
def update_game(
    game_id: UUID,
    request: GameRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    service.update_game(game_id, request)
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/{game_id}/price/{price}")
@router.patch("/{game_id}/preco/{price}", include_in_schema=False)
def update_price(
    game_id: UUID,
    price: float,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    service.update_price(game_id, price)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{game_id}")
def remove_game(
    game_id: UUID,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    service.remove_game(game_id)
    return Response(status_code=status.HTTP_200_OK)
