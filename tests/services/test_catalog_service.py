"""Unit tests for src/services/catalog_service.py"""

from concurrent.futures import ThreadPoolExecutor
from typing import Generator
from uuid import UUID, uuid4

import pytest

from src.core.exceptions import (
    CatalogError,
    DuplicateGameError,
    GameNotFoundError,
    InvalidRequestError,
)
from src.core.models import GameModel
from src.services.catalog_service import CatalogService, GameRequest, GameResponse


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the GameRepository using a dictionary of game models."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def list_games(self, page: int, page_size: int) -> list[GameModel]:
        offset = (page - 1) * page_size
        return list(self._games.values())[offset : offset + page_size]

    def get_game(self, game_id: UUID) -> GameModel | None:
        game = self._games.get(game_id)
        if game is None:
            return None
        return GameModel(game.id, game.title, game.publisher, game.price)

    def find_games(self, title: str, publisher: str) -> list[GameModel]:
        return [
            game
            for game in self._games.values()
            if game.title == title and game.publisher == publisher
        ]

    def create_game(self, game: GameModel) -> GameModel:
        self._games[game.id] = game
        return game

    def update_game(self, game: GameModel) -> GameModel | None:
        if game.id not in self._games:
            return None
        self._games[game.id] = game
        return game

    def delete_game(self, game_id: UUID) -> GameModel | None:
        return self._games.pop(game_id, None)

    def count_games(self) -> int:
        return len(self._games)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._games.clear()


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository) -> CatalogService:
    return CatalogService(mock_repository)


def chrono_trigger(publisher: str = "Square", price: float = 59.99) -> GameRequest:
    return GameRequest(title="Chrono Trigger", publisher=publisher, price=price)


# --- SERVICE - ADD GAME ----
def test_add_game(service: CatalogService, mock_repository: MockRepository) -> None:
    """New game gets an ID, is persisted, and the response mirrors the request."""
    response = service.add_game(chrono_trigger())

    assert isinstance(response, GameResponse)
    assert isinstance(response.id, UUID)
    assert response.title == "Chrono Trigger"
    assert response.publisher == "Square"
    assert response.price == 59.99

    stored = mock_repository.get_game(response.id)
    assert stored == GameModel(response.id, "Chrono Trigger", "Square", 59.99)


def test_add_duplicate_game(service: CatalogService, mock_repository: MockRepository) -> None:
    """Same title + publisher is rejected and the store is left untouched."""
    first = service.add_game(chrono_trigger())

    with pytest.raises(DuplicateGameError):
        service.add_game(chrono_trigger(price=10.0))

    assert mock_repository.count_games() == 1
    assert mock_repository.get_game(first.id).price == 59.99


def test_same_title_other_publisher(service: CatalogService, mock_repository: MockRepository) -> None:
    first = service.add_game(chrono_trigger())
    second = service.add_game(chrono_trigger(publisher="Square Enix"))
    assert first.id != second.id
    assert mock_repository.count_games() == 2


def test_concurrent_duplicate_inserts(service: CatalogService, mock_repository: MockRepository) -> None:
    """Only one of many simultaneous identical inserts wins."""

    def attempt(_: int) -> bool:
        try:
            service.add_game(chrono_trigger())
        except DuplicateGameError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(50)))

    assert results.count(True) == 1
    assert mock_repository.count_games() == 1


# --- SERVICE - LIST / GET ----
def test_list_games(service: CatalogService) -> None:
    created = [
        service.add_game(GameRequest(title=f"Final Fantasy {i}", publisher="Square", price=i))
        for i in range(1, 8)
    ]

    assert service.list_games(page=1, page_size=5) == created[:5]
    assert service.list_games(page=2, page_size=5) == created[5:]
    assert service.list_games(page=3, page_size=5) == []


def test_list_empty_catalog(service: CatalogService) -> None:
    assert service.list_games(page=1, page_size=5) == []


@pytest.mark.parametrize(("page", "page_size"), [(0, 5), (-1, 5), (1, 0), (1, 51)])
def test_list_invalid_paging(service: CatalogService, page: int, page_size: int) -> None:
    with pytest.raises(InvalidRequestError):
        service.list_games(page=page, page_size=page_size)


def test_get_game(service: CatalogService) -> None:
    created = service.add_game(chrono_trigger())
    assert service.get_game(created.id) == created


def test_get_unknown_game(service: CatalogService) -> None:
    """Absent is not an error."""
    assert service.get_game(uuid4()) is None


# --- SERVICE - UPDATE ----
def test_update_game(service: CatalogService, mock_repository: MockRepository) -> None:
    created = service.add_game(chrono_trigger())
    request = GameRequest(title="Chrono Trigger DS", publisher="Square Enix", price=29.99)

    response = service.update_game(created.id, request)

    assert response.id == created.id
    assert mock_repository.get_game(created.id) == GameModel(
        created.id, "Chrono Trigger DS", "Square Enix", 29.99
    )


def test_update_game_keeping_title_and_publisher(service: CatalogService) -> None:
    """Re-submitting a game's own title/publisher (e.g. only the price changed) is not a duplicate."""
    created = service.add_game(chrono_trigger())
    response = service.update_game(created.id, chrono_trigger(price=19.99))
    assert response.price == 19.99


def test_update_game_onto_existing_pair(service: CatalogService, mock_repository: MockRepository) -> None:
    service.add_game(chrono_trigger())
    other = service.add_game(chrono_trigger(publisher="Square Enix"))

    with pytest.raises(DuplicateGameError):
        service.update_game(other.id, chrono_trigger())

    assert mock_repository.get_game(other.id).publisher == "Square Enix"


def test_update_unknown_game(service: CatalogService, mock_repository: MockRepository) -> None:
    service.add_game(chrono_trigger())
    with pytest.raises(GameNotFoundError):
        service.update_game(uuid4(), chrono_trigger(price=1.0))
    assert [game.price for game in mock_repository.list_games(1, 50)] == [59.99]


def test_update_price(service: CatalogService, mock_repository: MockRepository) -> None:
    created = service.add_game(chrono_trigger())
    response = service.update_price(created.id, 39.99)
    assert response.price == 39.99
    assert mock_repository.get_game(created.id) == GameModel(created.id, "Chrono Trigger", "Square", 39.99)


def test_update_price_unknown_game(service: CatalogService) -> None:
    with pytest.raises(GameNotFoundError):
        service.update_price(uuid4(), 39.99)


@pytest.mark.parametrize("price", [-1.0, 1000.01, float("nan"), float("inf"), float("-inf")])
def test_update_price_out_of_range(service: CatalogService, price: float) -> None:
    """Only finite prices within the same bounds as a full update are stored."""
    created = service.add_game(chrono_trigger())
    with pytest.raises(InvalidRequestError):
        service.update_price(created.id, price)
    assert service.get_game(created.id).price == 59.99


# --- SERVICE - REMOVE ----
def test_remove_game(service: CatalogService, mock_repository: MockRepository) -> None:
    created = service.add_game(chrono_trigger())
    service.remove_game(created.id)
    assert mock_repository.count_games() == 0


def test_remove_unknown_game(service: CatalogService, mock_repository: MockRepository) -> None:
    service.add_game(chrono_trigger())
    # Any domain error derives from CatalogError
    with pytest.raises(CatalogError):
        service.remove_game(uuid4())
    assert mock_repository.count_games() == 1


# --- FULL SCENARIO ----
def test_catalog_lifecycle(service: CatalogService) -> None:
    """Insert, reject the duplicate, reprice, delete."""
    created = service.add_game(chrono_trigger())
    assert created.id is not None

    with pytest.raises(DuplicateGameError):
        service.add_game(chrono_trigger())

    service.update_price(created.id, 39.99)
    assert service.get_game(created.id).price == 39.99

    service.remove_game(created.id)
    assert service.get_game(created.id) is None
