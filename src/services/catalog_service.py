"""Orchestration of communication from API router to the persistence layer (and the reverse direction)."""

import logging
import math
from contextlib import AbstractContextManager
from threading import RLock
from uuid import UUID, uuid4

from src.api.models import MAX_PAGE_SIZE, MAX_PRICE, GameRequest, GameResponse
from src.core.exceptions import (
    DuplicateGameError,
    GameNotFoundError,
    InvalidRequestError,
)
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """Business rules of the game catalog.

    Every check-then-act sequence (duplicate check + insert, lookup + update/delete) runs while holding `lock`.
    Pass the same lock to every service instance that shares a repository.
    """

    def __init__(self, repository: GameRepository, lock: AbstractContextManager | None = None) -> None:
        self.repo = repository
        self.lock = lock if lock is not None else RLock()

    # -- API routes logic ---
    def list_games(self, page: int, page_size: int) -> list[GameResponse]:
        """One page of the catalog. An empty list is a valid answer."""
        if page < 1:
            raise InvalidRequestError(f"{page=} must be at least 1.")
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise InvalidRequestError(
                f"{page_size=} must be between 1 and {MAX_PAGE_SIZE}."
            )
        with self.lock:
            games = self.repo.list_games(page, page_size)
        return [self._create_game_response(game) for game in games]

    def get_game(self, game_id: UUID) -> GameResponse | None:
        with self.lock:
            game = self.repo.get_game(game_id)
        if game is None:
            return None
        return self._create_game_response(game)

    def add_game(self, request: GameRequest) -> GameResponse:
        """Register a new game, unless the publisher already has a game with that title."""
        with self.lock:
            if self.repo.find_games(request.title, request.publisher):
                logger.warning(
                    "Rejected duplicate game %r by %r", request.title, request.publisher
                )
                raise DuplicateGameError(
                    f"{request.publisher!r} already has a game titled {request.title!r}."
                )
            stored = self.repo.create_game(
                GameModel(
                    id=uuid4(),
                    title=request.title,
                    publisher=request.publisher,
                    price=request.price,
                )
            )
        logger.info("Added game %s (%r by %r)", stored.id, stored.title, stored.publisher)
        return self._create_game_response(stored)

    def update_game(self, game_id: UUID, request: GameRequest) -> GameResponse:
        """Replace title, publisher and price of an existing game."""
        with self.lock:
            game = self._fetch_game(game_id)
            clashes = [
                other
                for other in self.repo.find_games(request.title, request.publisher)
                if other.id != game_id
            ]
            if clashes:
                logger.warning(
                    "Rejected update of %s: %r by %r already exists",
                    game_id,
                    request.title,
                    request.publisher,
                )
                raise DuplicateGameError(
                    f"{request.publisher!r} already has a game titled {request.title!r}."
                )
            game.title = request.title
            game.publisher = request.publisher
            game.price = request.price
            self.repo.update_game(game)
        logger.info("Updated game %s", game_id)
        return self._create_game_response(game)

    def update_price(self, game_id: UUID, price: float) -> GameResponse:
        """Change only the price of an existing game."""
        if not math.isfinite(price) or not 0 <= price <= MAX_PRICE:
            raise InvalidRequestError(f"{price=} must be a number between 0 and {MAX_PRICE}.")
        with self.lock:
            game = self._fetch_game(game_id)
            game.price = price
            self.repo.update_game(game)
        logger.info("Updated price of game %s to %s", game_id, price)
        return self._create_game_response(game)

    def remove_game(self, game_id: UUID) -> None:
        with self.lock:
            self._fetch_game(game_id)
            self.repo.delete_game(game_id)
        logger.info("Removed game %s", game_id)

    # -- Internal helpers --
    def _create_game_response(self, model: GameModel) -> GameResponse:
        return GameResponse(
            id=model.id,
            title=model.title,
            publisher=model.publisher,
            price=model.price,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            logger.warning("Game %s not found", game_id)
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
