"""Protocol repository (implemented in memory and with SQLAlchemy)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def list_games(self, page: int, page_size: int) -> list[GameModel]:
        """Get one page of games, in insertion order. Pages past the end are empty."""
        ...

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def find_games(self, title: str, publisher: str) -> list[GameModel]:
        """All games matching both title and publisher exactly."""
        ...

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game under its ID. Raises ConflictError if the ID is taken."""
        ...

    def update_game(self, game: GameModel) -> GameModel | None:
        """Replace the record stored under game.id."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...

    def count_games(self) -> int:
        """Number of stored games."""
        ...
