"""Implementation of (Game)Repository keeping everything in a dictionary for the lifetime of the process."""

from dataclasses import replace
from threading import Lock
from uuid import UUID

from src.core.exceptions import ConflictError
from src.core.models import GameModel

# Catalog the API originally shipped with.
SEED_GAMES = [
    GameModel(UUID("0ca314a5-9282-45d8-92c3-2985f2a9fd04"), "PES 2021", "Konami", 200),
    GameModel(UUID("eb909ced-1862-4789-8641-1bba36c23db3"), "PES 2020", "Konami", 190),
    GameModel(UUID("5e99c84a-108b-4dfa-ab7e-d8c55957a7ec"), "PES 2019", "Konami", 180),
    GameModel(UUID("da033439-f352-4539-879f-515759312d53"), "PES 2018", "Konami", 170),
    GameModel(UUID("92576bd2-388e-4f5d-96c1-8bfda6c5a268"), "Silent Hill", "Konami", 100),
    GameModel(UUID("c3c9b5da-6a45-4de1-b28b-491cbf83b589"), "Silent Hill 2", "Konami", 150),
]


class InMemoryGameRepository:
    """Thread-safe in-memory storage for games.

    Records are copied on the way in and on the way out, so nothing outside the repository holds a reference to stored state.
    """

    def __init__(self, seed: bool = False) -> None:
        # dicts keep insertion order, which doubles as the listing order
        self._games: dict[UUID, GameModel] = {}
        self._lock = Lock()
        if seed:
            for game in SEED_GAMES:
                self.create_game(game)

    def list_games(self, page: int, page_size: int) -> list[GameModel]:
        """Get one page of games, in insertion order. Pages past the end are empty."""
        offset = (page - 1) * page_size
        with self._lock:
            games = list(self._games.values())[offset : offset + page_size]
            return [replace(game) for game in games]

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        with self._lock:
            game = self._games.get(game_id)
            return replace(game) if game else None

    def find_games(self, title: str, publisher: str) -> list[GameModel]:
        """All games matching both title and publisher exactly."""
        with self._lock:
            return [
                replace(game)
                for game in self._games.values()
                if game.title == title and game.publisher == publisher
            ]

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game under its ID. Raises ConflictError if the ID is taken."""
        with self._lock:
            if game.id in self._games:
                raise ConflictError(f"Game with {game.id=} already stored.")
            self._games[game.id] = replace(game)
            return replace(game)

    def update_game(self, game: GameModel) -> GameModel | None:
        """Replace the record stored under game.id."""
        with self._lock:
            if game.id not in self._games:
                return None
            self._games[game.id] = replace(game)
            return replace(game)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        with self._lock:
            game = self._games.pop(game_id, None)
            return replace(game) if game else None

    def count_games(self) -> int:
        with self._lock:
            return len(self._games)

    def clear(self) -> None:
        """Drop all records (useful in between tests)"""
        with self._lock:
            self._games.clear()
