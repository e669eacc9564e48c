"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import FlushError

from src.core.exceptions import ConflictError
from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def list_games(self, page: int, page_size: int) -> list[GameModel]:
        """Get one page of games, in insertion order. Pages past the end are empty."""
        query = (
            select(DBGame)
            .order_by(DBGame.created_at, DBGame.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        return [self._to_model(game_db) for game_db in self.db.scalars(query)]

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def find_games(self, title: str, publisher: str) -> list[GameModel]:
        """All games matching both title and publisher exactly."""
        query = select(DBGame).where(
            DBGame.title == title, DBGame.publisher == publisher
        )
        return [self._to_model(game_db) for game_db in self.db.scalars(query)]

    def create_game(self, game: GameModel) -> GameModel:
        """Store new game under its ID. Raises ConflictError if the ID (or title/publisher pair) is taken."""
        game_db = DBGame(
            id=game.id,
            title=game.title,
            publisher=game.publisher,
            price=game.price,
        )
        self.db.add(game_db)
        try:
            self.db.commit()
        except (IntegrityError, FlushError) as exc:
            self.db.rollback()
            raise ConflictError(f"Game with {game.id=} could not be stored.") from exc
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def update_game(self, game: GameModel) -> GameModel | None:
        """Replace the record stored under game.id."""
        game_db = self._fetch_game(game.id)
        if not game_db:
            return None
        game_db.title = game.title
        game_db.publisher = game.publisher
        game_db.price = game.price
        try:
            self.db.commit()
        except (IntegrityError, FlushError) as exc:
            self.db.rollback()
            raise ConflictError(f"Game with {game.id=} could not be updated.") from exc
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def count_games(self) -> int:
        return self.db.scalar(select(func.count()).select_from(DBGame)) or 0

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            id=game_db.id,
            title=game_db.title,
            publisher=game_db.publisher,
            price=game_db.price,
        )
