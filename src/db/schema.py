"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    __table_args__ = (UniqueConstraint("title", "publisher", name="uq_game_title_publisher"),)

    id: Mapped[UUID] = mapped_column(primary_key=True)
    title: Mapped[str]
    publisher: Mapped[str]
    price: Mapped[float]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
