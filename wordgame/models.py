"""
SQLAlchemy ORM models for persisted games.

Tables:
- games: one row per game (target, candidate list as JSON, try budget, derived status)
- guesses: one row per accepted guess, in the order they were accepted

A session is rebuilt by replaying the stored words against the target.
The scored cells are kept alongside each word for anything reading the
table directly; the API itself always rescores through the session.
A word can appear at most once per game.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base
from .types import GameStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Game(Base):
    __tablename__ = "games"

    # UUIDs generated in code; stored as strings
    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    target: Mapped[str] = mapped_column(String(255), nullable=False)
    candidates: Mapped[list[str]] = mapped_column(JSON, nullable=False)

    # Try budget; ending a game early sets it to 0
    max_tries: Mapped[int] = mapped_column(Integer, nullable=False, default=6)

    # Derived from the session after every change, kept for querying
    status: Mapped[GameStatus] = mapped_column(
        Enum("in_progress", "won", "lost", name="game_status"),
        nullable=False,
        default="in_progress",
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    guesses: Mapped[list["Guess"]] = relationship(
        back_populates="game",
        cascade="all, delete-orphan",
        order_by="Guess.id.asc()",
    )


class Guess(Base):
    __tablename__ = "guesses"
    __table_args__ = (UniqueConstraint("game_id", "word", name="uq_guesses_game_word"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    game_id: Mapped[str] = mapped_column(String(36), ForeignKey("games.id", ondelete="CASCADE"), index=True)
    game: Mapped[Game] = relationship(back_populates="guesses")

    word: Mapped[str] = mapped_column(String(255), nullable=False)

    # Engine output: [{"mark": "correct", "value": "h"}, ...]
    cells: Mapped[list[dict]] = mapped_column(JSON, nullable=False)

    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
