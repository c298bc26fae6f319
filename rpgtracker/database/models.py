"""
rpgtracker.database.models — SQLAlchemy 2.0 Data Models
========================================================

Tables:
- users  — Player profiles with level, XP within the level, and pet flag
- tasks  — Activities a user logged; completed ones feed the dungeon gate
- pets   — At most one companion per user, unlocked at level 5
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    TypeDecorator,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(UTC)


class UtcDateTime(TypeDecorator):
    """Timezone-aware timestamp stored and returned in UTC.

    SQLite keeps the wall-clock part of an aware datetime and drops the
    offset, so values are converted to UTC before binding.  Naive input is
    taken to be UTC already; naive output gets ``tzinfo=UTC`` attached.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """Shared base for all ORM models."""


# ---------------------------------------------------------------------------
# Users — one row per player
# ---------------------------------------------------------------------------
class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    has_pet: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        UtcDateTime, server_default=func.now()
    )

    # Relationships
    tasks: Mapped[list[Task]] = relationship(
        back_populates="user", cascade="all, delete-orphan", order_by="Task.id"
    )
    pet: Mapped[Pet | None] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint("level >= 1", name="ck_users_level_positive"),
        CheckConstraint("experience >= 0", name="ck_users_experience_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name!r} lvl={self.level} xp={self.experience}>"


# ---------------------------------------------------------------------------
# Tasks — user activities
# ---------------------------------------------------------------------------
class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        UtcDateTime, nullable=False, default=_utcnow
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    user: Mapped[User] = relationship(back_populates="tasks")

    __table_args__ = (
        Index("ix_tasks_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} user={self.user_id} done={self.completed}>"


# ---------------------------------------------------------------------------
# Pets — one companion per user
# ---------------------------------------------------------------------------
class Pet(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )

    user: Mapped[User] = relationship(back_populates="pet")

    def __repr__(self) -> str:
        return f"<Pet id={self.id} name={self.name!r} user={self.user_id}>"
