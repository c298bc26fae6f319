"""
tests/conftest.py — Shared Test Fixtures
=========================================
"""

from __future__ import annotations

import os

# Point any stray engine creation at an in-memory database instead of
# writing rpgsite.db into the working tree.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import Engine, create_engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from rpgtracker.config import RpgConfig  # noqa: E402
from rpgtracker.database.models import Base, Task, User  # noqa: E402


@pytest.fixture
def db_engine() -> Engine:
    """Create an in-memory SQLite engine with all tables.

    Uses StaticPool so FastAPI's worker threads share the same in-memory
    database as the test body.
    """
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine: Engine):
    """Provide a session that rolls back after each test."""
    with Session(db_engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def make_user(db_engine: Engine):
    """Factory: insert a committed User and return its id."""

    def _make(
        name: str = "Alice",
        level: int = 1,
        experience: int = 0,
        has_pet: bool = False,
    ) -> int:
        with Session(db_engine) as session:
            user = User(name=name, level=level, experience=experience, has_pet=has_pet)
            session.add(user)
            session.commit()
            return user.id

    return _make


@pytest.fixture
def make_task(db_engine: Engine):
    """Factory: insert a committed Task for a user and return its id."""

    def _make(
        user_id: int,
        description: str = "Workout",
        completed: bool = False,
        created_at: datetime | None = None,
    ) -> int:
        with Session(db_engine) as session:
            task = Task(
                user_id=user_id,
                description=description,
                completed=completed,
                created_at=created_at or datetime.now(UTC),
            )
            session.add(task)
            session.commit()
            return task.id

    return _make


@pytest.fixture
def client(db_engine: Engine):
    """FastAPI TestClient bound to the in-memory database and default config."""
    from fastapi.testclient import TestClient

    from rpgtracker.api.deps import get_config, get_engine
    from rpgtracker.api.main import app

    app.dependency_overrides[get_engine] = lambda: db_engine
    app.dependency_overrides[get_config] = lambda: RpgConfig()
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
