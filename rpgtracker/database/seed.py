"""
rpgtracker.database.seed — Demo Data Seeder
============================================

Users and tasks are normally created outside this service.  For local runs
``seed_demo_user: true`` in ``config.yaml`` inserts one demo player with a
handful of tasks so every endpoint has something to answer with.

Idempotent — does nothing if the demo user already exists.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import Engine, select

from rpgtracker.database.engine import get_session
from rpgtracker.database.models import Task, User

logger = logging.getLogger(__name__)

DEMO_USER_NAME = "Demo Adventurer"

DEMO_TASKS: list[tuple[str, bool]] = [
    ("Morning run", True),
    ("Morning run", True),
    ("Morning run", True),
    ("Read 20 pages", True),
    ("Read 20 pages", False),
    ("Answer email", True),
]
"""Each entry is ``(description, completed)``; all are stamped with *now*."""


def seed_demo_user(engine: Engine) -> int:
    """Insert the demo user and its tasks if missing.  Returns the user id."""
    with get_session(engine) as session:
        existing = session.scalar(select(User).where(User.name == DEMO_USER_NAME))
        if existing is not None:
            return existing.id

        now = datetime.now(UTC)
        user = User(name=DEMO_USER_NAME, level=1, experience=0, has_pet=False)
        user.tasks = [
            Task(description=desc, completed=done, created_at=now)
            for desc, done in DEMO_TASKS
        ]
        session.add(user)
        session.flush()
        user_id = user.id

    logger.info("Seeded demo user %d with %d tasks.", user_id, len(DEMO_TASKS))
    return user_id
