"""
rpgtracker.engine.dungeon — Daily dungeon access gate
======================================================

The dungeon opens for a user who completed enough tasks *today*, where
"today" is a calendar day in UTC, not a rolling 24-hour window.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime

from rpgtracker.constants import DUNGEON_MIN_COMPLETED
from rpgtracker.database.models import Task

logger = logging.getLogger(__name__)

GRANTED_MESSAGE = "Dungeon unlocked! Prepare for the adventure."


@dataclass(frozen=True)
class DungeonAccess:
    """Outcome of a dungeon gate check."""

    granted: bool
    completed_today: int
    required: int
    message: str


def utc_day(timestamp: datetime) -> date:
    """Calendar date of *timestamp* in UTC.

    Naive timestamps are taken to be UTC already.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(UTC)
    return timestamp.date()


def count_completed_on(tasks: Iterable[Task], day: date) -> int:
    """Number of completed tasks created on *day* (UTC)."""
    return sum(
        1 for task in tasks
        if task.completed and utc_day(task.created_at) == day
    )


def check_dungeon_access(
    tasks: Iterable[Task],
    today: date | None = None,
    min_completed: int = DUNGEON_MIN_COMPLETED,
) -> DungeonAccess:
    """Decide whether the owner of *tasks* may enter the dungeon on *today*."""
    if today is None:
        today = datetime.now(UTC).date()

    done = count_completed_on(tasks, today)
    if done >= min_completed:
        return DungeonAccess(True, done, min_completed, GRANTED_MESSAGE)

    logger.debug("Dungeon denied: %d/%d completed on %s", done, min_completed, today)
    return DungeonAccess(
        False,
        done,
        min_completed,
        f"Complete at least {min_completed} tasks today to enter the dungeon "
        f"({done} so far).",
    )
