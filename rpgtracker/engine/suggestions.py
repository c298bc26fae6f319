"""
rpgtracker.engine.suggestions — Recurring task suggestions
===========================================================

A description the user logged at least ``min_count`` times is a habit worth
suggesting again.  Completion state and dates are ignored.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from rpgtracker.constants import SUGGESTION_MIN_COUNT
from rpgtracker.database.models import Task


def suggest_tasks(
    tasks: Iterable[Task], min_count: int = SUGGESTION_MIN_COUNT
) -> list[str]:
    """Return descriptions seen at least *min_count* times.

    Grouping is by exact string equality.  Results keep the order in which
    each description first appears in *tasks*.
    """
    counts = Counter(task.description for task in tasks)
    return [desc for desc, n in counts.items() if n >= min_count]
