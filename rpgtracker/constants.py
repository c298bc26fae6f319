"""
rpgtracker.constants — Shared Constants & Leveling Formula
===========================================================

Single source of truth for the leveling formula and default tuning values.
Import from here instead of duplicating in engine, services, and routes.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Default tuning (overridable through config.yaml)
# ---------------------------------------------------------------------------
LEVEL_BASE_XP = 10
DEFAULT_XP_AWARD = 5
PET_UNLOCK_LEVEL = 5
DEFAULT_PET_NAME = "Companion"
DEFAULT_PET_TYPE = "Smart Mascot"
SUGGESTION_MIN_COUNT = 3
DUNGEON_MIN_COMPLETED = 5


# ---------------------------------------------------------------------------
# Leveling formula — THE single canonical implementation
# ---------------------------------------------------------------------------
def threshold(level: int) -> int:
    """XP needed to advance from *level* to ``level + 1``.

    Doubles every level::

        required = 10 * 2 ** (level - 1)     # 10, 20, 40, 80, 160, …

    Computed with an integer shift, exact at any level.
    """
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    return LEVEL_BASE_XP << (level - 1)
