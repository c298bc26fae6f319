"""
rpgtracker.engine.progression — Experience & Leveling Engine
=============================================================

Pure calculation over an in-memory user record.
No DB I/O inside the engine: the caller fetches the user, hands it here,
then persists the mutated record (and the unlocked pet, if any).

Pipeline:
  award → carry loop (cascading level-ups) → pet unlock check → ProgressionResult
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from rpgtracker.constants import PET_UNLOCK_LEVEL, threshold

logger = logging.getLogger(__name__)

__all__ = [
    "Progressable",
    "ProgressionResult",
    "award_experience",
    "threshold",
    "xp_to_next_level",
]


class Progressable(Protocol):
    """Anything carrying the three progression fields (ORM ``User`` in practice)."""

    level: int
    experience: int
    has_pet: bool


# ---------------------------------------------------------------------------
# ProgressionResult — output of an award
# ---------------------------------------------------------------------------
@dataclass
class ProgressionResult:
    """Snapshot of a user's progression after one award."""

    xp_awarded: int
    old_level: int
    level: int
    experience: int
    has_pet: bool
    pet_unlocked: bool = False

    @property
    def levels_gained(self) -> int:
        return self.level - self.old_level

    @property
    def leveled_up(self) -> bool:
        return self.level > self.old_level


# ---------------------------------------------------------------------------
# Award
# ---------------------------------------------------------------------------
def award_experience(
    user: Progressable,
    amount: int,
    *,
    pet_unlock_level: int = PET_UNLOCK_LEVEL,
) -> ProgressionResult:
    """Add *amount* XP to *user*, resolving every level-up it pays for.

    ``user.experience`` holds XP within the current level.  Whenever it
    reaches ``threshold(level)`` that threshold is subtracted and the level
    increments, so one large award can cascade through several levels
    (level 1 + 70 XP → 10 + 20 + 40 → level 4 with 0 XP left).

    Once the settled level reaches *pet_unlock_level* and the user has no
    pet, ``has_pet`` is flipped and ``pet_unlocked`` is reported so the
    caller can create the companion.  This fires at most once per user.

    Raises
    ------
    ValueError
        If *amount* is negative.  Callers substitute the default award for
        non-positive input before calling.
    """
    if amount < 0:
        raise ValueError(f"award amount must be non-negative, got {amount}")

    old_level = user.level
    user.experience += amount
    while user.experience >= threshold(user.level):
        user.experience -= threshold(user.level)
        user.level += 1

    pet_unlocked = False
    if user.level >= pet_unlock_level and not user.has_pet:
        user.has_pet = True
        pet_unlocked = True

    if user.level > old_level:
        logger.info(
            "Level up: %d → %d (%d XP carried)", old_level, user.level, user.experience
        )

    return ProgressionResult(
        xp_awarded=amount,
        old_level=old_level,
        level=user.level,
        experience=user.experience,
        has_pet=user.has_pet,
        pet_unlocked=pet_unlocked,
    )


def xp_to_next_level(user: Progressable) -> int:
    """XP still missing before *user* reaches the next level."""
    return threshold(user.level) - user.experience
