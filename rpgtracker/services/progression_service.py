"""
rpgtracker.services.progression_service — Request-level progression operations
================================================================================

Shared service module called by the API routes.  Each operation runs one
fetch → mutate → persist cycle against a :class:`ProgressionStore`:

- ``award_xp``        — default-award policy, engine call, pet unlock, save
- ``create_pet``      — manual pet creation behind the level / ownership gate
- ``get_suggestions`` — recurring task descriptions
- ``check_dungeon``   — today's completed-task gate

Writes to the same user are serialized through :class:`UserLocks`.
"""

from __future__ import annotations

import logging
from datetime import date

from rpgtracker.config import RpgConfig
from rpgtracker.database.models import Pet
from rpgtracker.engine.dungeon import DungeonAccess, check_dungeon_access
from rpgtracker.engine.progression import ProgressionResult, award_experience
from rpgtracker.engine.suggestions import suggest_tasks
from rpgtracker.services.errors import PreconditionFailedError, UserNotFoundError
from rpgtracker.services.locks import UserLocks, get_default_locks
from rpgtracker.services.store import ProgressionStore

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = RpgConfig()


def award_xp(
    store: ProgressionStore,
    user_id: int,
    xp: int,
    *,
    config: RpgConfig | None = None,
    locks: UserLocks | None = None,
) -> ProgressionResult:
    """Award *xp* to a user and persist the outcome.

    Non-positive *xp* is not an error: it is replaced by
    ``config.default_xp_award``.  If the award unlocks the pet, the default
    companion is created in the same commit.

    Raises
    ------
    UserNotFoundError
        If *user_id* does not exist.
    """
    cfg = config or _DEFAULT_CONFIG
    locks = locks or get_default_locks()

    amount = xp
    if amount <= 0:
        amount = cfg.default_xp_award
        logger.debug("Non-positive award %d for user %d → default %d", xp, user_id, amount)

    with locks.hold(user_id):
        user = store.find_user(user_id, for_update=True)
        if user is None:
            raise UserNotFoundError(user_id)

        result = award_experience(user, amount, pet_unlock_level=cfg.pet_unlock_level)
        if result.pet_unlocked:
            store.create_pet(user.id, cfg.default_pet_name, cfg.default_pet_type)
            logger.info("User %d reached level %d and unlocked a pet", user.id, result.level)

        store.save_user(user)

    return result


def create_pet(
    store: ProgressionStore,
    user_id: int,
    name: str,
    pet_type: str,
    *,
    config: RpgConfig | None = None,
    locks: UserLocks | None = None,
) -> Pet:
    """Create a named pet for a user who earned one but does not own one.

    Preconditions are checked in order and the first failure wins:
    the user exists, has reached the unlock level, and has no pet yet.

    Raises
    ------
    UserNotFoundError
        If *user_id* does not exist.
    PreconditionFailedError
        If the user's level is too low or a pet is already owned.
    """
    cfg = config or _DEFAULT_CONFIG
    locks = locks or get_default_locks()

    with locks.hold(user_id):
        user = store.find_user(user_id, for_update=True)
        if user is None:
            raise UserNotFoundError(user_id)
        if user.level < cfg.pet_unlock_level:
            raise PreconditionFailedError(
                f"User must be level {cfg.pet_unlock_level} to own a pet"
            )
        if user.has_pet:
            raise PreconditionFailedError("User already has a pet")

        pet = store.create_pet(user.id, name, pet_type)
        user.has_pet = True
        store.save_user(user)

    logger.info("User %d adopted pet %r (%s)", user_id, name, pet_type)
    return pet


def get_suggestions(
    store: ProgressionStore,
    user_id: int,
    *,
    config: RpgConfig | None = None,
) -> list[str]:
    """Recurring task descriptions for *user_id* (empty for unknown users)."""
    cfg = config or _DEFAULT_CONFIG
    return suggest_tasks(store.list_tasks(user_id), cfg.suggestion_min_count)


def check_dungeon(
    store: ProgressionStore,
    user_id: int,
    *,
    today: date | None = None,
    config: RpgConfig | None = None,
) -> DungeonAccess:
    """Evaluate the dungeon gate for *user_id* on *today* (UTC)."""
    cfg = config or _DEFAULT_CONFIG
    return check_dungeon_access(
        store.list_tasks(user_id), today, cfg.dungeon_min_completed
    )
