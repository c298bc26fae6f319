"""
rpgtracker.config — YAML Configuration Loader
==============================================

Reads ``config.yaml`` for gameplay tuning (default award, pet unlock level,
suggestion and dungeon thresholds).  Secrets and infrastructure settings
(``DATABASE_URL``, CORS origins) come from the environment instead.

Usage::

    from rpgtracker.config import load_config

    cfg = load_config()            # reads ./config.yaml if present
    print(cfg.pet_unlock_level)    # 5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from rpgtracker.constants import (
    DEFAULT_PET_NAME,
    DEFAULT_PET_TYPE,
    DEFAULT_XP_AWARD,
    DUNGEON_MIN_COMPLETED,
    PET_UNLOCK_LEVEL,
    SUGGESTION_MIN_COUNT,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Typed settings object
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class RpgConfig:
    """Immutable configuration loaded from ``config.yaml``.

    Every field has a default so the API runs without a config file.
    """

    # Identity
    app_title: str = "RPG Task Tracker"

    # Server
    port: int = 8000

    # Progression
    default_xp_award: int = DEFAULT_XP_AWARD  # Replaces non-positive awards
    pet_unlock_level: int = PET_UNLOCK_LEVEL
    default_pet_name: str = DEFAULT_PET_NAME
    default_pet_type: str = DEFAULT_PET_TYPE

    # Queries
    suggestion_min_count: int = SUGGESTION_MIN_COUNT
    dungeon_min_completed: int = DUNGEON_MIN_COMPLETED

    # Local development
    seed_demo_user: bool = False


_INT_FIELDS = frozenset({
    "port",
    "default_xp_award",
    "pet_unlock_level",
    "suggestion_min_count",
    "dungeon_min_completed",
})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def load_config(path: str | Path = "config.yaml") -> RpgConfig:
    """Read *path* and return a :class:`RpgConfig` instance.

    Parameters
    ----------
    path:
        Filesystem path to the YAML configuration file.
        Defaults to ``config.yaml`` in the current working directory.
        A missing file yields the built-in defaults.

    Raises
    ------
    ValueError
        If the file is not a mapping, a numeric key is not an integer ≥ 1,
        or ``seed_demo_user`` is not a YAML boolean.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.info("No config file at %s — using defaults.", config_path.resolve())
        return RpgConfig()

    with open(config_path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")

    known = {f.name for f in fields(RpgConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    values: dict = {}
    for key in known & set(raw):
        value = raw[key]
        if key in _INT_FIELDS:
            try:
                value = int(value)
            except (TypeError, ValueError):
                raise ValueError(f"{key} must be an integer, got {value!r}") from None
            if value < 1:
                raise ValueError(f"{key} must be >= 1, got {value}")
        elif key == "seed_demo_user":
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be true or false, got {value!r}")
        else:
            value = str(value)
        values[key] = value

    return RpgConfig(**values)
