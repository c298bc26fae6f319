"""
RPG Task Tracker — Gamified task progression backend
=====================================================
Users earn experience for completing tasks, level up on exponential
thresholds, unlock a pet companion at level 5, get suggestions for tasks
they keep repeating, and may enter the dungeon after a productive day.

Package layout::

    rpgtracker/
    ├── config.py          # YAML → typed Python config
    ├── constants.py       # Leveling formula + default tuning values
    ├── database/
    │   ├── engine.py      # SQLAlchemy engine + session helper
    │   ├── models.py      # User, Task, Pet
    │   └── seed.py        # Optional demo user seeder
    ├── engine/
    │   ├── progression.py # XP award + level-up cascade + pet unlock
    │   ├── suggestions.py # Recurring task suggestions
    │   └── dungeon.py     # Daily dungeon access gate
    ├── services/
    │   ├── store.py       # Storage interface + SQLAlchemy implementation
    │   ├── locks.py       # Per-user award serialization
    │   ├── errors.py      # Domain exceptions
    │   └── progression_service.py  # fetch → mutate → persist operations
    └── api/
        ├── main.py        # FastAPI app
        ├── deps.py        # Dependency injection
        └── routes/rpg.py  # /rpg endpoints
"""

__version__ = "0.1.0"
