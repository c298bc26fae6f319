"""
rpgtracker.api.deps — FastAPI dependency injection
===================================================
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from rpgtracker.config import RpgConfig, load_config
from rpgtracker.database.engine import create_db_engine
from rpgtracker.services.store import SqlStore


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine()


@lru_cache(maxsize=1)
def get_config() -> RpgConfig:
    return load_config()


def get_session(engine: Annotated[Engine, Depends(get_engine)]):
    with Session(engine) as session:
        yield session


def get_store(session: Annotated[Session, Depends(get_session)]) -> SqlStore:
    return SqlStore(session)
