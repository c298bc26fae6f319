"""
rpgtracker.database.engine — Database Connection & Session Helper
==================================================================

Builds the SQLAlchemy engine from ``DATABASE_URL`` and creates the schema.

SQLite is the default backend (``sqlite:///rpgsite.db``), which keeps local
runs dependency-free.  Any other URL (e.g. PostgreSQL) gets a sized
connection pool with pre-ping.

Usage::

    from rpgtracker.database.engine import create_db_engine, get_session, init_db

    engine = create_db_engine()          # reads DATABASE_URL from .env
    init_db(engine)                      # CREATE TABLE IF NOT EXISTS …

    with get_session(engine) as session:
        session.add(User(name="drew"))
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from rpgtracker.database.models import Base

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///rpgsite.db"


# ---------------------------------------------------------------------------
# Engine creation
# ---------------------------------------------------------------------------
def create_db_engine(url: str | None = None) -> Engine:
    """Build a SQLAlchemy :class:`Engine`.

    Parameters
    ----------
    url:
        Database URL.  Falls back to the ``DATABASE_URL`` env var, then to
        a local SQLite file.

    For SQLite the connection is shared across FastAPI's worker threads
    (``check_same_thread=False``); an in-memory URL additionally uses
    :class:`StaticPool` so every session sees the same database.
    """
    url = url or os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL

    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=False, **kwargs)
    else:
        engine = create_engine(
            url,
            echo=False,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,   # Reconnect stale connections automatically
            pool_timeout=10,
            pool_recycle=3600,
        )
    logger.info("Database engine created → %s", engine.url.render_as_string(hide_password=True))
    return engine


# ---------------------------------------------------------------------------
# Schema initialization
# ---------------------------------------------------------------------------
def init_db(engine: Engine, *, seed_demo_user: bool = False) -> None:
    """Create all tables defined in :mod:`rpgtracker.database.models`.

    Safe to call on every startup.  In production the schema is managed by
    Alembic (``alembic upgrade head``); ``create_all`` covers dev/test
    environments where Alembic has not run.
    """
    Base.metadata.create_all(engine)
    logger.info("Database tables verified / created.")

    if seed_demo_user:
        from rpgtracker.database.seed import seed_demo_user as _seed

        _seed(engine)


# ---------------------------------------------------------------------------
# Session helper
# ---------------------------------------------------------------------------
@contextmanager
def get_session(engine: Engine):
    """Yield a :class:`Session` that auto-commits on success and rolls back
    on exception.
    """
    session = Session(engine)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
