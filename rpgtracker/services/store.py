"""
rpgtracker.services.store — Storage interface
==============================================

The service layer talks to persistence only through
:class:`ProgressionStore`, which keeps the engine and the gates testable
against any backing store.  :class:`SqlStore` is the SQLAlchemy
implementation used by the API.
"""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from rpgtracker.database.models import Pet, Task, User

logger = logging.getLogger(__name__)


class ProgressionStore(Protocol):
    """Capabilities the progression services need from storage."""

    def find_user(self, user_id: int, *, for_update: bool = False) -> User | None: ...

    def save_user(self, user: User) -> None: ...

    def create_pet(self, user_id: int, name: str, pet_type: str) -> Pet: ...

    def list_tasks(self, user_id: int) -> list[Task]: ...


class SqlStore:
    """:class:`ProgressionStore` over a SQLAlchemy :class:`Session`.

    ``create_pet`` only stages the row; ``save_user`` commits everything
    staged in the session as one unit.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_user(self, user_id: int, *, for_update: bool = False) -> User | None:
        """Fetch a user by primary key.

        With *for_update* the row is locked ``SELECT … FOR UPDATE`` on
        backends that support it, and re-read even if already in the
        identity map.
        """
        if for_update:
            return self.session.get(
                User, user_id, with_for_update=True, populate_existing=True
            )
        return self.session.get(User, user_id)

    def save_user(self, user: User) -> None:
        self.session.add(user)
        self.session.commit()

    def create_pet(self, user_id: int, name: str, pet_type: str) -> Pet:
        pet = Pet(name=name, type=pet_type, user_id=user_id)
        self.session.add(pet)
        self.session.flush()
        return pet

    def list_tasks(self, user_id: int) -> list[Task]:
        """All tasks of *user_id* in creation (id) order."""
        return list(
            self.session.scalars(
                select(Task).where(Task.user_id == user_id).order_by(Task.id)
            ).all()
        )
