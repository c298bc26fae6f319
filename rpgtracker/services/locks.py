"""
rpgtracker.services.locks — Per-user mutual exclusion
======================================================

Two awards racing on the same user would both read the old XP and the
second write would silently drop the first.  Every fetch → mutate → persist
cycle on a user runs under that user's lock, so awards in one process are
applied one after another.  Across processes the store additionally reads
the row ``FOR UPDATE`` (ignored by SQLite).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from threading import Lock
from weakref import WeakValueDictionary


class UserLocks:
    """Registry of one :class:`threading.Lock` per user id.

    Thread-safe.  Entries are weak: a user's lock lives only while some
    caller holds or waits on it, so ids that are no longer in use (or never
    existed) do not accumulate.
    """

    def __init__(self) -> None:
        self._guard = Lock()
        self._locks: WeakValueDictionary[int, Lock] = WeakValueDictionary()

    def lock_for(self, user_id: int) -> Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = Lock()
                self._locks[user_id] = lock
            return lock

    @contextmanager
    def hold(self, user_id: int) -> Iterator[None]:
        """Block until *user_id*'s lock is free, then hold it for the block."""
        lock = self.lock_for(user_id)
        with lock:
            yield

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


# Module-level singleton — one per process
_default_locks = UserLocks()


def get_default_locks() -> UserLocks:
    return _default_locks
