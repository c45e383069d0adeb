"""Per-user locks serializing profile read-modify-write cycles."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ProfileLocks:
    """Registry of asyncio locks keyed by user ID.

    Handlers hold the user's lock from loading the profile until the
    updated profile is saved, so concurrent commands for one user apply
    one after the other. Commands for different users do not block each
    other. A lock is dropped once nobody holds or waits for it.

    Locks are process-local: they serialize requests handled by one
    worker, not across several workers sharing a database.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, user_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(user_id, asyncio.Lock())
        self._users[user_id] = self._users.get(user_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[user_id] -= 1
            if self._users[user_id] == 0:
                del self._users[user_id]
                del self._locks[user_id]

    def __len__(self) -> int:
        return len(self._locks)


# Shared by all handlers in the process
profile_locks = ProfileLocks()
