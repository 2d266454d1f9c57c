"""In-memory ledger entity store.

Arena of entities keyed by id, with one asyncio.Lock per entity. Holding
an entity's lock is holding the exclusive handle to it; the board's lock
turns the shared counter pair into a single guarded resource.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from uuid import UUID

from taskledger.application.ports.ledger_entity_store import LedgerEntityStoreProtocol
from taskledger.domain.models.task import Task
from taskledger.domain.models.task_board import TaskBoard
from taskledger.domain.models.user_profile import UserProfile


class LedgerEntityStore(LedgerEntityStoreProtocol):
    """In-memory implementation of LedgerEntityStoreProtocol.

    Entities are never deleted; ``commit`` only inserts or replaces
    versions.

    Attributes:
        _tasks: Current task versions by id.
        _profiles: Current profile versions by id.
        _board: The genesis board, once minted.
        _admin_cap_id: Id of the genesis credential, once minted.
        _locks: Exclusive handle per entity id, created on first use.
    """

    def __init__(self) -> None:
        self._tasks: dict[UUID, Task] = {}
        self._profiles: dict[UUID, UserProfile] = {}
        self._board: TaskBoard | None = None
        self._admin_cap_id: UUID | None = None
        self._locks: dict[UUID, asyncio.Lock] = {}

    def lock_for(self, entity_id: UUID) -> asyncio.Lock:
        """Return the exclusive lock guarding ``entity_id``."""
        return self._locks.setdefault(entity_id, asyncio.Lock())

    @asynccontextmanager
    async def acquire(self, *entity_ids: UUID) -> AsyncIterator[None]:
        """Hold the locks of ``entity_ids`` (sorted, de-duplicated)."""
        async with AsyncExitStack() as stack:
            for entity_id in sorted(set(entity_ids)):
                await stack.enter_async_context(self.lock_for(entity_id))
            yield

    async def get_task(self, task_id: UUID) -> Task | None:
        return self._tasks.get(task_id)

    async def get_profile(self, profile_id: UUID) -> UserProfile | None:
        return self._profiles.get(profile_id)

    async def get_board(self) -> TaskBoard | None:
        return self._board

    async def get_admin_cap_id(self) -> UUID | None:
        return self._admin_cap_id

    async def register_admin_cap(self, cap_id: UUID) -> None:
        """Record the genesis credential id.

        Raises:
            ValueError: If a credential was already registered.
        """
        if self._admin_cap_id is not None:
            raise ValueError(f"AdminCap {self._admin_cap_id} is already registered")
        self._admin_cap_id = cap_id

    async def commit(
        self,
        *,
        task: Task | None = None,
        profile: UserProfile | None = None,
        board: TaskBoard | None = None,
    ) -> None:
        """Store new versions of the given entities.

        Raises:
            ValueError: If ``board`` is not the genesis board.
        """
        if board is not None and self._board is not None and board.id != self._board.id:
            raise ValueError(f"Board {board.id} is not the ledger board {self._board.id}")
        if task is not None:
            self._tasks[task.id] = task
        if profile is not None:
            self._profiles[profile.id] = profile
        if board is not None:
            self._board = board

    def task_count(self) -> int:
        return len(self._tasks)

    def profile_count(self) -> int:
        return len(self._profiles)
