"""Ledger entity store port.

The store is an arena of entities keyed by id. Exclusive ownership of a
Task or UserProfile is realized as an exclusive per-entity lock: a
mutating call acquires the lock of every entity it touches, reads the
current versions, runs the domain operation and commits the new versions
before releasing. The shared TaskBoard has its own lock, which serializes
concurrent increments so no update is lost.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol
from uuid import UUID

from taskledger.domain.models.task import Task
from taskledger.domain.models.task_board import TaskBoard
from taskledger.domain.models.user_profile import UserProfile


class LedgerEntityStoreProtocol(Protocol):
    """Protocol for entity storage with exclusive per-entity handles."""

    def acquire(self, *entity_ids: UUID) -> AbstractAsyncContextManager[None]:
        """Hold the exclusive locks of ``entity_ids`` for the block.

        Locks are taken in a deterministic order regardless of argument
        order, so two calls touching the same entities cannot deadlock.
        """
        ...

    async def get_task(self, task_id: UUID) -> Task | None:
        """Return the current version of a task, or None."""
        ...

    async def get_profile(self, profile_id: UUID) -> UserProfile | None:
        """Return the current version of a profile, or None."""
        ...

    async def get_board(self) -> TaskBoard | None:
        """Return the board minted at genesis, or None before genesis."""
        ...

    async def get_admin_cap_id(self) -> UUID | None:
        """Return the id of the credential minted at genesis, or None."""
        ...

    async def register_admin_cap(self, cap_id: UUID) -> None:
        """Record the id of the credential minted at genesis."""
        ...

    async def commit(
        self,
        *,
        task: Task | None = None,
        profile: UserProfile | None = None,
        board: TaskBoard | None = None,
    ) -> None:
        """Store new entity versions in one step.

        Callers hold the locks of every entity passed in.
        """
        ...
