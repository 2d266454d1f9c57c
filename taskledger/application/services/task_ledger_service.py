"""Task ledger service.

Runs the lifecycle operations against the entity store with exclusive
handles, then commits and records.

Every mutating call follows the same steps:
1. Resolve the ids it touches (task, profile, board)
2. Acquire the exclusive lock of each, in deterministic order
3. Read the current versions
4. Run the domain operation against a PendingEvents buffer
5. Commit the new versions in one step
6. Flush the buffered records to the event sink, then feed metrics

Any TaskLedgerError raised in steps 1-5 is logged with its code, counted,
and re-raised unchanged. Nothing has been committed or recorded at that
point.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from taskledger.application.ports.ledger_entity_store import LedgerEntityStoreProtocol
from taskledger.application.services.base import LoggingMixin
from taskledger.application.services.pending_events import PendingEvents
from taskledger.config.ledger_config import LedgerConfig
from taskledger.domain.errors.authorization import NotAdminError
from taskledger.domain.errors.ledger import EntityNotFoundError
from taskledger.domain.errors.validation import TitleTooLongError
from taskledger.domain.exceptions import TaskLedgerError
from taskledger.domain.models.admin_cap import AdminCap, require_admin_cap
from taskledger.domain.models.task import Task
from taskledger.domain.models.task_board import TaskBoard
from taskledger.domain.models.user_profile import UserProfile
from taskledger.domain.ports.event_sink import EventSink
from taskledger.domain.services import profile_ledger, task_lifecycle
from taskledger.domain.services.task_lifecycle import TaskCompletion
from taskledger.infrastructure.monitoring.ledger_metrics import LedgerMetricsCollector


class TaskLedgerService(LoggingMixin):
    """Entry point for creating, assigning and completing tasks.

    Example:
        >>> service = TaskLedgerService(store=store, event_sink=event_log)
        >>> task = await service.create_task(
        ...     title="Write docs",
        ...     description="",
        ...     reward_points=50,
        ...     caller=alice,
        ... )
        >>> await service.assign_task(task.id, assignee=bob, caller=alice)
        >>> await service.complete_task(task.id, profile_id=bob_profile.id, caller=bob)
    """

    def __init__(
        self,
        store: LedgerEntityStoreProtocol,
        event_sink: EventSink,
        metrics: LedgerMetricsCollector | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            store: Entity arena with per-entity locks.
            event_sink: Receiver of committed audit records.
            metrics: Optional Prometheus collector. Skipped when None.
            config: Optional runtime configuration (defaults apply when None).
        """
        self._store = store
        self._sink = event_sink
        self._metrics = metrics
        self._config = config or LedgerConfig()
        self._init_logger()

    # =========================================================================
    # Mutating operations
    # =========================================================================

    async def create_task(
        self,
        title: str,
        description: str,
        reward_points: int,
        caller: UUID,
    ) -> Task:
        """Create a task; ``caller`` becomes its creator and holder.

        Raises:
            EmptyTitleError: If ``title`` is empty.
            TitleTooLongError: If a title ceiling is configured and exceeded.
            InvalidRewardPointsError: If ``reward_points`` is not positive.
            EntityNotFoundError: If genesis has not run.
            CounterOverflowError: If the board's created counter is full.
        """
        log = self._log_operation(
            "create_task", caller=str(caller), reward_points=reward_points
        )
        log.info("create_task_started")

        try:
            board_id = await self._board_id()
            async with self._store.acquire(board_id):
                board = await self._require_board()
                self._check_title_length(title)
                pending = PendingEvents()
                result = task_lifecycle.create_task(
                    board, title, description, reward_points, caller, pending
                )
                await self._store.commit(task=result.task, board=result.board)
                self._flush(pending)
        except TaskLedgerError as exc:
            self._reject(log, "create_task", exc)
            raise

        log.info(
            "create_task_completed",
            task_id=str(result.task.id),
            total_tasks_created=result.board.total_tasks_created,
        )
        return result.task

    async def assign_task(self, task_id: UUID, assignee: UUID, caller: UUID) -> Task:
        """Assign a task as its creator.

        Raises:
            EntityNotFoundError: If the task does not exist.
            NotCreatorError: If ``caller`` is not the creator.
            TaskAlreadyCompletedError: If the task is completed.
            TaskAlreadyAssignedError: If the task already has an assignee.
        """
        log = self._log_operation(
            "assign_task",
            task_id=str(task_id),
            assignee=str(assignee),
            caller=str(caller),
        )
        log.info("assign_task_started")

        try:
            async with self._store.acquire(task_id):
                task = await self._require_task(task_id)
                pending = PendingEvents()
                updated = task_lifecycle.assign_task(task, assignee, caller, pending)
                await self._store.commit(task=updated)
                self._flush(pending)
        except TaskLedgerError as exc:
            self._reject(log, "assign_task", exc)
            raise

        log.info("assign_task_completed")
        return updated

    async def admin_reassign_task(
        self, cap: AdminCap, task_id: UUID, new_assignee: UUID
    ) -> Task:
        """Overwrite a pending task's assignee with the admin credential.

        The credential must be live and must be the one minted by this
        ledger's genesis.

        Raises:
            NotAdminError: If ``cap`` is not this ledger's live AdminCap.
            EntityNotFoundError: If the task does not exist.
            TaskAlreadyCompletedError: If the task is completed.
        """
        log = self._log_operation(
            "admin_reassign_task",
            task_id=str(task_id),
            new_assignee=str(new_assignee),
        )
        log.info("admin_reassign_task_started")

        try:
            await self._require_ledger_cap(cap)
            async with self._store.acquire(task_id):
                task = await self._require_task(task_id)
                previous_assignee = task.assignee
                pending = PendingEvents()
                updated = task_lifecycle.admin_reassign_task(
                    cap, task, new_assignee, pending
                )
                await self._store.commit(task=updated)
                self._flush(pending)
        except TaskLedgerError as exc:
            self._reject(log, "admin_reassign_task", exc)
            raise

        log.info(
            "admin_reassign_task_completed",
            previous_assignee=str(previous_assignee) if previous_assignee else None,
        )
        return updated

    async def complete_task(
        self, task_id: UUID, profile_id: UUID, caller: UUID
    ) -> TaskCompletion:
        """Complete a task as its assignee, crediting ``profile_id``.

        Raises:
            EntityNotFoundError: If the task, profile or board does not exist.
            TaskAlreadyCompletedError: If the task is already completed.
            TaskNotAssignedError: If the task has no assignee.
            NotAssigneeError: If ``caller`` is not the assignee.
            NotProfileOwnerError: If ``caller`` does not own the profile.
            CounterOverflowError: If a board or profile counter is full.
        """
        log = self._log_operation(
            "complete_task",
            task_id=str(task_id),
            profile_id=str(profile_id),
            caller=str(caller),
        )
        log.info("complete_task_started")

        try:
            board_id = await self._board_id()
            async with self._store.acquire(task_id, profile_id, board_id):
                task = await self._require_task(task_id)
                profile = await self._require_profile(profile_id)
                board = await self._require_board()
                pending = PendingEvents()
                result = task_lifecycle.complete_task(
                    task, board, profile, caller, pending
                )
                await self._store.commit(
                    task=result.task, profile=result.profile, board=result.board
                )
                self._flush(pending)
        except TaskLedgerError as exc:
            self._reject(log, "complete_task", exc)
            raise

        log.info(
            "complete_task_completed",
            points_awarded=task.reward_points,
            total_points_earned=result.profile.total_points_earned,
            level=result.profile.level,
        )
        return result

    async def create_profile(self, caller: UUID) -> UserProfile:
        """Create a profile owned by ``caller``."""
        log = self._log_operation("create_profile", caller=str(caller))
        log.info("create_profile_started")

        pending = PendingEvents()
        profile = profile_ledger.create_profile(caller, pending)
        async with self._store.acquire(profile.id):
            await self._store.commit(profile=profile)
            self._flush(pending)

        log.info("create_profile_completed", profile_id=str(profile.id))
        return profile

    # =========================================================================
    # Read projections
    # =========================================================================

    async def get_task(self, task_id: UUID) -> Task:
        """Return the current task version.

        Raises:
            EntityNotFoundError: If the task does not exist.
        """
        return await self._require_task(task_id)

    async def get_profile(self, profile_id: UUID) -> UserProfile:
        """Return the current profile version.

        Raises:
            EntityNotFoundError: If the profile does not exist.
        """
        return await self._require_profile(profile_id)

    async def get_board(self) -> TaskBoard:
        """Return the current board version.

        Raises:
            EntityNotFoundError: If genesis has not run.
        """
        return await self._require_board()

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _require_task(self, task_id: UUID) -> Task:
        task = await self._store.get_task(task_id)
        if task is None:
            raise EntityNotFoundError("task", task_id)
        return task

    async def _require_profile(self, profile_id: UUID) -> UserProfile:
        profile = await self._store.get_profile(profile_id)
        if profile is None:
            raise EntityNotFoundError("profile", profile_id)
        return profile

    async def _require_board(self) -> TaskBoard:
        board = await self._store.get_board()
        if board is None:
            raise EntityNotFoundError("board", None)
        return board

    async def _board_id(self) -> UUID:
        # The board id never changes, so it is safe to read before locking.
        return (await self._require_board()).id

    async def _require_ledger_cap(self, cap: object) -> None:
        live_cap = require_admin_cap(cap)
        if live_cap.id != await self._store.get_admin_cap_id():
            raise NotAdminError(f"AdminCap {live_cap.id} was not minted by this ledger")

    def _check_title_length(self, title: str) -> None:
        max_length = self._config.max_title_length
        if title and max_length and len(title) > max_length:
            raise TitleTooLongError(len(title), max_length)

    def _flush(self, pending: PendingEvents) -> None:
        flushed = pending.flush_to(self._sink)
        if self._metrics is not None:
            for event in flushed:
                self._metrics.record_event(event)

    def _reject(
        self, log: structlog.BoundLogger, operation: str, exc: TaskLedgerError
    ) -> None:
        log.warning(
            f"{operation}_rejected",
            error_code=exc.code,
            error=str(exc),
        )
        if self._metrics is not None:
            self._metrics.record_rejection(exc.code)
