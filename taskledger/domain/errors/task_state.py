"""Task state errors (operation incompatible with the task lifecycle state).

Task lifecycle:
    Pending/Unassigned -> Pending/Assigned -> Completed (terminal)

Completed is terminal: every mutating operation against a completed task
fails with TaskAlreadyCompletedError, including a repeated completion.
"""

from __future__ import annotations

from uuid import UUID

from taskledger.domain.exceptions import TaskLedgerError


class TaskStateError(TaskLedgerError):
    """Base error for operations attempted in the wrong lifecycle state.

    Attributes:
        task_id: The task in the incompatible state.
    """

    code = "TaskStateError"

    def __init__(self, task_id: UUID, message: str) -> None:
        self.task_id = task_id
        super().__init__(message)


class TaskAlreadyCompletedError(TaskStateError):
    """Raised when a completed task is assigned, reassigned or completed again."""

    code = "TaskAlreadyCompleted"

    def __init__(self, task_id: UUID) -> None:
        super().__init__(
            task_id,
            f"TaskAlreadyCompleted: task {task_id} is completed and cannot change",
        )


class TaskAlreadyAssignedError(TaskStateError):
    """Raised when the creator assigns a task that already has an assignee.

    Attributes:
        current_assignee: The assignee that stays in place.
    """

    code = "TaskAlreadyAssigned"

    def __init__(self, task_id: UUID, current_assignee: UUID) -> None:
        self.current_assignee = current_assignee
        super().__init__(
            task_id,
            f"TaskAlreadyAssigned: task {task_id} is already assigned to "
            f"{current_assignee}",
        )


class TaskNotAssignedError(TaskStateError):
    """Raised when completion is attempted on an unassigned task."""

    code = "TaskNotAssigned"

    def __init__(self, task_id: UUID) -> None:
        super().__init__(
            task_id, f"TaskNotAssigned: task {task_id} has no assignee"
        )
