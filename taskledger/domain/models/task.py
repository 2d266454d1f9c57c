"""Task domain model.

A Task is an exclusively owned unit of work with a reward, a creator and
an optional assignee.

State Machine:
    Pending/Unassigned -> Pending/Assigned (creator assigns, or admin override)
    Pending/Assigned   -> Pending/Assigned (admin override only)
    Pending/*          -> Completed        (assignee completes)

Completed is terminal. After creation only ``assignee`` and ``status``
ever change; a Task is never deleted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from uuid import UUID


class TaskStatus(Enum):
    """Status in the task lifecycle.

    States:
        PENDING: Open for assignment and completion
        COMPLETED: Terminal, rewards have been paid out
    """

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"

    def is_terminal(self) -> bool:
        """Check if no further transition is permitted from this status."""
        return self is TaskStatus.COMPLETED


@dataclass(frozen=True, eq=True)
class Task:
    """A rewarded unit of work.

    Since Task is frozen, every transition returns a new instance; the
    entity store keeps the current version under ``id``.

    Attributes:
        id: UUIDv7 identifier, immutable.
        title: Non-empty title (validated at creation only).
        description: Free text.
        reward_points: Points paid to the assignee on completion (> 0).
        creator: Participant who created the task, immutable.
        status: Lifecycle status.
        assignee: Participant allowed to complete the task, if any.
    """

    id: UUID
    title: str
    description: str
    reward_points: int
    creator: UUID
    status: TaskStatus = field(default=TaskStatus.PENDING)
    assignee: UUID | None = field(default=None)

    @property
    def is_completed(self) -> bool:
        return self.status.is_terminal()

    @property
    def is_assigned(self) -> bool:
        return self.assignee is not None

    def with_assignee(self, assignee: UUID) -> Task:
        """Return a copy with ``assignee`` set.

        Guards on who may assign live in the lifecycle operations; this
        only refuses to touch a terminal task.

        Raises:
            TaskAlreadyCompletedError: If the task is completed.
        """
        from taskledger.domain.errors.task_state import TaskAlreadyCompletedError

        if self.is_completed:
            raise TaskAlreadyCompletedError(self.id)
        return replace(self, assignee=assignee)

    def with_completed(self) -> Task:
        """Return a copy in the terminal COMPLETED status.

        Raises:
            TaskAlreadyCompletedError: If the task is already completed.
        """
        from taskledger.domain.errors.task_state import TaskAlreadyCompletedError

        if self.is_completed:
            raise TaskAlreadyCompletedError(self.id)
        return replace(self, status=TaskStatus.COMPLETED)
