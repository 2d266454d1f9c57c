"""Task lifecycle event payloads.

This module defines the audit records emitted by task operations:
- TaskCreatedEvent: a task was created (create_task)
- TaskAssignedEvent: an assignee was set or overwritten (assign_task,
  admin_reassign_task)
- TaskCompletedEvent: the assignee completed the task (complete_task)

Admin overrides are attributed to ADMIN_ACTION_ORIGINATOR rather than to a
participant, so an override is distinguishable from a creator assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from taskledger.domain.events.event import LEDGER_EVENT_SCHEMA_VERSION

TASK_CREATED_EVENT_TYPE: str = "task.created"
TASK_ASSIGNED_EVENT_TYPE: str = "task.assigned"
TASK_COMPLETED_EVENT_TYPE: str = "task.completed"

# Originator recorded on TaskAssigned when the admin override was used
ADMIN_ACTION_ORIGINATOR: UUID = UUID(int=0)


@dataclass(frozen=True, eq=True)
class TaskCreatedEvent:
    """Payload for task created events.

    Attributes:
        task_id: The new task.
        creator: Participant that created the task.
        title: Title at creation.
        reward_points: Reward at creation.
    """

    event_type: ClassVar[str] = TASK_CREATED_EVENT_TYPE

    task_id: UUID
    creator: UUID
    title: str
    reward_points: int

    @property
    def subject_id(self) -> UUID:
        return self.task_id

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for the event log."""
        return {
            "task_id": str(self.task_id),
            "creator": str(self.creator),
            "title": self.title,
            "reward_points": self.reward_points,
            "schema_version": LEDGER_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class TaskAssignedEvent:
    """Payload for task assigned events.

    Attributes:
        task_id: The assigned task.
        assignee: Participant now allowed to complete the task.
        assigned_by: The creator, or ADMIN_ACTION_ORIGINATOR for overrides.
    """

    event_type: ClassVar[str] = TASK_ASSIGNED_EVENT_TYPE

    task_id: UUID
    assignee: UUID
    assigned_by: UUID

    @property
    def subject_id(self) -> UUID:
        return self.task_id

    @property
    def is_admin_action(self) -> bool:
        return self.assigned_by == ADMIN_ACTION_ORIGINATOR

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for the event log."""
        return {
            "task_id": str(self.task_id),
            "assignee": str(self.assignee),
            "assigned_by": str(self.assigned_by),
            "schema_version": LEDGER_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class TaskCompletedEvent:
    """Payload for task completed events.

    ``points_awarded`` is the reward at the instant of completion.

    Attributes:
        task_id: The completed task.
        completed_by: The assignee who completed it.
        points_awarded: Points credited to the assignee's profile.
    """

    event_type: ClassVar[str] = TASK_COMPLETED_EVENT_TYPE

    task_id: UUID
    completed_by: UUID
    points_awarded: int

    @property
    def subject_id(self) -> UUID:
        return self.task_id

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for the event log."""
        return {
            "task_id": str(self.task_id),
            "completed_by": str(self.completed_by),
            "points_awarded": self.points_awarded,
            "schema_version": LEDGER_EVENT_SCHEMA_VERSION,
        }
