"""Task lifecycle operations.

Each operation checks every guard, computes the new entity versions, and
only then emits its audit records. A guard violation therefore aborts the
call with no emitted record and no new version handed back: the caller's
entities are untouched because they are immutable.

Guard order (first failing guard wins):
    create_task:          EmptyTitle, InvalidRewardPoints
    assign_task:          NotCreator, TaskAlreadyCompleted, TaskAlreadyAssigned
    admin_reassign_task:  NotAdmin, TaskAlreadyCompleted
    complete_task:        TaskAlreadyCompleted, TaskNotAssigned, NotAssignee,
                          NotProfileOwner

The admin override overwrites an existing assignee without complaint.
That is the privilege the credential grants.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from uuid6 import uuid7

from taskledger.domain.errors.authorization import (
    NotAssigneeError,
    NotCreatorError,
    NotProfileOwnerError,
)
from taskledger.domain.errors.task_state import (
    TaskAlreadyAssignedError,
    TaskAlreadyCompletedError,
    TaskNotAssignedError,
)
from taskledger.domain.errors.validation import EmptyTitleError, InvalidRewardPointsError
from taskledger.domain.events.task import (
    ADMIN_ACTION_ORIGINATOR,
    TaskAssignedEvent,
    TaskCompletedEvent,
    TaskCreatedEvent,
)
from taskledger.domain.models.admin_cap import AdminCap, require_admin_cap
from taskledger.domain.models.task import Task
from taskledger.domain.models.task_board import COUNTER_CEILING, TaskBoard
from taskledger.domain.models.user_profile import UserProfile
from taskledger.domain.ports.event_sink import EventSink
from taskledger.domain.services.profile_ledger import award


@dataclass(frozen=True)
class TaskCreation:
    """New versions produced by create_task."""

    task: Task
    board: TaskBoard


@dataclass(frozen=True)
class TaskCompletion:
    """New versions produced by complete_task."""

    task: Task
    board: TaskBoard
    profile: UserProfile


def create_task(
    board: TaskBoard,
    title: str,
    description: str,
    reward_points: int,
    caller: UUID,
    sink: EventSink,
    *,
    task_id: UUID | None = None,
) -> TaskCreation:
    """Create a pending, unassigned task owned by ``caller``.

    Args:
        board: Current board version.
        title: Task title, must be non-empty.
        description: Free text.
        reward_points: Reward, must be positive.
        caller: Creator of the task.
        sink: Receiver of the TaskCreated record.
        task_id: Optional explicit id (a UUIDv7 is generated otherwise).

    Returns:
        TaskCreation with the new task and the incremented board.

    Raises:
        EmptyTitleError: If ``title`` is empty.
        InvalidRewardPointsError: If ``reward_points`` is not an int in
            1..COUNTER_CEILING.
        CounterOverflowError: If the board's created counter is at its ceiling.
    """
    if not title:
        raise EmptyTitleError()
    if not isinstance(reward_points, int) or isinstance(reward_points, bool):
        raise InvalidRewardPointsError(reward_points)
    if reward_points <= 0 or reward_points > COUNTER_CEILING:
        raise InvalidRewardPointsError(reward_points)

    new_board = board.increment_created()
    task = Task(
        id=task_id or uuid7(),
        title=title,
        description=description,
        reward_points=reward_points,
        creator=caller,
    )

    sink.emit(
        TaskCreatedEvent(
            task_id=task.id,
            creator=caller,
            title=title,
            reward_points=reward_points,
        )
    )
    return TaskCreation(task=task, board=new_board)


def assign_task(task: Task, assignee: UUID, caller: UUID, sink: EventSink) -> Task:
    """Assign ``task`` to ``assignee``. Creator only, once only.

    Raises:
        NotCreatorError: If ``caller`` did not create the task.
        TaskAlreadyCompletedError: If the task is completed.
        TaskAlreadyAssignedError: If the task already has an assignee.
    """
    if caller != task.creator:
        raise NotCreatorError(task.id, caller)
    if task.is_completed:
        raise TaskAlreadyCompletedError(task.id)
    if task.assignee is not None:
        raise TaskAlreadyAssignedError(task.id, task.assignee)

    updated = task.with_assignee(assignee)
    sink.emit(TaskAssignedEvent(task_id=task.id, assignee=assignee, assigned_by=caller))
    return updated


def admin_reassign_task(
    cap: AdminCap, task: Task, new_assignee: UUID, sink: EventSink
) -> Task:
    """Overwrite the assignee of a pending task using the admin credential.

    Prior assignment state does not matter; only completion blocks it.

    Raises:
        NotAdminError: If ``cap`` is not a live AdminCap.
        TaskAlreadyCompletedError: If the task is completed.
    """
    require_admin_cap(cap)
    if task.is_completed:
        raise TaskAlreadyCompletedError(task.id)

    updated = task.with_assignee(new_assignee)
    sink.emit(
        TaskAssignedEvent(
            task_id=task.id,
            assignee=new_assignee,
            assigned_by=ADMIN_ACTION_ORIGINATOR,
        )
    )
    return updated


def complete_task(
    task: Task,
    board: TaskBoard,
    profile: UserProfile,
    caller: UUID,
    sink: EventSink,
) -> TaskCompletion:
    """Complete ``task`` as its assignee and pay out the reward.

    Emits UserLeveledUp (when the award raises the level) followed by
    TaskCompleted.

    Args:
        task: Current task version.
        board: Current board version.
        profile: The caller's profile, credited with the reward.
        caller: Participant completing the task.
        sink: Receiver of the audit records.

    Returns:
        TaskCompletion with the completed task, board and profile.

    Raises:
        TaskAlreadyCompletedError: If the task is already completed.
        TaskNotAssignedError: If the task has no assignee.
        NotAssigneeError: If ``caller`` is not the assignee.
        NotProfileOwnerError: If ``caller`` does not own ``profile``.
        CounterOverflowError: If a board or profile counter is at its ceiling.
    """
    if task.is_completed:
        raise TaskAlreadyCompletedError(task.id)
    if task.assignee is None:
        raise TaskNotAssignedError(task.id)
    if caller != task.assignee:
        raise NotAssigneeError(task.id, caller)
    if profile.owner != caller:
        raise NotProfileOwnerError(profile.id, caller)

    # award raises on profile overflow before it emits anything
    new_board = board.increment_completed()
    completed = task.with_completed()

    new_profile = award(profile, task.reward_points, sink)
    sink.emit(
        TaskCompletedEvent(
            task_id=task.id,
            completed_by=caller,
            points_awarded=task.reward_points,
        )
    )
    return TaskCompletion(task=completed, board=new_board, profile=new_profile)
