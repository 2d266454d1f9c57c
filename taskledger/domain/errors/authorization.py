"""Authorization errors (caller lacks the required role or credential).

Roles here are structural: the creator recorded on a task, the assignee
recorded on a task, the owner recorded on a profile, or possession of a
live AdminCap. None of them is a
flag that can be toggled at runtime.
"""

from __future__ import annotations

from uuid import UUID

from taskledger.domain.exceptions import TaskLedgerError


class AuthorizationError(TaskLedgerError):
    """Base error for calls made without the required standing."""

    code = "AuthorizationError"


class NotCreatorError(AuthorizationError):
    """Raised when someone other than the creator assigns a task.

    Attributes:
        task_id: The task the caller tried to assign.
        caller: The rejected caller.
    """

    code = "NotCreator"

    def __init__(self, task_id: UUID, caller: UUID) -> None:
        """Initialize the error.

        Args:
            task_id: The task the caller tried to assign.
            caller: The rejected caller.
        """
        self.task_id = task_id
        self.caller = caller
        super().__init__(f"NotCreator: {caller} did not create task {task_id}")


class NotAssigneeError(AuthorizationError):
    """Raised when someone other than the assignee completes a task.

    Attributes:
        task_id: The task the caller tried to complete.
        caller: The rejected caller.
    """

    code = "NotAssignee"

    def __init__(self, task_id: UUID, caller: UUID) -> None:
        """Initialize the error.

        Args:
            task_id: The task the caller tried to complete.
            caller: The rejected caller.
        """
        self.task_id = task_id
        self.caller = caller
        super().__init__(f"NotAssignee: {caller} is not assigned to task {task_id}")


class NotAdminError(AuthorizationError):
    """Raised when a privileged call is made without a live AdminCap.

    Covers forged objects, None, and credentials that were moved away by
    a transfer.
    """

    code = "NotAdmin"

    def __init__(self, reason: str = "a live AdminCap is required") -> None:
        super().__init__(f"NotAdmin: {reason}")


class NotProfileOwnerError(AuthorizationError):
    """Raised when a completion credits a profile the caller does not own.

    Attributes:
        profile_id: The profile presented for the reward.
        caller: The rejected caller.
    """

    code = "NotProfileOwner"

    def __init__(self, profile_id: UUID, caller: UUID) -> None:
        self.profile_id = profile_id
        self.caller = caller
        super().__init__(
            f"NotProfileOwner: {caller} does not own profile {profile_id}"
        )
