"""Domain errors for the task ledger.

Provides specific exception classes for each failure scenario.
All exceptions inherit from TaskLedgerError and carry a stable ``code``.
"""

from taskledger.domain.errors.authorization import (
    AuthorizationError,
    NotAdminError,
    NotAssigneeError,
    NotCreatorError,
    NotProfileOwnerError,
)
from taskledger.domain.errors.ledger import (
    CounterOverflowError,
    EntityNotFoundError,
    GenesisAlreadyPerformedError,
)
from taskledger.domain.errors.task_state import (
    TaskAlreadyAssignedError,
    TaskAlreadyCompletedError,
    TaskNotAssignedError,
    TaskStateError,
)
from taskledger.domain.errors.validation import (
    EmptyTitleError,
    InvalidRewardPointsError,
    TitleTooLongError,
    ValidationError,
)

__all__: list[str] = [
    "AuthorizationError",
    "CounterOverflowError",
    "EmptyTitleError",
    "EntityNotFoundError",
    "GenesisAlreadyPerformedError",
    "InvalidRewardPointsError",
    "NotAdminError",
    "NotAssigneeError",
    "NotCreatorError",
    "NotProfileOwnerError",
    "TaskAlreadyAssignedError",
    "TaskAlreadyCompletedError",
    "TaskNotAssignedError",
    "TaskStateError",
    "TitleTooLongError",
    "ValidationError",
]
