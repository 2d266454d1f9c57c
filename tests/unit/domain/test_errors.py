"""Unit tests for the domain error taxonomy."""

from uuid import uuid4

import pytest

from taskledger.domain.errors import (
    AuthorizationError,
    CounterOverflowError,
    EmptyTitleError,
    EntityNotFoundError,
    GenesisAlreadyPerformedError,
    InvalidRewardPointsError,
    NotAdminError,
    NotAssigneeError,
    NotCreatorError,
    NotProfileOwnerError,
    TaskAlreadyAssignedError,
    TaskAlreadyCompletedError,
    TaskNotAssignedError,
    TaskStateError,
    TitleTooLongError,
    ValidationError,
)
from taskledger.domain.exceptions import TaskLedgerError


@pytest.mark.parametrize(
    ("error", "code", "family"),
    [
        (EmptyTitleError(), "EmptyTitle", ValidationError),
        (InvalidRewardPointsError(0), "InvalidRewardPoints", ValidationError),
        (TitleTooLongError(300, 200), "TitleTooLong", ValidationError),
        (NotCreatorError(uuid4(), uuid4()), "NotCreator", AuthorizationError),
        (NotAssigneeError(uuid4(), uuid4()), "NotAssignee", AuthorizationError),
        (NotAdminError(), "NotAdmin", AuthorizationError),
        (NotProfileOwnerError(uuid4(), uuid4()), "NotProfileOwner", AuthorizationError),
        (TaskAlreadyCompletedError(uuid4()), "TaskAlreadyCompleted", TaskStateError),
        (TaskAlreadyAssignedError(uuid4(), uuid4()), "TaskAlreadyAssigned", TaskStateError),
        (TaskNotAssignedError(uuid4()), "TaskNotAssigned", TaskStateError),
        (CounterOverflowError("total_tasks_created", 1), "CounterOverflow", TaskLedgerError),
        (EntityNotFoundError("task", uuid4()), "EntityNotFound", TaskLedgerError),
        (GenesisAlreadyPerformedError(uuid4()), "GenesisAlreadyPerformed", TaskLedgerError),
    ],
)
def test_error_code_and_family(
    error: TaskLedgerError, code: str, family: type[TaskLedgerError]
) -> None:
    assert error.code == code
    assert isinstance(error, family)
    assert isinstance(error, TaskLedgerError)
    assert str(error).startswith(code)
