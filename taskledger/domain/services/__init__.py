"""Domain services - the lifecycle operations over ledger entities."""

from taskledger.domain.services.profile_ledger import award, create_profile
from taskledger.domain.services.task_lifecycle import (
    TaskCompletion,
    TaskCreation,
    admin_reassign_task,
    assign_task,
    complete_task,
    create_task,
)

__all__: list[str] = [
    "TaskCompletion",
    "TaskCreation",
    "admin_reassign_task",
    "assign_task",
    "award",
    "complete_task",
    "create_profile",
    "create_task",
]
