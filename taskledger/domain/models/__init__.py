"""Domain models for the task ledger.

Entities:
- Task: owned, rewarded unit of work with a two-status lifecycle
- UserProfile: per-participant points, completed count and derived level
- TaskBoard: shared created/completed counter pair
- AdminCap: move-only admin credential
"""

from taskledger.domain.models.admin_cap import AdminCap, mint_admin_cap, require_admin_cap
from taskledger.domain.models.task import Task, TaskStatus
from taskledger.domain.models.task_board import COUNTER_CEILING, TaskBoard
from taskledger.domain.models.user_profile import (
    BASE_LEVEL,
    LEVEL_THRESHOLDS,
    MAX_LEVEL,
    UserProfile,
    level_for_points,
)

__all__: list[str] = [
    "AdminCap",
    "BASE_LEVEL",
    "COUNTER_CEILING",
    "LEVEL_THRESHOLDS",
    "MAX_LEVEL",
    "Task",
    "TaskBoard",
    "TaskStatus",
    "UserProfile",
    "level_for_points",
    "mint_admin_cap",
    "require_admin_cap",
]
