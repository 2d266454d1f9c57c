"""
Domain events for the task ledger.

Audit record payloads emitted synchronously by successful mutations.
All events are immutable snapshots.
"""

from taskledger.domain.events.event import LEDGER_EVENT_SCHEMA_VERSION, LedgerEvent
from taskledger.domain.events.profile import (
    PROFILE_CREATED_EVENT_TYPE,
    USER_LEVELED_UP_EVENT_TYPE,
    ProfileCreatedEvent,
    UserLeveledUpEvent,
)
from taskledger.domain.events.task import (
    ADMIN_ACTION_ORIGINATOR,
    TASK_ASSIGNED_EVENT_TYPE,
    TASK_COMPLETED_EVENT_TYPE,
    TASK_CREATED_EVENT_TYPE,
    TaskAssignedEvent,
    TaskCompletedEvent,
    TaskCreatedEvent,
)

__all__: list[str] = [
    "ADMIN_ACTION_ORIGINATOR",
    "LEDGER_EVENT_SCHEMA_VERSION",
    "LedgerEvent",
    "PROFILE_CREATED_EVENT_TYPE",
    "ProfileCreatedEvent",
    "TASK_ASSIGNED_EVENT_TYPE",
    "TASK_COMPLETED_EVENT_TYPE",
    "TASK_CREATED_EVENT_TYPE",
    "TaskAssignedEvent",
    "TaskCompletedEvent",
    "TaskCreatedEvent",
    "USER_LEVELED_UP_EVENT_TYPE",
    "UserLeveledUpEvent",
]
