"""
Domain layer - pure business logic for the task ledger.

This layer contains:
- Domain models (Task, UserProfile, TaskBoard, AdminCap)
- Domain events (immutable audit record payloads)
- Ports (the event sink interface)
- Lifecycle operations (guards and transitions)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure,
config or bootstrap.
"""

from taskledger.domain.exceptions import TaskLedgerError

__all__: list[str] = ["TaskLedgerError"]
