"""Application services for the task ledger."""

from taskledger.application.services.base import LoggingMixin
from taskledger.application.services.pending_events import PendingEvents
from taskledger.application.services.task_ledger_service import TaskLedgerService

__all__: list[str] = ["LoggingMixin", "PendingEvents", "TaskLedgerService"]
