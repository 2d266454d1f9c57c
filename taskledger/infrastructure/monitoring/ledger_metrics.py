"""Ledger metrics for Prometheus exposition.

Counters are fed by TaskLedgerService from the audit records of each
committed operation, and from the error code of each rejected one.

Counters:
- ledger_tasks_created_total
- ledger_tasks_assigned_total{origin}      origin = creator | admin
- ledger_tasks_completed_total
- ledger_points_awarded_total
- ledger_level_ups_total{level}
- ledger_operation_rejections_total{code}
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, generate_latest

from taskledger.domain.events.event import LedgerEvent
from taskledger.domain.events.profile import UserLeveledUpEvent
from taskledger.domain.events.task import (
    TaskAssignedEvent,
    TaskCompletedEvent,
    TaskCreatedEvent,
)

# Content type for Prometheus text exposition
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class LedgerMetricsCollector:
    """Collects task ledger metrics for Prometheus.

    Every counter carries ``service`` and ``environment`` labels.
    """

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        *,
        service_name: str = "task-ledger",
        environment: str = "production",
    ) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
            service_name: Value of the ``service`` label.
            environment: Value of the ``environment`` label.
        """
        self._registry = registry or CollectorRegistry()
        self._service_name = service_name
        self._environment = environment

        self.tasks_created_total = Counter(
            name="ledger_tasks_created_total",
            documentation="Tasks created",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.tasks_assigned_total = Counter(
            name="ledger_tasks_assigned_total",
            documentation="Task assignments by origin (creator or admin override)",
            labelnames=["origin", "service", "environment"],
            registry=self._registry,
        )
        self.tasks_completed_total = Counter(
            name="ledger_tasks_completed_total",
            documentation="Tasks completed",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.points_awarded_total = Counter(
            name="ledger_points_awarded_total",
            documentation="Points awarded on task completion",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.level_ups_total = Counter(
            name="ledger_level_ups_total",
            documentation="Profile level-ups by reached level",
            labelnames=["level", "service", "environment"],
            registry=self._registry,
        )
        self.operation_rejections_total = Counter(
            name="ledger_operation_rejections_total",
            documentation="Rejected ledger operations by error code",
            labelnames=["code", "service", "environment"],
            registry=self._registry,
        )

    def _labels(self) -> dict[str, str]:
        return {"service": self._service_name, "environment": self._environment}

    def record_event(self, event: LedgerEvent) -> None:
        """Update the counters matching one committed audit record.

        ProfileCreated records have no counter and are ignored.

        Args:
            event: A record that was flushed to the event sink.
        """
        labels = self._labels()
        if isinstance(event, TaskCreatedEvent):
            self.tasks_created_total.labels(**labels).inc()
        elif isinstance(event, TaskAssignedEvent):
            origin = "admin" if event.is_admin_action else "creator"
            self.tasks_assigned_total.labels(origin=origin, **labels).inc()
        elif isinstance(event, TaskCompletedEvent):
            self.tasks_completed_total.labels(**labels).inc()
            self.points_awarded_total.labels(**labels).inc(event.points_awarded)
        elif isinstance(event, UserLeveledUpEvent):
            self.level_ups_total.labels(level=str(event.new_level), **labels).inc()

    def record_rejection(self, code: str) -> None:
        """Count one rejected operation.

        Args:
            code: Stable error code of the rejection.
        """
        self.operation_rejections_total.labels(code=code, **self._labels()).inc()

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry."""
        return self._registry

    def generate_metrics(self) -> bytes:
        """Render the registry in Prometheus text exposition format."""
        return generate_latest(self._registry)
