"""Unit tests for LedgerMetricsCollector."""

from uuid import uuid4

import pytest
from prometheus_client import CollectorRegistry

from taskledger.domain.events import (
    ADMIN_ACTION_ORIGINATOR,
    ProfileCreatedEvent,
    TaskAssignedEvent,
    TaskCompletedEvent,
    TaskCreatedEvent,
    UserLeveledUpEvent,
)
from taskledger.infrastructure.monitoring.ledger_metrics import LedgerMetricsCollector

LABELS = {"service": "task-ledger", "environment": "development"}


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def collector(registry: CollectorRegistry) -> LedgerMetricsCollector:
    return LedgerMetricsCollector(registry, environment="development")


def _sample(registry: CollectorRegistry, name: str, **labels: str) -> float | None:
    return registry.get_sample_value(name, {**LABELS, **labels})


class TestRecordEvent:
    def test_task_created(
        self, collector: LedgerMetricsCollector, registry: CollectorRegistry
    ) -> None:
        collector.record_event(
            TaskCreatedEvent(task_id=uuid4(), creator=uuid4(), title="t", reward_points=1)
        )

        assert _sample(registry, "ledger_tasks_created_total") == 1.0

    def test_assignment_origin_label(
        self, collector: LedgerMetricsCollector, registry: CollectorRegistry
    ) -> None:
        collector.record_event(
            TaskAssignedEvent(task_id=uuid4(), assignee=uuid4(), assigned_by=uuid4())
        )
        collector.record_event(
            TaskAssignedEvent(
                task_id=uuid4(), assignee=uuid4(), assigned_by=ADMIN_ACTION_ORIGINATOR
            )
        )

        assert _sample(registry, "ledger_tasks_assigned_total", origin="creator") == 1.0
        assert _sample(registry, "ledger_tasks_assigned_total", origin="admin") == 1.0

    def test_completion_counts_points(
        self, collector: LedgerMetricsCollector, registry: CollectorRegistry
    ) -> None:
        collector.record_event(
            TaskCompletedEvent(task_id=uuid4(), completed_by=uuid4(), points_awarded=40)
        )
        collector.record_event(
            TaskCompletedEvent(task_id=uuid4(), completed_by=uuid4(), points_awarded=60)
        )

        assert _sample(registry, "ledger_tasks_completed_total") == 2.0
        assert _sample(registry, "ledger_points_awarded_total") == 100.0

    def test_level_up_by_level(
        self, collector: LedgerMetricsCollector, registry: CollectorRegistry
    ) -> None:
        collector.record_event(
            UserLeveledUpEvent(profile_id=uuid4(), owner=uuid4(), new_level=4, total_points=650)
        )

        assert _sample(registry, "ledger_level_ups_total", level="4") == 1.0

    def test_profile_created_has_no_counter(
        self, collector: LedgerMetricsCollector, registry: CollectorRegistry
    ) -> None:
        collector.record_event(ProfileCreatedEvent(profile_id=uuid4(), owner=uuid4()))

        assert _sample(registry, "ledger_tasks_created_total") is None


class TestRecordRejection:
    def test_rejection_by_code(
        self, collector: LedgerMetricsCollector, registry: CollectorRegistry
    ) -> None:
        collector.record_rejection("NotCreator")
        collector.record_rejection("NotCreator")

        assert (
            _sample(registry, "ledger_operation_rejections_total", code="NotCreator")
            == 2.0
        )


class TestExposition:
    def test_generate_metrics_renders_counters(
        self, collector: LedgerMetricsCollector
    ) -> None:
        collector.record_rejection("EmptyTitle")

        output = collector.generate_metrics()

        assert b"ledger_operation_rejections_total" in output

    def test_separate_registries_are_isolated(self) -> None:
        first = LedgerMetricsCollector()
        second = LedgerMetricsCollector()

        first.record_rejection("NotAdmin")

        assert first.get_registry() is not second.get_registry()
        assert (
            second.get_registry().get_sample_value(
                "ledger_operation_rejections_total",
                {"code": "NotAdmin", "service": "task-ledger", "environment": "production"},
            )
            is None
        )
