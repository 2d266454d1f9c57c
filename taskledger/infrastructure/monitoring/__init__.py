"""Prometheus metrics for the task ledger."""

from taskledger.infrastructure.monitoring.ledger_metrics import (
    METRICS_CONTENT_TYPE,
    LedgerMetricsCollector,
)

__all__: list[str] = ["LedgerMetricsCollector", "METRICS_CONTENT_TYPE"]
