"""Bootstrap wiring for a complete task ledger.

``build_ledger`` assembles config, clock, entity store, event log,
optional metrics and the service, then runs genesis. The resulting
runtime is also kept as a process-wide default reachable through
``get_ledger_runtime``.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from taskledger.application.ports.time_authority import TimeAuthorityProtocol
from taskledger.application.services.task_ledger_service import TaskLedgerService
from taskledger.bootstrap.genesis import perform_genesis
from taskledger.config.ledger_config import LedgerConfig
from taskledger.domain.models.admin_cap import AdminCap
from taskledger.infrastructure.adapters.in_memory_entity_store import LedgerEntityStore
from taskledger.infrastructure.adapters.in_memory_event_log import InMemoryEventLog
from taskledger.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from taskledger.infrastructure.monitoring.ledger_metrics import LedgerMetricsCollector
from taskledger.infrastructure.observability.logging import configure_structlog

logger = get_logger(__name__)


@dataclass(frozen=True)
class LedgerRuntime:
    """A wired ledger after genesis.

    Attributes:
        config: Configuration the ledger was built with.
        store: Entity arena.
        event_log: Append-only audit log.
        metrics: Prometheus collector, None when metrics are disabled.
        service: Entry point for all operations.
        admin_cap: The genesis credential, handed to the deployer.
    """

    config: LedgerConfig
    store: LedgerEntityStore
    event_log: InMemoryEventLog
    metrics: LedgerMetricsCollector | None
    service: TaskLedgerService
    admin_cap: AdminCap


_runtime: LedgerRuntime | None = None


async def build_ledger(
    config: LedgerConfig | None = None,
    *,
    time_authority: TimeAuthorityProtocol | None = None,
    configure_logging: bool = False,
) -> LedgerRuntime:
    """Wire a fresh ledger and run its genesis.

    Args:
        config: Runtime configuration (read from the environment when None).
        time_authority: Clock for the event log (system clock when None).
        configure_logging: Also configure structlog for ``config.environment``.

    Returns:
        LedgerRuntime holding every wired component.
    """
    config = config or LedgerConfig.from_environment()
    if configure_logging:
        configure_structlog(config.environment)

    store = LedgerEntityStore()
    event_log = InMemoryEventLog(time_authority or SystemTimeAuthority())
    metrics = (
        LedgerMetricsCollector(
            service_name=config.service_name,
            environment=config.environment,
        )
        if config.metrics_enabled
        else None
    )
    service = TaskLedgerService(
        store=store,
        event_sink=event_log,
        metrics=metrics,
        config=config,
    )
    genesis = await perform_genesis(store)

    logger.info(
        "ledger_built",
        environment=config.environment,
        metrics_enabled=config.metrics_enabled,
        board_id=str(genesis.board.id),
    )
    return LedgerRuntime(
        config=config,
        store=store,
        event_log=event_log,
        metrics=metrics,
        service=service,
        admin_cap=genesis.admin_cap,
    )


async def get_ledger_runtime() -> LedgerRuntime:
    """Get the process-wide ledger, building it on first use."""
    global _runtime
    if _runtime is None:
        _runtime = await build_ledger()
    return _runtime


def set_ledger_runtime(runtime: LedgerRuntime) -> None:
    """Set the process-wide ledger (testing/override)."""
    global _runtime
    _runtime = runtime


def reset_ledger_runtime() -> None:
    """Reset the process-wide ledger (testing cleanup)."""
    global _runtime
    _runtime = None
