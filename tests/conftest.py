"""
Pytest configuration and shared fixtures for task ledger tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from uuid import UUID, uuid4

import pytest

from taskledger.application.services.task_ledger_service import TaskLedgerService
from taskledger.bootstrap.genesis import GenesisResult, perform_genesis
from taskledger.config.ledger_config import LedgerConfig
from taskledger.infrastructure.adapters.in_memory_entity_store import LedgerEntityStore
from taskledger.infrastructure.adapters.in_memory_event_log import InMemoryEventLog
from taskledger.infrastructure.monitoring.ledger_metrics import LedgerMetricsCollector
from tests.helpers import FakeTimeAuthority, RecordingSink


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from taskledger import __version__

    return __version__


# =============================================================================
# Participants
# =============================================================================


@pytest.fixture
def alice() -> UUID:
    """A task creator."""
    return uuid4()


@pytest.fixture
def bob() -> UUID:
    """A task assignee."""
    return uuid4()


@pytest.fixture
def carol() -> UUID:
    """A bystander with no role on the task."""
    return uuid4()


# =============================================================================
# Infrastructure
# =============================================================================


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Frozen clock at 2026-01-01T00:00:00 UTC."""
    return FakeTimeAuthority()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def entity_store() -> LedgerEntityStore:
    return LedgerEntityStore()


@pytest.fixture
def event_log(fake_time_authority: FakeTimeAuthority) -> InMemoryEventLog:
    return InMemoryEventLog(time_authority=fake_time_authority)


@pytest.fixture
def ledger_metrics() -> LedgerMetricsCollector:
    """Collector on its own registry, isolated per test."""
    return LedgerMetricsCollector(environment="development")


@pytest.fixture
async def genesis(entity_store: LedgerEntityStore) -> GenesisResult:
    """Board and AdminCap minted into the entity store."""
    return await perform_genesis(entity_store)


@pytest.fixture
def ledger_service(
    genesis: GenesisResult,
    entity_store: LedgerEntityStore,
    event_log: InMemoryEventLog,
    ledger_metrics: LedgerMetricsCollector,
) -> TaskLedgerService:
    """Service over a store that has already run genesis."""
    return TaskLedgerService(
        store=entity_store,
        event_sink=event_log,
        metrics=ledger_metrics,
        config=LedgerConfig(environment="development"),
    )
