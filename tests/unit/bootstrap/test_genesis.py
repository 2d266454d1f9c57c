"""Unit tests for ledger genesis and runtime wiring."""

from collections.abc import Iterator

import pytest

from taskledger.bootstrap.genesis import GenesisResult, perform_genesis
from taskledger.bootstrap.ledger import (
    build_ledger,
    get_ledger_runtime,
    reset_ledger_runtime,
    set_ledger_runtime,
)
from taskledger.config.ledger_config import LedgerConfig
from taskledger.domain.errors import GenesisAlreadyPerformedError
from taskledger.infrastructure.adapters.in_memory_entity_store import LedgerEntityStore
from tests.helpers import FakeTimeAuthority


@pytest.fixture(autouse=True)
def _reset_runtime() -> Iterator[None]:
    yield
    reset_ledger_runtime()


class TestPerformGenesis:
    @pytest.mark.asyncio
    async def test_mints_zeroed_board_and_live_cap(
        self, genesis: GenesisResult, entity_store: LedgerEntityStore
    ) -> None:
        assert genesis.board.total_tasks_created == 0
        assert genesis.board.total_tasks_completed == 0
        assert genesis.admin_cap.is_live
        assert await entity_store.get_board() == genesis.board
        assert await entity_store.get_admin_cap_id() == genesis.admin_cap.id

    @pytest.mark.asyncio
    async def test_second_genesis_rejected(
        self, genesis: GenesisResult, entity_store: LedgerEntityStore
    ) -> None:
        with pytest.raises(GenesisAlreadyPerformedError) as exc_info:
            await perform_genesis(entity_store)

        assert exc_info.value.board_id == genesis.board.id
        assert await entity_store.get_admin_cap_id() == genesis.admin_cap.id


class TestBuildLedger:
    @pytest.mark.asyncio
    async def test_build_wires_components(self) -> None:
        runtime = await build_ledger(
            LedgerConfig(environment="development"),
            time_authority=FakeTimeAuthority(),
        )

        assert runtime.metrics is not None
        assert runtime.admin_cap.is_live
        assert (await runtime.service.get_board()).total_tasks_created == 0
        assert runtime.event_log.count() == 0

    @pytest.mark.asyncio
    async def test_metrics_disabled(self) -> None:
        runtime = await build_ledger(
            LedgerConfig(environment="development", metrics_enabled=False)
        )

        assert runtime.metrics is None

    @pytest.mark.asyncio
    async def test_runtime_override_and_reset(self) -> None:
        runtime = await build_ledger(LedgerConfig(environment="development"))

        set_ledger_runtime(runtime)

        assert await get_ledger_runtime() is runtime
        reset_ledger_runtime()
        assert await get_ledger_runtime() is not runtime
