"""Ledger genesis.

Runs exactly once per ledger. It mints the shared TaskBoard with zeroed
counters and the single AdminCap, and hands the credential to the
deployer. No audit record is emitted for genesis.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger
from uuid6 import uuid7

from taskledger.application.ports.ledger_entity_store import LedgerEntityStoreProtocol
from taskledger.domain.errors.ledger import GenesisAlreadyPerformedError
from taskledger.domain.models.admin_cap import AdminCap, mint_admin_cap
from taskledger.domain.models.task_board import TaskBoard

logger = get_logger(__name__)


@dataclass(frozen=True)
class GenesisResult:
    """What genesis hands back to the deployer.

    Attributes:
        board: The freshly minted board.
        admin_cap: The only AdminCap this ledger will ever mint.
    """

    board: TaskBoard
    admin_cap: AdminCap


async def perform_genesis(store: LedgerEntityStoreProtocol) -> GenesisResult:
    """Mint the board and the admin credential into ``store``.

    Raises:
        GenesisAlreadyPerformedError: If the store already holds a board.
    """
    existing = await store.get_board()
    if existing is not None:
        logger.warning("genesis_rejected", board_id=str(existing.id))
        raise GenesisAlreadyPerformedError(existing.id)

    board = TaskBoard(id=uuid7())
    async with store.acquire(board.id):
        await store.commit(board=board)
    admin_cap = mint_admin_cap(uuid7())
    await store.register_admin_cap(admin_cap.id)

    logger.info(
        "genesis_completed",
        board_id=str(board.id),
        admin_cap_id=str(admin_cap.id),
    )
    return GenesisResult(board=board, admin_cap=admin_cap)
