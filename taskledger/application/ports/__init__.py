"""Application ports - interfaces implemented by infrastructure adapters."""

from taskledger.application.ports.ledger_entity_store import LedgerEntityStoreProtocol
from taskledger.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = ["LedgerEntityStoreProtocol", "TimeAuthorityProtocol"]
