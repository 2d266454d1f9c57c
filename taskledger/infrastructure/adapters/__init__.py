"""Infrastructure adapters implementing application and domain ports."""

from taskledger.infrastructure.adapters.in_memory_entity_store import LedgerEntityStore
from taskledger.infrastructure.adapters.in_memory_event_log import InMemoryEventLog
from taskledger.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["InMemoryEventLog", "LedgerEntityStore", "SystemTimeAuthority"]
