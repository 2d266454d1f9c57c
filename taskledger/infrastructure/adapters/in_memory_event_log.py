"""In-memory append-only event log.

Implements the EventSink port. Every emitted audit record becomes a
hash-chained LedgerEntry. There is no update and no delete: the only
write is ``emit``.
"""

from __future__ import annotations

from uuid import UUID

from structlog import get_logger

from taskledger.application.ports.time_authority import TimeAuthorityProtocol
from taskledger.domain.events.event import LedgerEvent
from taskledger.domain.events.hash_utils import GENESIS_HASH, compute_content_hash
from taskledger.domain.events.ledger_entry import LedgerEntry

logger = get_logger(__name__)


class InMemoryEventLog:
    """Append-only, hash-chained audit log held in memory.

    Attributes:
        _entries: Entries in sequence order.
        _time: Source of ``recorded_at`` timestamps.
    """

    def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
        self._entries: list[LedgerEntry] = []
        self._time = time_authority

    def emit(self, event: LedgerEvent) -> None:
        """Append one audit record to the log.

        Args:
            event: Immutable event payload.
        """
        payload = event.to_dict()
        prev_hash = self._entries[-1].content_hash if self._entries else GENESIS_HASH
        entry = LedgerEntry(
            sequence=len(self._entries) + 1,
            event_type=event.event_type,
            subject_id=event.subject_id,
            payload=payload,
            recorded_at=self._time.utcnow(),
            prev_hash=prev_hash,
            content_hash=compute_content_hash(event.event_type, payload),
        )
        self._entries.append(entry)
        logger.debug(
            "ledger_event_recorded",
            sequence=entry.sequence,
            event_type=entry.event_type,
            subject_id=str(entry.subject_id),
        )

    def entries(self) -> tuple[LedgerEntry, ...]:
        """Return all entries in sequence order."""
        return tuple(self._entries)

    def entries_of_type(self, event_type: str) -> tuple[LedgerEntry, ...]:
        """Return entries with the given event type, in sequence order."""
        return tuple(e for e in self._entries if e.event_type == event_type)

    def entries_for_entity(self, entity_id: UUID) -> tuple[LedgerEntry, ...]:
        """Return entries about one task or profile, in sequence order."""
        return tuple(e for e in self._entries if e.subject_id == entity_id)

    def count(self) -> int:
        return len(self._entries)

    def head(self) -> LedgerEntry | None:
        """Return the most recent entry, or None for an empty log."""
        return self._entries[-1] if self._entries else None

    def verify_chain(self) -> bool:
        """Check sequence continuity, content hashes and prev_hash links.

        Returns:
            True if the whole log is intact.
        """
        prev_hash = GENESIS_HASH
        for expected_sequence, entry in enumerate(self._entries, start=1):
            if entry.sequence != expected_sequence:
                logger.warning(
                    "ledger_chain_sequence_gap",
                    expected=expected_sequence,
                    actual=entry.sequence,
                )
                return False
            if entry.prev_hash != prev_hash:
                logger.warning("ledger_chain_link_broken", sequence=entry.sequence)
                return False
            recomputed = compute_content_hash(entry.event_type, dict(entry.payload))
            if recomputed != entry.content_hash:
                logger.warning("ledger_chain_content_mismatch", sequence=entry.sequence)
                return False
            prev_hash = entry.content_hash
        return True
