"""Two-phase event emission.

Lifecycle operations emit into a PendingEvents buffer. The service commits
the new entity versions and only then flushes the buffer to the real
sink, so an operation that fails at any point before the commit leaves no
record behind.
"""

from __future__ import annotations

from taskledger.domain.events.event import LedgerEvent
from taskledger.domain.ports.event_sink import EventSink


class PendingEvents:
    """Event sink that holds records until they are flushed."""

    def __init__(self) -> None:
        self._events: list[LedgerEvent] = []

    def emit(self, event: LedgerEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> tuple[LedgerEvent, ...]:
        return tuple(self._events)

    def flush_to(self, sink: EventSink) -> tuple[LedgerEvent, ...]:
        """Emit every buffered record to ``sink`` in order, then clear.

        Returns:
            The records that were flushed.
        """
        flushed = tuple(self._events)
        self._events.clear()
        for event in flushed:
            sink.emit(event)
        return flushed
