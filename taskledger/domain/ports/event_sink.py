"""Event sink port.

Lifecycle operations receive a sink and call ``emit`` once per audit
record, after every guard has passed. The sink decides the transport;
the operations only guarantee that nothing is emitted for a failed call.
"""

from __future__ import annotations

from typing import Protocol

from taskledger.domain.events.event import LedgerEvent


class EventSink(Protocol):
    """Append-only receiver of audit records."""

    def emit(self, event: LedgerEvent) -> None:
        """Record one audit event.

        Args:
            event: Immutable event payload.
        """
        ...
