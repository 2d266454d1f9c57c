"""Common shape of ledger audit records.

Every audit record is a frozen dataclass snapshot taken at the moment of
emission. It never references a live entity, so later transitions of the
same task or profile cannot change what was recorded.
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol
from uuid import UUID

# Schema version stamped into every serialized payload
LEDGER_EVENT_SCHEMA_VERSION: str = "1.0.0"


class LedgerEvent(Protocol):
    """Structural type shared by all audit record payloads.

    Attributes:
        event_type: Stable dotted identifier, e.g. ``task.created``.
    """

    event_type: ClassVar[str]

    @property
    def subject_id(self) -> UUID:
        """Id of the entity the record is about (task or profile)."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        ...
