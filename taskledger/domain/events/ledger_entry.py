"""Ledger entry: an audit record as stored in the append-only event log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping
from uuid import UUID


@dataclass(frozen=True, eq=True)
class LedgerEntry:
    """One stored audit record.

    Attributes:
        sequence: Position in the log, starting at 1, gap-free.
        event_type: Stable event type identifier.
        subject_id: Task or profile the record is about.
        payload: Read-only serialized event payload.
        recorded_at: When the log accepted the record (UTC).
        prev_hash: content_hash of the previous entry (GENESIS_HASH for 1).
        content_hash: SHA-256 over event_type and payload.
    """

    sequence: int
    event_type: str
    subject_id: UUID
    payload: Mapping[str, Any]
    recorded_at: datetime
    prev_hash: str
    content_hash: str

    def __post_init__(self) -> None:
        if self.sequence < 1:
            raise ValueError(f"sequence must start at 1, got {self.sequence}")
        if not isinstance(self.payload, MappingProxyType):
            object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))
