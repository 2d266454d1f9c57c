"""Test helpers for task ledger tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    RecordingSink: EventSink that keeps emitted records in memory

Usage:
    from tests.helpers import FakeTimeAuthority, RecordingSink
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.recording_sink import RecordingSink

__all__ = ["FakeTimeAuthority", "RecordingSink"]
