"""Time Authority Protocol - interface for consistent timestamp provisioning.

Components that stamp times (the event log's ``recorded_at``) inject a
TimeAuthorityProtocol implementation instead of calling datetime.now()
directly, so tests can freeze and advance time.

For production:
    Use SystemTimeAuthority from taskledger/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority."""

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC recommended)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time as a timezone-aware datetime."""
        ...
