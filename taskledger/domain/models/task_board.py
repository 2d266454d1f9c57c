"""Task board (registry) domain model.

The board is the single shared, platform-wide tally of tasks created and
completed. It is minted once at genesis and never deleted.

Invariants:
- total_tasks_completed <= total_tasks_created
- Both counters only increase, one step at a time
- Counters never wrap: passing COUNTER_CEILING raises CounterOverflowError
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from uuid import UUID

from taskledger.domain.errors.ledger import CounterOverflowError

# Unsigned 64-bit ceiling
COUNTER_CEILING: int = 2**64 - 1


def _checked_increment(value: int, counter: str) -> int:
    if value >= COUNTER_CEILING:
        raise CounterOverflowError(counter, COUNTER_CEILING)
    return value + 1


@dataclass(frozen=True, eq=True)
class TaskBoard:
    """Shared counter pair tracking platform-wide statistics.

    Attributes:
        id: UUIDv7 identifier, immutable.
        total_tasks_created: Tasks created since genesis.
        total_tasks_completed: Tasks completed since genesis.
    """

    id: UUID
    total_tasks_created: int = field(default=0)
    total_tasks_completed: int = field(default=0)

    def __post_init__(self) -> None:
        """Validate counter ranges."""
        for name in ("total_tasks_created", "total_tasks_completed"):
            value = getattr(self, name)
            if not 0 <= value <= COUNTER_CEILING:
                raise ValueError(f"{name} must be within 0..{COUNTER_CEILING}, got {value}")
        if self.total_tasks_completed > self.total_tasks_created:
            raise ValueError(
                f"total_tasks_completed ({self.total_tasks_completed}) cannot exceed "
                f"total_tasks_created ({self.total_tasks_created})"
            )

    def increment_created(self) -> TaskBoard:
        """Return a copy with one more created task.

        Raises:
            CounterOverflowError: If the created counter is at its ceiling.
        """
        return replace(
            self,
            total_tasks_created=_checked_increment(
                self.total_tasks_created, "total_tasks_created"
            ),
        )

    def increment_completed(self) -> TaskBoard:
        """Return a copy with one more completed task.

        Raises:
            CounterOverflowError: If the completed counter is at its ceiling.
        """
        return replace(
            self,
            total_tasks_completed=_checked_increment(
                self.total_tasks_completed, "total_tasks_completed"
            ),
        )
