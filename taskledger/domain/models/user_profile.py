"""User profile domain model and the level threshold table.

A UserProfile accumulates completed tasks and points for one participant.
Level is derived, never tracked incrementally: it is recomputed from
``total_points_earned`` on every award. Both counters share the board's
COUNTER_CEILING and raise CounterOverflowError instead of wrapping.

Level table:
    points >= 1000 -> 5
    points >=  600 -> 4
    points >=  300 -> 3
    points >=  100 -> 2
    otherwise      -> 1
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from uuid import UUID

from taskledger.domain.errors.ledger import CounterOverflowError
from taskledger.domain.models.task_board import COUNTER_CEILING

BASE_LEVEL: int = 1
MAX_LEVEL: int = 5

# (threshold, level) pairs, highest tier first
LEVEL_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (1000, 5),
    (600, 4),
    (300, 3),
    (100, 2),
)


def level_for_points(total_points: int) -> int:
    """Compute the level reached with ``total_points`` cumulative points.

    Thresholds are inclusive: exactly 100 points is level 2.

    Args:
        total_points: Cumulative points earned.

    Returns:
        Level between BASE_LEVEL and MAX_LEVEL.

    Example:
        >>> level_for_points(99)
        1
        >>> level_for_points(300)
        3
    """
    for threshold, level in LEVEL_THRESHOLDS:
        if total_points >= threshold:
            return level
    return BASE_LEVEL


@dataclass(frozen=True, eq=True)
class UserProfile:
    """Per-participant accumulator of completed tasks, points and level.

    Attributes:
        id: UUIDv7 identifier, immutable.
        owner: Participant this profile belongs to, immutable.
        total_tasks_completed: Number of tasks completed (never decreases).
        total_points_earned: Cumulative points (never decreases).
        level: Derived level 1..5 (never decreases).
    """

    id: UUID
    owner: UUID
    total_tasks_completed: int = field(default=0)
    total_points_earned: int = field(default=0)
    level: int = field(default=BASE_LEVEL)

    def __post_init__(self) -> None:
        """Validate counter and level ranges."""
        if self.total_tasks_completed < 0:
            raise ValueError(
                f"total_tasks_completed must be non-negative, "
                f"got {self.total_tasks_completed}"
            )
        if self.total_points_earned < 0:
            raise ValueError(
                f"total_points_earned must be non-negative, "
                f"got {self.total_points_earned}"
            )
        if not BASE_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(
                f"level must be between {BASE_LEVEL} and {MAX_LEVEL}, got {self.level}"
            )

    def with_award(self, points: int) -> UserProfile:
        """Return a copy with one more completed task and ``points`` added.

        The level is recomputed from the new point total and only ever
        moves up.

        Args:
            points: Points awarded for the completed task.

        Returns:
            New UserProfile with updated counters and level.

        Raises:
            CounterOverflowError: If either counter would pass COUNTER_CEILING.
        """
        total_points = self.total_points_earned + points
        if total_points > COUNTER_CEILING:
            raise CounterOverflowError("total_points_earned", COUNTER_CEILING)
        if self.total_tasks_completed >= COUNTER_CEILING:
            raise CounterOverflowError("total_tasks_completed", COUNTER_CEILING)
        return replace(
            self,
            total_tasks_completed=self.total_tasks_completed + 1,
            total_points_earned=total_points,
            level=max(self.level, level_for_points(total_points)),
        )
