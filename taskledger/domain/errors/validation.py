"""Validation errors for malformed creation input.

Raised by task creation before any state is touched:
- EmptyTitleError: task title is the empty string
- InvalidRewardPointsError: reward is zero or negative
- TitleTooLongError: title exceeds the configured ceiling (service only)
"""

from __future__ import annotations

from taskledger.domain.exceptions import TaskLedgerError


class ValidationError(TaskLedgerError):
    """Base error for rejected creation input."""

    code = "ValidationError"


class EmptyTitleError(ValidationError):
    """Raised when a task is created with an empty title."""

    code = "EmptyTitle"

    def __init__(self) -> None:
        super().__init__("EmptyTitle: task title must not be empty")


class InvalidRewardPointsError(ValidationError):
    """Raised when a task is created with a non-positive reward.

    Attributes:
        reward_points: The rejected reward value.
    """

    code = "InvalidRewardPoints"

    def __init__(self, reward_points: int) -> None:
        """Initialize the error.

        Args:
            reward_points: The rejected reward value.
        """
        self.reward_points = reward_points
        super().__init__(
            f"InvalidRewardPoints: reward_points must be a positive integer, got {reward_points!r}"
        )


class TitleTooLongError(ValidationError):
    """Raised when a title exceeds the configured maximum length.

    Attributes:
        length: Length of the rejected title.
        max_length: Configured ceiling.
    """

    code = "TitleTooLong"

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"TitleTooLong: title has {length} characters, maximum is {max_length}"
        )
