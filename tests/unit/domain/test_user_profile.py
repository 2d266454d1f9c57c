"""Unit tests for UserProfile and the level threshold table."""

from uuid import uuid4

import pytest

from taskledger.domain.errors import CounterOverflowError
from taskledger.domain.models.task_board import COUNTER_CEILING
from taskledger.domain.models.user_profile import (
    BASE_LEVEL,
    LEVEL_THRESHOLDS,
    MAX_LEVEL,
    UserProfile,
    level_for_points,
)


class TestLevelForPoints:
    @pytest.mark.parametrize(
        ("points", "expected"),
        [
            (0, 1),
            (99, 1),
            (100, 2),
            (299, 2),
            (300, 3),
            (599, 3),
            (600, 4),
            (999, 4),
            (1000, 5),
            (10_000_000, 5),
        ],
    )
    def test_thresholds_are_inclusive(self, points: int, expected: int) -> None:
        assert level_for_points(points) == expected

    def test_table_is_highest_tier_first(self) -> None:
        thresholds = [threshold for threshold, _ in LEVEL_THRESHOLDS]
        assert thresholds == sorted(thresholds, reverse=True)

    def test_levels_span_base_to_max(self) -> None:
        levels = {level for _, level in LEVEL_THRESHOLDS}
        assert max(levels) == MAX_LEVEL
        assert BASE_LEVEL not in levels


class TestUserProfileValidation:
    def test_defaults(self) -> None:
        profile = UserProfile(id=uuid4(), owner=uuid4())

        assert profile.total_tasks_completed == 0
        assert profile.total_points_earned == 0
        assert profile.level == BASE_LEVEL

    @pytest.mark.parametrize("level", [0, 6])
    def test_level_out_of_range_rejected(self, level: int) -> None:
        with pytest.raises(ValueError, match="level"):
            UserProfile(id=uuid4(), owner=uuid4(), level=level)

    def test_negative_points_rejected(self) -> None:
        with pytest.raises(ValueError, match="total_points_earned"):
            UserProfile(id=uuid4(), owner=uuid4(), total_points_earned=-1)

    def test_negative_completed_rejected(self) -> None:
        with pytest.raises(ValueError, match="total_tasks_completed"):
            UserProfile(id=uuid4(), owner=uuid4(), total_tasks_completed=-1)


class TestWithAward:
    def test_award_accumulates(self) -> None:
        profile = UserProfile(id=uuid4(), owner=uuid4())

        updated = profile.with_award(40).with_award(70)

        assert updated.total_tasks_completed == 2
        assert updated.total_points_earned == 110
        assert updated.level == 2

    def test_award_can_skip_tiers(self) -> None:
        profile = UserProfile(id=uuid4(), owner=uuid4())

        updated = profile.with_award(1000)

        assert updated.level == 5

    def test_award_leaves_original_untouched(self) -> None:
        profile = UserProfile(id=uuid4(), owner=uuid4())

        profile.with_award(500)

        assert profile.total_points_earned == 0
        assert profile.level == 1

    def test_level_never_decreases(self) -> None:
        # A stored level above the table value stays where it is.
        profile = UserProfile(id=uuid4(), owner=uuid4(), total_points_earned=10, level=3)

        updated = profile.with_award(5)

        assert updated.level == 3

    def test_points_past_ceiling_rejected(self) -> None:
        profile = UserProfile(
            id=uuid4(), owner=uuid4(), total_points_earned=COUNTER_CEILING, level=5
        )

        with pytest.raises(CounterOverflowError) as exc_info:
            profile.with_award(1)

        assert exc_info.value.counter == "total_points_earned"

    def test_points_up_to_ceiling_accepted(self) -> None:
        profile = UserProfile(
            id=uuid4(), owner=uuid4(), total_points_earned=COUNTER_CEILING - 1, level=5
        )

        updated = profile.with_award(1)

        assert updated.total_points_earned == COUNTER_CEILING

    def test_completed_count_past_ceiling_rejected(self) -> None:
        profile = UserProfile(id=uuid4(), owner=uuid4(), total_tasks_completed=COUNTER_CEILING)

        with pytest.raises(CounterOverflowError) as exc_info:
            profile.with_award(1)

        assert exc_info.value.counter == "total_tasks_completed"
