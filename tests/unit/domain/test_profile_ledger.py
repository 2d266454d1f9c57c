"""Unit tests for profile creation and awards."""

from uuid import UUID, uuid4

from taskledger.domain.events import ProfileCreatedEvent, UserLeveledUpEvent
from taskledger.domain.models.user_profile import UserProfile
from taskledger.domain.services.profile_ledger import award, create_profile
from tests.helpers import RecordingSink


class TestCreateProfile:
    def test_creates_zeroed_level_one_profile(
        self, alice: UUID, recording_sink: RecordingSink
    ) -> None:
        profile = create_profile(alice, recording_sink)

        assert profile.owner == alice
        assert profile.total_tasks_completed == 0
        assert profile.total_points_earned == 0
        assert profile.level == 1

    def test_emits_profile_created(self, alice: UUID, recording_sink: RecordingSink) -> None:
        profile = create_profile(alice, recording_sink)

        assert recording_sink.events == [
            ProfileCreatedEvent(profile_id=profile.id, owner=alice)
        ]

    def test_same_participant_may_open_several_profiles(
        self, alice: UUID, recording_sink: RecordingSink
    ) -> None:
        first = create_profile(alice, recording_sink)
        second = create_profile(alice, recording_sink)

        assert first.id != second.id

    def test_explicit_id(self, alice: UUID, recording_sink: RecordingSink) -> None:
        profile_id = uuid4()

        assert create_profile(alice, recording_sink, profile_id=profile_id).id == profile_id


class TestAward:
    def test_no_record_without_level_change(
        self, alice: UUID, recording_sink: RecordingSink
    ) -> None:
        profile = UserProfile(id=uuid4(), owner=alice)

        updated = award(profile, 99, recording_sink)

        assert updated.level == 1
        assert recording_sink.events == []

    def test_crossing_threshold_exactly_levels_up(
        self, alice: UUID, recording_sink: RecordingSink
    ) -> None:
        profile = UserProfile(id=uuid4(), owner=alice, total_points_earned=99)

        updated = award(profile, 1, recording_sink)

        assert updated.level == 2
        assert recording_sink.events == [
            UserLeveledUpEvent(
                profile_id=profile.id, owner=alice, new_level=2, total_points=100
            )
        ]

    def test_staying_in_tier_emits_nothing(
        self, alice: UUID, recording_sink: RecordingSink
    ) -> None:
        profile = UserProfile(id=uuid4(), owner=alice, total_points_earned=300, level=3)

        award(profile, 200, recording_sink)

        assert recording_sink.events == []

    def test_max_level_is_sticky(self, alice: UUID, recording_sink: RecordingSink) -> None:
        profile = UserProfile(id=uuid4(), owner=alice, total_points_earned=1000, level=5)

        updated = award(profile, 5000, recording_sink)

        assert updated.level == 5
        assert recording_sink.events == []
