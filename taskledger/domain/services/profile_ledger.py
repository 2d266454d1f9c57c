"""Profile ledger operations.

- create_profile: open a profile for a participant (level 1, no points)
- award: credit one completed task and its points, then recompute level

Level is recomputed from the cumulative total on every award via
``level_for_points``; a UserLeveledUp record is emitted only when the
recomputed level is strictly higher than the stored one.
"""

from __future__ import annotations

from uuid import UUID

from uuid6 import uuid7

from taskledger.domain.events.profile import ProfileCreatedEvent, UserLeveledUpEvent
from taskledger.domain.models.user_profile import UserProfile, level_for_points
from taskledger.domain.ports.event_sink import EventSink


def create_profile(
    caller: UUID,
    sink: EventSink,
    *,
    profile_id: UUID | None = None,
) -> UserProfile:
    """Create a profile owned by ``caller``.

    Args:
        caller: Participant opening the profile.
        sink: Receiver of the ProfileCreated record.
        profile_id: Optional explicit id (a UUIDv7 is generated otherwise).

    Returns:
        New profile with zero counters at level 1.
    """
    profile = UserProfile(id=profile_id or uuid7(), owner=caller)
    sink.emit(ProfileCreatedEvent(profile_id=profile.id, owner=caller))
    return profile


def award(profile: UserProfile, points: int, sink: EventSink) -> UserProfile:
    """Credit one completed task worth ``points`` to ``profile``.

    Args:
        profile: Current version of the profile.
        points: Reward of the completed task.
        sink: Receiver of a UserLeveledUp record, if the level rises.

    Returns:
        New profile version.
    """
    updated = profile.with_award(points)
    # recomputed, not incremental
    new_level = level_for_points(updated.total_points_earned)
    if new_level > profile.level:
        sink.emit(
            UserLeveledUpEvent(
                profile_id=updated.id,
                owner=updated.owner,
                new_level=new_level,
                total_points=updated.total_points_earned,
            )
        )
    return updated
