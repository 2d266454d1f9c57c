"""Profile event payloads.

- ProfileCreatedEvent: a participant created their profile
- UserLeveledUpEvent: an award moved a profile into a higher tier
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from taskledger.domain.events.event import LEDGER_EVENT_SCHEMA_VERSION

PROFILE_CREATED_EVENT_TYPE: str = "profile.created"
USER_LEVELED_UP_EVENT_TYPE: str = "profile.leveled_up"


@dataclass(frozen=True, eq=True)
class ProfileCreatedEvent:
    """Payload for profile created events.

    Attributes:
        profile_id: The new profile.
        owner: Participant that owns it.
    """

    event_type: ClassVar[str] = PROFILE_CREATED_EVENT_TYPE

    profile_id: UUID
    owner: UUID

    @property
    def subject_id(self) -> UUID:
        return self.profile_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "profile_id": str(self.profile_id),
            "owner": str(self.owner),
            "schema_version": LEDGER_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class UserLeveledUpEvent:
    """Payload for level-up events.

    One record per award that raises the level, carrying the final level
    even when several tiers were crossed at once.

    Attributes:
        profile_id: The profile that leveled up.
        owner: Participant that owns the profile.
        new_level: Level after the award.
        total_points: Cumulative points after the award.
    """

    event_type: ClassVar[str] = USER_LEVELED_UP_EVENT_TYPE

    profile_id: UUID
    owner: UUID
    new_level: int
    total_points: int

    @property
    def subject_id(self) -> UUID:
        return self.profile_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "profile_id": str(self.profile_id),
            "owner": str(self.owner),
            "new_level": self.new_level,
            "total_points": self.total_points,
            "schema_version": LEDGER_EVENT_SCHEMA_VERSION,
        }
