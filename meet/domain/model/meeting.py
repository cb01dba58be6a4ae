"""Meeting entity.

A meeting is the confirmed session created when an invite is accepted.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from meet.domain.model.common import DomainModel
from meet.domain.value import (
    InviteId,
    MeetingId,
    MeetingMode,
    MeetingStatus,
    PersonId,
)
from meet.util.clock import as_utc, utcnow


class Meeting(DomainModel):
    """Meeting entity - exactly one per accepted invite.

    Business rules:
    - invite_id is unique across meetings
    - Online meetings should carry a meeting_url, offline ones a location_text
      (soft rule, logged when missing)
    - Field edits only while scheduled; completed and cancelled are terminal
    """

    id: MeetingId
    invite_id: InviteId
    final_datetime_iso: datetime
    mode: MeetingMode
    meeting_url: Optional[str] = None
    location_text: Optional[str] = None
    notes: Optional[str] = None
    status: MeetingStatus = MeetingStatus.SCHEDULED
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("final_datetime_iso")
    @classmethod
    def normalize_datetime(cls, v: datetime) -> datetime:
        return as_utc(v)

    @property
    def missing_venue(self) -> bool:
        """True when the mode's expected venue detail is absent."""
        if self.mode == MeetingMode.ONLINE:
            return not self.meeting_url
        return not self.location_text


class MeetingView(Meeting):
    """Meeting with the parties of its owning invite attached."""

    inviter_id: PersonId
    invitee_id: PersonId

    @classmethod
    def from_meeting(
        cls, meeting: Meeting, inviter_id: PersonId, invitee_id: PersonId
    ) -> "MeetingView":
        return cls(
            **meeting.model_dump(), inviter_id=inviter_id, invitee_id=invitee_id
        )

    def involves(self, person_id: PersonId) -> bool:
        return person_id in (self.inviter_id, self.invitee_id)

    def counterpart_of(self, person_id: PersonId) -> PersonId:
        return self.invitee_id if person_id == self.inviter_id else self.inviter_id
