"""Response models and ID parsing shared by the use cases."""

from datetime import datetime
from typing import Callable, TypeVar
from uuid import UUID

from pydantic import BaseModel

from meet.domain.error import ValidationError
from meet.domain.model import Invite, MeetingView, Person
from meet.domain.value import InviteStatus, MeetingMode, MeetingStatus

T = TypeVar("T")


def parse_id(value: str, field: str, wrap: Callable[[UUID], T]) -> T:
    """Parse a UUID string into a typed identifier.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return wrap(UUID(value))
    except (ValueError, TypeError, AttributeError) as e:
        raise ValidationError(f"Invalid {field}: {value!r}") from e


class PersonSummary(BaseModel):
    """Minimal person details embedded in invite and meeting items."""

    id: str
    name: str
    username: str

    @classmethod
    def from_person(cls, person: Person) -> "PersonSummary":
        return cls(id=str(person.id), name=person.name, username=person.username)


class SlotItem(BaseModel):
    """Proposed slot in responses."""

    datetime_iso: datetime
    mode: MeetingMode


class InviteItem(BaseModel):
    """Invite in responses."""

    id: str
    inviter_id: str
    invitee_id: str
    message: str
    proposed_slots: list[SlotItem]
    status: InviteStatus
    created_at: datetime
    updated_at: datetime
    counterpart: PersonSummary | None = None

    @classmethod
    def from_invite(
        cls, invite: Invite, counterpart: Person | None = None
    ) -> "InviteItem":
        return cls(
            id=str(invite.id),
            inviter_id=str(invite.inviter_id),
            invitee_id=str(invite.invitee_id),
            message=invite.message,
            proposed_slots=[
                SlotItem(datetime_iso=s.datetime_iso, mode=s.mode)
                for s in invite.proposed_slots
            ],
            status=invite.status,
            created_at=invite.created_at,
            updated_at=invite.updated_at,
            counterpart=PersonSummary.from_person(counterpart) if counterpart else None,
        )


class MeetingItem(BaseModel):
    """Meeting in responses, with its invite's parties."""

    id: str
    invite_id: str
    inviter_id: str
    invitee_id: str
    final_datetime_iso: datetime
    mode: MeetingMode
    meeting_url: str | None
    location_text: str | None
    notes: str | None
    status: MeetingStatus
    created_at: datetime
    updated_at: datetime
    counterpart: PersonSummary | None = None

    @classmethod
    def from_view(
        cls, meeting: MeetingView, counterpart: Person | None = None
    ) -> "MeetingItem":
        return cls(
            id=str(meeting.id),
            invite_id=str(meeting.invite_id),
            inviter_id=str(meeting.inviter_id),
            invitee_id=str(meeting.invitee_id),
            final_datetime_iso=meeting.final_datetime_iso,
            mode=meeting.mode,
            meeting_url=meeting.meeting_url,
            location_text=meeting.location_text,
            notes=meeting.notes,
            status=meeting.status,
            created_at=meeting.created_at,
            updated_at=meeting.updated_at,
            counterpart=PersonSummary.from_person(counterpart) if counterpart else None,
        )
