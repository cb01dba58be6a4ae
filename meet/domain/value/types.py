"""Domain value objects for the connection engine.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from meet.domain.value.common import ValueObject
from meet.util.clock import as_utc


class MeetingMode(str, Enum):
    """Delivery channel for a slot or a meeting."""

    ONLINE = "online"
    OFFLINE = "offline"


class InviteRole(str, Enum):
    """Perspective used when listing a person's invites."""

    INVITER = "inviter"
    INVITEE = "invitee"


class InviteStatus(str, Enum):
    """Status of a one-on-one invite.

    Only pending invites can move, and every move is terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not InviteStatus.PENDING

    def can_transition_to(self, target: "InviteStatus") -> bool:
        """Check whether the invite state machine allows self -> target."""
        return self is InviteStatus.PENDING and target is not InviteStatus.PENDING


class MeetingStatus(str, Enum):
    """Status of a meeting.

    Scheduled meetings can be edited in place, completed or cancelled.
    Completed and cancelled are terminal.
    """

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not MeetingStatus.SCHEDULED

    def can_transition_to(self, target: "MeetingStatus") -> bool:
        """Check whether the meeting state machine allows self -> target.

        scheduled -> scheduled is the in-place reschedule edit.
        """
        return self is MeetingStatus.SCHEDULED


class NotificationStatus(str, Enum):
    """Read state of a notification."""

    UNREAD = "unread"
    READ = "read"


class Slot(ValueObject):
    """Advisory (datetime, mode) pair proposed when creating an invite.

    Slots have no identity of their own; they only live inside an invite.
    """

    datetime_iso: datetime
    mode: MeetingMode

    @field_validator("datetime_iso")
    @classmethod
    def normalize_datetime(cls, v: datetime) -> datetime:
        return as_utc(v)


class DirectoryFilter(ValueObject):
    """Attribute filter for the people directory.

    All given criteria must hold. ``theme`` matches either interests or
    expertise.
    """

    q: str | None = None
    theme: str | None = None
    interest: str | None = None
    expertise: str | None = None
    offering: str | None = None
    seeking: str | None = None
    city: str | None = None
    ids: frozenset[UUID] | None = None

    @field_validator("q", "theme", "interest", "expertise", "offering", "seeking", "city")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat empty query parameters as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None


class MeetingChanges(ValueObject):
    """Requested edits to a meeting.

    Fields left unset are not touched. ``meeting_url``, ``location_text`` and
    ``notes`` can be cleared by passing an empty string.
    """

    final_datetime_iso: datetime | None = None
    mode: MeetingMode | None = None
    meeting_url: str | None = Field(default=None, max_length=2048)
    location_text: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None, max_length=2000)
    status: MeetingStatus | None = None

    @field_validator("final_datetime_iso")
    @classmethod
    def normalize_datetime(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else None

    def field_edits(self) -> dict:
        """Return the reschedule fields that were explicitly set."""
        edits = self.model_dump(
            include={
                "final_datetime_iso",
                "mode",
                "meeting_url",
                "location_text",
                "notes",
            },
            exclude_unset=True,
        )
        for key in ("final_datetime_iso", "mode"):
            if key in edits and edits[key] is None:
                del edits[key]
        for key in ("meeting_url", "location_text", "notes"):
            if key in edits and edits[key] == "":
                edits[key] = None
        return edits

    @property
    def is_empty(self) -> bool:
        return not self.field_edits() and self.status is None
