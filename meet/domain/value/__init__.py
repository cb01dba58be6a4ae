"""Domain value objects for the connection engine."""

from meet.domain.value.identifiers import (
    InviteId,
    MeetingId,
    NotificationId,
    PersonId,
)
from meet.domain.value.types import (
    DirectoryFilter,
    InviteRole,
    InviteStatus,
    MeetingChanges,
    MeetingMode,
    MeetingStatus,
    NotificationStatus,
    Slot,
)

__all__ = [
    # Identifiers
    "PersonId",
    "InviteId",
    "MeetingId",
    "NotificationId",
    # Types
    "DirectoryFilter",
    "InviteRole",
    "InviteStatus",
    "MeetingChanges",
    "MeetingMode",
    "MeetingStatus",
    "NotificationStatus",
    "Slot",
]
