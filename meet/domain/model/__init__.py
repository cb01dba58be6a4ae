"""Domain model entities for the connection engine."""

from meet.domain.model.invite import Invite
from meet.domain.model.meeting import Meeting, MeetingView
from meet.domain.model.notification import Notification
from meet.domain.model.person import Person, Profile

__all__ = [
    "Person",
    "Profile",
    "Invite",
    "Meeting",
    "MeetingView",
    "Notification",
]
