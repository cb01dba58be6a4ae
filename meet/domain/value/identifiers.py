"""Strongly typed identifiers for the connection engine.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
PersonId = NewType("PersonId", UUID)
InviteId = NewType("InviteId", UUID)
MeetingId = NewType("MeetingId", UUID)
NotificationId = NewType("NotificationId", UUID)
