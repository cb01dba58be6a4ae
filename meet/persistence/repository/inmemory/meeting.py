"""In-memory meeting repository for testing."""

from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from meet.domain.model import Invite, Meeting, MeetingView
from meet.domain.repository import MeetingRepository
from meet.domain.value import InviteId, InviteStatus, MeetingId, MeetingStatus, PersonId
from meet.util.clock import utcnow

from .store import InMemoryDatabase


class InMemoryMeetingRepository(MeetingRepository):
    """In-memory implementation of MeetingRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def _view(self, meeting: Meeting) -> MeetingView:
        invite = self._db.invites[meeting.invite_id]
        return MeetingView.from_meeting(meeting, invite.inviter_id, invite.invitee_id)

    async def find_by_id(self, meeting_id: MeetingId) -> Optional[MeetingView]:
        """Find a meeting with its parties by ID."""
        await self._db.round_trip()
        meeting = self._db.meetings.get(meeting_id)
        return self._view(meeting) if meeting else None

    async def count_by_invite(self, invite_id: InviteId) -> int:
        """Count meetings referencing an invite."""
        await self._db.round_trip()
        return sum(1 for m in self._db.meetings.values() if m.invite_id == invite_id)

    async def find_by_person(
        self, person_id: PersonId, status: Optional[MeetingStatus] = None
    ) -> list[MeetingView]:
        """Find meetings where the person is a party, newest first."""
        await self._db.round_trip()
        views = [self._view(m) for m in reversed(list(self._db.meetings.values()))]
        matches = [
            v
            for v in views
            if v.involves(person_id) and (status is None or v.status == status)
        ]
        matches.sort(key=lambda m: m.created_at, reverse=True)
        return matches

    async def accept_and_create(
        self, meeting: Meeting
    ) -> Optional[tuple[Invite, Meeting]]:
        """Accept the invite and store the meeting under the write lock.

        Raises:
            IntegrityError: If a meeting already exists for the invite
        """
        async with self._db.lock:
            invite = self._db.invites.get(meeting.invite_id)
            if invite is None or invite.status != InviteStatus.PENDING:
                return None
            if meeting.invite_id in self._db.meeting_by_invite:
                raise IntegrityError("Duplicate meeting for invite", None, Exception())

            accepted = invite.model_copy(
                update={"status": InviteStatus.ACCEPTED, "updated_at": utcnow()}
            )
            self._db.invites[invite.id] = accepted
            self._db.meetings[meeting.id] = meeting
            self._db.meeting_by_invite[meeting.invite_id] = meeting.id
            return accepted, meeting

    async def update_if_scheduled(
        self, meeting_id: MeetingId, values: dict[str, Any]
    ) -> Optional[MeetingView]:
        """Apply values only while the meeting is still scheduled."""
        async with self._db.lock:
            meeting = self._db.meetings.get(meeting_id)
            if meeting is None or meeting.status != MeetingStatus.SCHEDULED:
                return None
            # Re-validate so the stored meeting keeps its field invariants
            updated = Meeting.model_validate(
                {**meeting.model_dump(), **values, "updated_at": utcnow()}
            )
            self._db.meetings[meeting_id] = updated
            return self._view(updated)
