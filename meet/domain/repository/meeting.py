"""Meeting repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from meet.domain.model.invite import Invite
from meet.domain.model.meeting import Meeting, MeetingView
from meet.domain.value import InviteId, MeetingId, MeetingStatus, PersonId


class MeetingRepository(ABC):
    """Repository for Meeting entity.

    Also owns the accept path, because accepting an invite and inserting its
    meeting must commit or fail together.
    """

    @abstractmethod
    async def find_by_id(self, meeting_id: MeetingId) -> MeetingView | None:
        """Find a meeting with its invite's parties attached.

        Args:
            meeting_id: The meeting's ID

        Returns:
            The meeting view if found, None otherwise
        """
        pass

    @abstractmethod
    async def count_by_invite(self, invite_id: InviteId) -> int:
        """Count meetings referencing an invite. Never more than one."""
        pass

    @abstractmethod
    async def find_by_person(
        self, person_id: PersonId, status: MeetingStatus | None = None
    ) -> list[MeetingView]:
        """Find meetings whose invite has the person as inviter or invitee.

        Args:
            person_id: The person's ID
            status: Optional status filter

        Returns:
            Meeting views ordered by created_at descending
        """
        pass

    @abstractmethod
    async def accept_and_create(
        self, meeting: Meeting
    ) -> tuple[Invite, Meeting] | None:
        """Atomically mark the meeting's invite accepted and insert the meeting.

        Runs as one unit: the invite moves pending -> accepted only if it is
        still pending, then the meeting row is inserted under the unique
        invite_id constraint. On failure nothing is written.

        Args:
            meeting: The meeting to insert (status scheduled)

        Returns:
            Tuple of (accepted invite, stored meeting), or None if the invite
            is missing or no longer pending

        Raises:
            IntegrityError: If a meeting already exists for the invite
        """
        pass

    @abstractmethod
    async def update_if_scheduled(
        self, meeting_id: MeetingId, values: dict[str, Any]
    ) -> MeetingView | None:
        """Apply values to a meeting only if it is still scheduled.

        Args:
            meeting_id: The meeting's ID
            values: Column values to set (updated_at is set by the repository)

        Returns:
            The updated meeting view, or None if the meeting is missing or no
            longer scheduled
        """
        pass
