"""In-memory invite repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from meet.domain.model import Invite
from meet.domain.repository import InviteRepository
from meet.domain.value import InviteId, InviteRole, InviteStatus, PersonId
from meet.util.clock import utcnow

from .store import InMemoryDatabase


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        await self._db.round_trip()
        return self._db.invites.get(invite_id)

    async def add(self, invite: Invite) -> Invite:
        """Insert an invite.

        Raises:
            IntegrityError: If an invite with the same ID exists
        """
        async with self._db.lock:
            if invite.id in self._db.invites:
                raise IntegrityError("Duplicate invite", None, Exception())
            self._db.invites[invite.id] = invite
        return invite

    async def find_by_person(
        self,
        person_id: PersonId,
        role: InviteRole,
        status: Optional[InviteStatus] = None,
    ) -> list[Invite]:
        """Find invites where the person holds the role, newest first."""
        await self._db.round_trip()
        matches = []
        for invite in reversed(list(self._db.invites.values())):
            holder = (
                invite.inviter_id if role == InviteRole.INVITER else invite.invitee_id
            )
            if holder != person_id:
                continue
            if status is None or invite.status == status:
                matches.append(invite)

        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def transition_status(
        self,
        invite_id: InviteId,
        from_status: InviteStatus,
        to_status: InviteStatus,
    ) -> Optional[Invite]:
        """Move an invite only if it is still in from_status."""
        async with self._db.lock:
            invite = self._db.invites.get(invite_id)
            if invite is None or invite.status != from_status:
                return None
            updated = invite.model_copy(
                update={"status": to_status, "updated_at": utcnow()}
            )
            self._db.invites[invite_id] = updated
            return updated
