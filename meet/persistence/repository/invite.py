"""PostgreSQL implementation of Invite repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from meet.domain.model import Invite
from meet.domain.repository import InviteRepository
from meet.domain.value import InviteId, InviteRole, InviteStatus, PersonId
from meet.persistence.errors import guarded_write, translate_db_errors
from meet.persistence.mappers import invite_to_dict, row_to_invite
from meet.persistence.tables import invites_table


def _status_of(invite_id: InviteId):
    return select(invites_table.c.status).where(invites_table.c.id == invite_id)


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_db_errors
    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    @translate_db_errors
    async def add(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: Invite to insert

        Returns:
            Stored invite
        """
        stmt = (
            insert(invites_table)
            .values(**invite_to_dict(invite))
            .returning(invites_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_invite(dict(row))

    @translate_db_errors
    async def find_by_person(
        self,
        person_id: PersonId,
        role: InviteRole,
        status: Optional[InviteStatus] = None,
    ) -> list[Invite]:
        """Find invites where the person holds the given role.

        Args:
            person_id: Person ID
            role: inviter or invitee
            status: Optional filter by status

        Returns:
            Invites ordered by created_at descending
        """
        column = (
            invites_table.c.inviter_id
            if role == InviteRole.INVITER
            else invites_table.c.invitee_id
        )
        stmt = (
            select(invites_table)
            .where(column == person_id)
            .order_by(invites_table.c.created_at.desc())
        )

        if status:
            stmt = stmt.where(invites_table.c.status == status.value)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invite(dict(row)) for row in rows]

    @translate_db_errors
    async def transition_status(
        self,
        invite_id: InviteId,
        from_status: InviteStatus,
        to_status: InviteStatus,
    ) -> Optional[Invite]:
        """Move an invite between statuses only if it is still in from_status.

        Args:
            invite_id: Invite ID
            from_status: Required current status
            to_status: New status

        Returns:
            Updated invite, or None if the invite is missing or has moved

        Raises:
            ConflictError: If a concurrent transaction moved the invite first
        """
        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.status == from_status.value,
                )
            )
            .values(status=to_status.value, updated_at=func.now())
            .returning(invites_table)
        )
        async with guarded_write(
            self.session,
            "Invite",
            str(invite_id),
            _status_of(invite_id),
            from_status.value,
        ):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None
