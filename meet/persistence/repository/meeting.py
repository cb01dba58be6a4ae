"""PostgreSQL implementation of Meeting repository."""

from enum import Enum
from typing import Any, Optional

from sqlalchemy import and_, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from meet.domain.model import Invite, Meeting, MeetingView
from meet.domain.repository import MeetingRepository
from meet.domain.value import InviteId, InviteStatus, MeetingId, MeetingStatus, PersonId
from meet.persistence.errors import guarded_write, translate_db_errors
from meet.persistence.mappers import (
    meeting_to_dict,
    row_to_invite,
    row_to_meeting,
    row_to_meeting_view,
)
from meet.persistence.tables import invites_table, meetings_table

_EDITABLE_COLUMNS = frozenset(
    {
        "final_datetime_iso",
        "mode",
        "meeting_url",
        "location_text",
        "notes",
        "status",
    }
)


def _view_select():
    """Meetings joined with their invite's parties."""
    return select(
        meetings_table,
        invites_table.c.inviter_id,
        invites_table.c.invitee_id,
    ).select_from(
        meetings_table.join(
            invites_table, invites_table.c.id == meetings_table.c.invite_id
        )
    )


class PostgresMeetingRepository(MeetingRepository):
    """PostgreSQL implementation of MeetingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_db_errors
    async def find_by_id(self, meeting_id: MeetingId) -> Optional[MeetingView]:
        """Find a meeting with its parties by ID."""
        stmt = _view_select().where(meetings_table.c.id == meeting_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_meeting_view(dict(row)) if row else None

    @translate_db_errors
    async def count_by_invite(self, invite_id: InviteId) -> int:
        """Count meetings referencing an invite."""
        stmt = (
            select(func.count())
            .select_from(meetings_table)
            .where(meetings_table.c.invite_id == invite_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_db_errors
    async def find_by_person(
        self, person_id: PersonId, status: Optional[MeetingStatus] = None
    ) -> list[MeetingView]:
        """Find meetings where the person is inviter or invitee, newest first."""
        stmt = (
            _view_select()
            .where(
                or_(
                    invites_table.c.inviter_id == person_id,
                    invites_table.c.invitee_id == person_id,
                )
            )
            .order_by(meetings_table.c.created_at.desc())
        )

        if status:
            stmt = stmt.where(meetings_table.c.status == status.value)

        result = await self.session.execute(stmt)
        return [row_to_meeting_view(dict(row)) for row in result.mappings().all()]

    @translate_db_errors
    async def accept_and_create(
        self, meeting: Meeting
    ) -> Optional[tuple[Invite, Meeting]]:
        """Accept the invite and insert its meeting inside one savepoint.

        A failed insert rolls the savepoint back, so the invite stays
        pending and the request transaction stays usable.

        Raises:
            IntegrityError: If a meeting already exists for the invite
            ConflictError: If a concurrent transaction moved the invite first
        """
        async with guarded_write(
            self.session,
            "Invite",
            str(meeting.invite_id),
            select(invites_table.c.status).where(
                invites_table.c.id == meeting.invite_id
            ),
            InviteStatus.PENDING.value,
        ):
            accept = (
                update(invites_table)
                .where(
                    and_(
                        invites_table.c.id == meeting.invite_id,
                        invites_table.c.status == InviteStatus.PENDING.value,
                    )
                )
                .values(status=InviteStatus.ACCEPTED.value, updated_at=func.now())
                .returning(invites_table)
            )
            result = await self.session.execute(accept)
            invite_row = result.mappings().first()
            if invite_row is None:
                return None

            create = (
                insert(meetings_table)
                .values(**meeting_to_dict(meeting))
                .returning(meetings_table)
            )
            result = await self.session.execute(create)
            meeting_row = result.mappings().one()

        return row_to_invite(dict(invite_row)), row_to_meeting(dict(meeting_row))

    @translate_db_errors
    async def update_if_scheduled(
        self, meeting_id: MeetingId, values: dict[str, Any]
    ) -> Optional[MeetingView]:
        """Apply values only while the meeting is still scheduled."""
        unknown = set(values) - _EDITABLE_COLUMNS
        if unknown:
            raise ValueError(f"Not editable meeting fields: {sorted(unknown)}")

        row_values = {
            key: value.value if isinstance(value, Enum) else value
            for key, value in values.items()
        }
        stmt = (
            update(meetings_table)
            .where(
                and_(
                    meetings_table.c.id == meeting_id,
                    meetings_table.c.status == MeetingStatus.SCHEDULED.value,
                )
            )
            .values(**row_values, updated_at=func.now())
            .returning(meetings_table.c.id)
        )
        async with guarded_write(
            self.session,
            "Meeting",
            str(meeting_id),
            select(meetings_table.c.status).where(meetings_table.c.id == meeting_id),
            MeetingStatus.SCHEDULED.value,
        ):
            result = await self.session.execute(stmt)
            updated = result.first()
        if updated is None:
            return None
        return await self.find_by_id(meeting_id)
