"""PostgreSQL implementation of Notification repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from meet.domain.model import Notification
from meet.domain.repository import NotificationRepository
from meet.domain.value import NotificationId, NotificationStatus, PersonId
from meet.persistence.errors import translate_db_errors
from meet.persistence.mappers import notification_to_dict, row_to_notification
from meet.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_db_errors
    async def add(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    @translate_db_errors
    async def find_by_person(
        self,
        person_id: PersonId,
        status: Optional[NotificationStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a person's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == person_id)
            .order_by(notifications_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

        if status:
            stmt = stmt.where(notifications_table.c.status == status.value)

        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    @translate_db_errors
    async def mark_read(
        self, person_id: PersonId, notification_id: NotificationId
    ) -> bool:
        """Mark one of the person's notifications read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.user_id == person_id,
                )
            )
            .values(status=NotificationStatus.READ.value)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    @translate_db_errors
    async def mark_all_read(self, person_id: PersonId) -> int:
        """Mark all of the person's unread notifications read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == person_id,
                    notifications_table.c.status == NotificationStatus.UNREAD.value,
                )
            )
            .values(status=NotificationStatus.READ.value)
            .returning(notifications_table.c.id)
        )
        result = await self.session.execute(stmt)
        return len(result.all())
