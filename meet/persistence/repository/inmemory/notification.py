"""In-memory notification repository for testing."""

from typing import Optional

from meet.domain.model import Notification
from meet.domain.repository import NotificationRepository
from meet.domain.value import NotificationId, NotificationStatus, PersonId

from .store import InMemoryDatabase


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def add(self, notification: Notification) -> Notification:
        """Store a notification."""
        self._db.notifications.append(notification)
        return notification

    async def find_by_person(
        self,
        person_id: PersonId,
        status: Optional[NotificationStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a person's notifications, newest first."""
        await self._db.round_trip()
        matches = [
            n
            for n in self._db.notifications
            if n.person_id == person_id and (status is None or n.status == status)
        ]
        # Stable sort keeps insertion order for equal timestamps; newest first
        matches = list(reversed(matches))
        matches.sort(key=lambda n: n.created_at, reverse=True)
        return matches[offset : offset + limit]

    async def mark_read(
        self, person_id: PersonId, notification_id: NotificationId
    ) -> bool:
        """Mark one of the person's notifications read."""
        for i, n in enumerate(self._db.notifications):
            if n.id == notification_id and n.person_id == person_id:
                self._db.notifications[i] = n.model_copy(
                    update={"status": NotificationStatus.READ}
                )
                return True
        return False

    async def mark_all_read(self, person_id: PersonId) -> int:
        """Mark all of the person's unread notifications read."""
        count = 0
        for i, n in enumerate(self._db.notifications):
            if n.person_id == person_id and n.status == NotificationStatus.UNREAD:
                self._db.notifications[i] = n.model_copy(
                    update={"status": NotificationStatus.READ}
                )
                count += 1
        return count
