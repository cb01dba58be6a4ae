"""Notification repository interface."""

from abc import ABC, abstractmethod

from meet.domain.model.notification import Notification
from meet.domain.value import NotificationId, NotificationStatus, PersonId


class NotificationRepository(ABC):
    """Repository for a person's notification feed."""

    @abstractmethod
    async def add(self, notification: Notification) -> Notification:
        """Insert a notification."""
        pass

    @abstractmethod
    async def find_by_person(
        self,
        person_id: PersonId,
        status: NotificationStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a person's notifications, newest first."""
        pass

    @abstractmethod
    async def mark_read(
        self, person_id: PersonId, notification_id: NotificationId
    ) -> bool:
        """Mark one of the person's notifications as read.

        Returns:
            False if no notification with that ID belongs to the person
        """
        pass

    @abstractmethod
    async def mark_all_read(self, person_id: PersonId) -> int:
        """Mark every unread notification of the person as read.

        Returns:
            Number of notifications changed
        """
        pass
