"""Notification domain service."""

from uuid import uuid4

import logfire

from meet.domain.error import NotFoundError
from meet.domain.model import Notification
from meet.domain.repository import NotificationRepository
from meet.domain.value import NotificationId, NotificationStatus, PersonId

from .base import Service

CONNECTIONS_PATH = "/connections"


class NotificationService(Service):
    """Domain service for the per-person notification feed."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify(
        self,
        person_id: PersonId,
        title: str,
        content: str,
        path: str | None = CONNECTIONS_PATH,
    ) -> Notification:
        """Add an unread notification to a person's feed.

        Written in the caller's unit of work, so it is rolled back together
        with the transition it reports.
        """
        notification = Notification(
            id=NotificationId(uuid4()),
            person_id=person_id,
            title=title,
            content=content,
            path=path,
        )
        saved = await self.notification_repository.add(notification)
        logfire.info(
            "Notification created",
            person_id=str(person_id),
            notification_id=str(saved.id),
            title=title,
        )
        return saved

    async def list_notifications(
        self,
        person_id: PersonId,
        status: NotificationStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]:
        """List a person's notifications, newest first."""
        with logfire.span(
            "notification_service.list_notifications",
            person_id=str(person_id),
            status=status.value if status else None,
        ):
            return await self.notification_repository.find_by_person(
                person_id, status=status, limit=limit, offset=offset
            )

    async def mark_read(
        self, person_id: PersonId, notification_id: NotificationId
    ) -> None:
        """Mark one notification as read.

        Raises:
            NotFoundError: If the person has no such notification
        """
        with logfire.span(
            "notification_service.mark_read",
            person_id=str(person_id),
            notification_id=str(notification_id),
        ):
            found = await self.notification_repository.mark_read(
                person_id, notification_id
            )
            if not found:
                logfire.warn(
                    "Notification not found",
                    person_id=str(person_id),
                    notification_id=str(notification_id),
                )
                raise NotFoundError("Notification", str(notification_id))

    async def mark_all_read(self, person_id: PersonId) -> int:
        """Mark all of a person's unread notifications as read."""
        with logfire.span(
            "notification_service.mark_all_read", person_id=str(person_id)
        ):
            count = await self.notification_repository.mark_all_read(person_id)
            logfire.info(
                "Notifications marked read", person_id=str(person_id), count=count
            )
            return count
