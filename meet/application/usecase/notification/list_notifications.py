"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import parse_id
from meet.config import SchedulingSettings
from meet.domain.model import Notification
from meet.domain.service import NotificationService
from meet.domain.value import NotificationStatus, PersonId


class NotificationItem(BaseModel):
    """Notification in responses."""

    id: str
    title: str
    content: str
    path: str | None
    status: NotificationStatus
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            id=str(notification.id),
            title=notification.title,
            content=notification.content,
            path=notification.path,
            status=notification.status,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """Request for a person's notification feed."""

    person_id: str
    status: NotificationStatus | None = None
    limit: int = Field(default=50, ge=1)
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """Notification feed page, newest first."""

    notifications: list[NotificationItem]


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading one's own notification feed."""

    def __init__(
        self,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> None:
        self.notification_service = notification_service
        self.settings = scheduling_settings

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        person_id = parse_id(request.person_id, "person_id", PersonId)
        notifications = await self.notification_service.list_notifications(
            person_id,
            status=request.status,
            limit=min(request.limit, self.settings.list_limit_max),
            offset=request.offset,
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationItem.from_notification(n) for n in notifications
            ]
        )
