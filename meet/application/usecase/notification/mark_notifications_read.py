"""Mark notifications read use case."""

from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import parse_id
from meet.domain.repository import UnitOfWork
from meet.domain.service import NotificationService
from meet.domain.value import NotificationId, PersonId


class MarkNotificationsReadRequest(BaseModel):
    """Mark one notification read, or all of them when no ID is given."""

    person_id: str
    notification_id: str | None = None


class MarkNotificationsReadResponse(BaseModel):
    """Number of notifications marked read."""

    marked: int


class MarkNotificationsReadUseCase(BaseUseCase):
    """Use case for clearing the unread badge."""

    def __init__(
        self, notification_service: NotificationService, unit_of_work: UnitOfWork
    ) -> None:
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: MarkNotificationsReadRequest
    ) -> MarkNotificationsReadResponse:
        """Mark notifications read.

        Raises:
            NotFoundError: If a given notification does not belong to the person
        """
        person_id = parse_id(request.person_id, "person_id", PersonId)

        if request.notification_id is None:
            marked = await self.notification_service.mark_all_read(person_id)
            await self.unit_of_work.commit()
            return MarkNotificationsReadResponse(marked=marked)

        notification_id = parse_id(
            request.notification_id, "notification_id", NotificationId
        )
        await self.notification_service.mark_read(person_id, notification_id)
        await self.unit_of_work.commit()
        return MarkNotificationsReadResponse(marked=1)
