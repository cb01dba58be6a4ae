"""Update meeting use case."""

from datetime import datetime

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import MeetingItem, parse_id
from meet.domain.error import ValidationError
from meet.domain.repository import UnitOfWork
from meet.domain.service import MeetingService
from meet.domain.value import MeetingChanges, MeetingId, MeetingStatus, PersonId

_CHANGE_FIELDS = {
    "final_datetime_iso",
    "mode",
    "meeting_url",
    "location_text",
    "notes",
    "status",
}


class UpdateMeetingRequest(BaseModel):
    """Request to reschedule, complete or cancel a meeting.

    Only fields present in the request are changed.
    """

    meeting_id: str
    actor_id: str
    final_datetime_iso: datetime | None = None
    mode: str | None = None
    meeting_url: str | None = None
    location_text: str | None = None
    notes: str | None = None
    status: MeetingStatus | None = None


class UpdateMeetingUseCase(BaseUseCase):
    """Use case for editing a scheduled meeting."""

    def __init__(
        self, meeting_service: MeetingService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize use case.

        Args:
            meeting_service: Meeting domain service
            unit_of_work: Commits the edit and its notification
        """
        self.meeting_service = meeting_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdateMeetingRequest) -> MeetingItem:
        """Execute the meeting update.

        Raises:
            ValidationError: If the change set is empty or malformed
            NotFoundError: If meeting not found
            AuthorizationError: If the actor is not a party
            ConflictError: If the meeting is no longer scheduled
        """
        meeting_id = parse_id(request.meeting_id, "meeting_id", MeetingId)
        actor_id = parse_id(request.actor_id, "actor_id", PersonId)

        try:
            changes = MeetingChanges(
                **request.model_dump(include=_CHANGE_FIELDS, exclude_unset=True)
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid meeting changes: {e}") from e

        meeting = await self.meeting_service.update_meeting(
            meeting_id, actor_id, changes
        )
        await self.unit_of_work.commit()
        return MeetingItem.from_view(meeting)
