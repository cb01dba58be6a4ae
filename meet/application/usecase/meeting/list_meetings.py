"""List meetings use case."""

from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import MeetingItem, parse_id
from meet.domain.service import MeetingService, PersonService
from meet.domain.value import MeetingStatus, PersonId


class ListMeetingsRequest(BaseModel):
    """Request to list a person's meetings."""

    person_id: str
    status: MeetingStatus | None = None


class ListMeetingsResponse(BaseModel):
    """Meetings where the person is inviter or invitee."""

    meetings: list[MeetingItem]


class ListMeetingsUseCase(BaseUseCase):
    """Use case for the "my connections" meeting list."""

    def __init__(
        self, meeting_service: MeetingService, person_service: PersonService
    ) -> None:
        """Initialize use case.

        Args:
            meeting_service: Meeting domain service
            person_service: Person domain service
        """
        self.meeting_service = meeting_service
        self.person_service = person_service

    async def execute(self, request: ListMeetingsRequest) -> ListMeetingsResponse:
        """List meetings newest first, each with its counterpart's summary."""
        person_id = parse_id(request.person_id, "person_id", PersonId)

        meetings = await self.meeting_service.list_meetings(person_id, request.status)
        people = await self.person_service.get_many(
            [m.counterpart_of(person_id) for m in meetings]
        )

        return ListMeetingsResponse(
            meetings=[
                MeetingItem.from_view(m, people.get(m.counterpart_of(person_id)))
                for m in meetings
            ]
        )
