"""Accept invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import MeetingItem, parse_id
from meet.domain.repository import UnitOfWork
from meet.domain.service import PersonService, SchedulingService
from meet.domain.value import InviteId, PersonId


class AcceptInviteRequest(BaseModel):
    """Request to accept an invite and schedule its meeting."""

    invite_id: str
    actor_id: str
    final_datetime_iso: datetime
    mode: str
    meeting_url: str | None = None
    location_text: str | None = None
    notes: str | None = None


class AcceptInviteUseCase(BaseUseCase):
    """Use case for the invitee accepting an invite."""

    def __init__(
        self,
        scheduling_service: SchedulingService,
        person_service: PersonService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case.

        Args:
            scheduling_service: Scheduling domain service
            person_service: Person domain service
            unit_of_work: Commits the accepted invite with its meeting
        """
        self.scheduling_service = scheduling_service
        self.person_service = person_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: AcceptInviteRequest) -> MeetingItem:
        """Execute accept flow.

        Returns:
            The created meeting, with the inviter as counterpart

        Raises:
            ValidationError: If mode or time is invalid
            NotFoundError: If invite not found
            AuthorizationError: If the actor is not the invitee
            ConflictError: If the invite is not pending or was accepted
                concurrently
            TransientError: If the accept could not be committed
        """
        invite_id = parse_id(request.invite_id, "invite_id", InviteId)
        actor_id = parse_id(request.actor_id, "actor_id", PersonId)

        with logfire.span("accept_invite", invite_id=str(invite_id)):
            meeting = await self.scheduling_service.accept_invite(
                invite_id=invite_id,
                actor_id=actor_id,
                final_datetime_iso=request.final_datetime_iso,
                mode=request.mode,
                meeting_url=request.meeting_url,
                location_text=request.location_text,
                notes=request.notes,
            )
            people = await self.person_service.get_many([meeting.inviter_id])
            await self.unit_of_work.commit()
            return MeetingItem.from_view(meeting, people.get(meeting.inviter_id))
