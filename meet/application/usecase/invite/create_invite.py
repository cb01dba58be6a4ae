"""Create invite use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import InviteItem, parse_id
from meet.domain.repository import UnitOfWork
from meet.domain.service import InviteService, PersonService
from meet.domain.value import PersonId


class SlotInput(BaseModel):
    """Proposed slot as sent by the client.

    ``mode`` stays a plain string so an unknown mode surfaces as a domain
    ValidationError rather than a request parsing error.
    """

    datetime_iso: datetime
    mode: str


class CreateInviteRequest(BaseModel):
    """Request to create an invite."""

    inviter_id: str
    invitee_id: str
    message: str = ""
    proposed_slots: list[SlotInput]


class CreateInviteUseCase(BaseUseCase):
    """Use case for proposing a one-on-one meeting to another person."""

    def __init__(
        self,
        invite_service: InviteService,
        person_service: PersonService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            person_service: Person domain service
            unit_of_work: Commits the new invite and its notification
        """
        self.invite_service = invite_service
        self.person_service = person_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateInviteRequest) -> InviteItem:
        """Execute create invite flow.

        Args:
            request: Create invite request

        Returns:
            The created invite, with the invitee as counterpart

        Raises:
            ValidationError: If the input is malformed
            NotFoundError: If inviter or invitee does not exist
            TransientError: If the invite could not be committed
        """
        inviter_id = parse_id(request.inviter_id, "inviter_id", PersonId)
        invitee_id = parse_id(request.invitee_id, "invitee_id", PersonId)

        with logfire.span("create_invite", inviter_id=str(inviter_id)):
            invite = await self.invite_service.create_invite(
                inviter_id=inviter_id,
                invitee_id=invitee_id,
                message=request.message,
                proposed_slots=[s.model_dump() for s in request.proposed_slots],
            )
            invitee = await self.person_service.get_by_id(invitee_id)
            await self.unit_of_work.commit()
            return InviteItem.from_invite(invite, counterpart=invitee)
