"""List invites use case."""

from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import InviteItem, parse_id
from meet.domain.service import InviteService, PersonService
from meet.domain.value import InviteRole, InviteStatus, PersonId


class ListInvitesRequest(BaseModel):
    """Request to list a person's invites."""

    person_id: str
    role: InviteRole
    status: InviteStatus | None = None


class ListInvitesResponse(BaseModel):
    """Invites where the person holds the requested role."""

    invites: list[InviteItem]


class ListInvitesUseCase(BaseUseCase):
    """Use case for the sent / received invite lists."""

    def __init__(
        self, invite_service: InviteService, person_service: PersonService
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            person_service: Person domain service
        """
        self.invite_service = invite_service
        self.person_service = person_service

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        """List invites newest first, each with its counterpart's summary."""
        person_id = parse_id(request.person_id, "person_id", PersonId)

        invites = await self.invite_service.list_invites(
            person_id, request.role, request.status
        )
        people = await self.person_service.get_many(
            [inv.counterpart_of(person_id) for inv in invites]
        )

        return ListInvitesResponse(
            invites=[
                InviteItem.from_invite(inv, people.get(inv.counterpart_of(person_id)))
                for inv in invites
            ]
        )
