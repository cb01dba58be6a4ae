"""Update invite status use case."""

from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import InviteItem, parse_id
from meet.domain.repository import UnitOfWork
from meet.domain.service import InviteService
from meet.domain.value import InviteId, InviteStatus, PersonId


class UpdateInviteRequest(BaseModel):
    """Request to decline or cancel an invite."""

    invite_id: str
    actor_id: str
    status: InviteStatus


class UpdateInviteUseCase(BaseUseCase):
    """Use case for declining (invitee) or cancelling (inviter) an invite."""

    def __init__(
        self, invite_service: InviteService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize use case.

        Args:
            invite_service: Invite domain service
            unit_of_work: Commits the transition and its notification
        """
        self.invite_service = invite_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdateInviteRequest) -> InviteItem:
        """Execute the status transition.

        Raises:
            NotFoundError: If invite not found
            AuthorizationError: If the actor may not make this transition
            ConflictError: If the status cannot be requested directly or the
                invite is no longer pending
            TransientError: If the transition could not be committed
        """
        invite = await self.invite_service.update_invite_status(
            invite_id=parse_id(request.invite_id, "invite_id", InviteId),
            target_status=request.status,
            actor_id=parse_id(request.actor_id, "actor_id", PersonId),
        )
        await self.unit_of_work.commit()
        return InviteItem.from_invite(invite)
