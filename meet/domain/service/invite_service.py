"""Invite domain service."""

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from meet.config import SchedulingSettings
from meet.domain.error import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from meet.domain.model.invite import Invite
from meet.domain.repository import InviteRepository
from meet.domain.value import InviteId, InviteRole, InviteStatus, PersonId, Slot

from .base import Service
from .notification_service import NotificationService
from .person_service import PersonService
from .timing import check_not_past

# Transitions a party may request directly, and who may request them.
# ACCEPTED is reached only through the scheduling service.
_ACTOR_TRANSITIONS: dict[InviteStatus, InviteRole] = {
    InviteStatus.DECLINED: InviteRole.INVITEE,
    InviteStatus.CANCELLED: InviteRole.INVITER,
}


class InviteService(Service):
    """Domain service for the invite ledger."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        person_service: PersonService,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            person_service: Person domain service
            notification_service: Notification domain service
            scheduling_settings: Scheduling rules
        """
        self.invite_repository = invite_repository
        self.person_service = person_service
        self.notification_service = notification_service
        self.settings = scheduling_settings

    async def create_invite(
        self,
        inviter_id: PersonId,
        invitee_id: PersonId,
        message: str,
        proposed_slots: Sequence[Slot | Mapping[str, Any]],
    ) -> Invite:
        """Create a new pending invite.

        Several pending invites between the same two people are allowed.

        Args:
            inviter_id: Person sending the invite
            invitee_id: Person receiving the invite
            message: Free-text message to the invitee
            proposed_slots: 1-3 advisory (datetime, mode) slots

        Returns:
            Created invite

        Raises:
            ValidationError: If slots are missing, too many or malformed,
                a slot is in the past, the message is too long, or
                inviter and invitee are the same person
            NotFoundError: If inviter or invitee does not exist
        """
        with logfire.span(
            "invite_service.create_invite",
            inviter_id=str(inviter_id),
            invitee_id=str(invitee_id),
            slot_count=len(proposed_slots),
        ):
            slots = self._validate_new_invite(
                inviter_id, invitee_id, message, proposed_slots
            )

            await self.person_service.ensure_exists(inviter_id, invitee_id)

            invite = Invite(
                id=InviteId(uuid4()),
                inviter_id=inviter_id,
                invitee_id=invitee_id,
                message=message,
                proposed_slots=slots,
                status=InviteStatus.PENDING,
            )
            saved = await self.invite_repository.add(invite)

            await self.notification_service.notify(
                invitee_id,
                "New invite",
                "You received a one-on-one invite",
            )
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                inviter_id=str(inviter_id),
                invitee_id=str(invitee_id),
            )
            return saved

    async def get_invite(self, invite_id: InviteId) -> Invite:
        """Get invite by ID.

        Raises:
            NotFoundError: If invite not found
        """
        invite = await self.invite_repository.find_by_id(invite_id)
        if not invite:
            logfire.warn("Invite not found", invite_id=str(invite_id))
            raise NotFoundError("Invite", str(invite_id))
        return invite

    async def list_invites(
        self,
        person_id: PersonId,
        role: InviteRole,
        status: InviteStatus | None = None,
    ) -> list[Invite]:
        """List invites where the person holds a role, newest first.

        Terminal invites are included.

        Args:
            person_id: Person ID
            role: inviter ("sent") or invitee ("received")
            status: Optional status filter

        Returns:
            List of invites
        """
        with logfire.span(
            "invite_service.list_invites",
            person_id=str(person_id),
            role=role.value,
            status=status.value if status else None,
        ):
            invites = await self.invite_repository.find_by_person(
                person_id, role, status
            )
            logfire.info(
                "Invites listed",
                person_id=str(person_id),
                role=role.value,
                count=len(invites),
            )
            return invites

    async def update_invite_status(
        self,
        invite_id: InviteId,
        target_status: InviteStatus,
        actor_id: PersonId,
    ) -> Invite:
        """Decline or cancel a pending invite.

        Only the invitee may decline and only the inviter may cancel.
        Acceptance goes through SchedulingService.accept_invite.

        Args:
            invite_id: Invite to update
            target_status: DECLINED or CANCELLED
            actor_id: Person requesting the change

        Returns:
            Updated invite

        Raises:
            NotFoundError: If invite not found
            ConflictError: If target_status is not DECLINED or CANCELLED, or
                the invite is no longer pending
            AuthorizationError: If the actor may not make this transition
        """
        with logfire.span(
            "invite_service.update_invite_status",
            invite_id=str(invite_id),
            target_status=target_status.value,
            actor_id=str(actor_id),
        ):
            invite = await self.get_invite(invite_id)

            required_role = _ACTOR_TRANSITIONS.get(target_status)
            if required_role is None:
                logfire.warn(
                    "Invite status not settable directly",
                    invite_id=str(invite_id),
                    target_status=target_status.value,
                )
                raise ConflictError(
                    f"invite status cannot be set to {target_status.value}",
                    resource="Invite",
                    resource_id=str(invite_id),
                    current_state=invite.status.value,
                )

            if invite.role_of(actor_id) != required_role.value:
                logfire.warn(
                    "Invite transition not authorized",
                    invite_id=str(invite_id),
                    actor_id=str(actor_id),
                    target_status=target_status.value,
                )
                raise AuthorizationError(
                    "invite",
                    str(invite_id),
                    str(actor_id),
                    "set status to " + target_status.value + " on",
                )

            if not invite.status.can_transition_to(target_status):
                raise self._not_pending(invite)

            updated = await self.invite_repository.transition_status(
                invite_id, InviteStatus.PENDING, target_status
            )
            if updated is None:
                # Lost a race with another writer; report the state it left
                current = await self.get_invite(invite_id)
                raise self._not_pending(current)

            counterpart = updated.counterpart_of(actor_id)
            if target_status is InviteStatus.DECLINED:
                await self.notification_service.notify(
                    counterpart, "Invite declined", "Your invite was declined"
                )
            else:
                await self.notification_service.notify(
                    counterpart, "Invite cancelled", "The invite was cancelled"
                )

            logfire.info(
                "Invite status updated",
                invite_id=str(invite_id),
                status=updated.status.value,
            )
            return updated

    def _validate_new_invite(
        self,
        inviter_id: PersonId,
        invitee_id: PersonId,
        message: str,
        proposed_slots: Sequence[Slot | Mapping[str, Any]],
    ) -> tuple[Slot, ...]:
        """Check invite input before touching storage."""
        if inviter_id == invitee_id:
            raise ValidationError("Cannot invite yourself")

        if not proposed_slots:
            raise ValidationError("At least one proposed slot is required")
        if len(proposed_slots) > self.settings.max_proposed_slots:
            raise ValidationError(
                f"At most {self.settings.max_proposed_slots} proposed slots are allowed"
            )

        if len(message) > self.settings.max_message_length:
            raise ValidationError(
                f"Message must be at most {self.settings.max_message_length} characters"
            )

        slots: list[Slot] = []
        for raw in proposed_slots:
            try:
                slot = raw if isinstance(raw, Slot) else Slot.model_validate(raw)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid proposed slot: {e}") from e
            check_not_past(slot.datetime_iso, self.settings, "Proposed slot")
            slots.append(slot)
        return tuple(slots)

    @staticmethod
    def _not_pending(invite: Invite) -> ConflictError:
        logfire.warn(
            "Invite not pending",
            invite_id=str(invite.id),
            status=invite.status.value,
        )
        return ConflictError(
            "invite not pending",
            resource="Invite",
            resource_id=str(invite.id),
            current_state=invite.status.value,
        )
