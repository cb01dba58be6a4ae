"""Scheduling domain service.

Turns a pending invite into exactly one scheduled meeting.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from meet.config import SchedulingSettings
from meet.domain.error import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from meet.domain.model import Invite, Meeting, MeetingView
from meet.domain.repository import InviteRepository, MeetingRepository
from meet.domain.value import (
    InviteId,
    InviteRole,
    InviteStatus,
    MeetingId,
    MeetingMode,
    MeetingStatus,
    PersonId,
)

from .base import Service
from .notification_service import NotificationService
from .timing import check_not_past


class SchedulingService(Service):
    """Domain service for the accept path."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        meeting_repository: MeetingRepository,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> None:
        """Initialize scheduling service.

        Args:
            invite_repository: Invite repository
            meeting_repository: Meeting repository
            notification_service: Notification domain service
            scheduling_settings: Scheduling rules
        """
        self.invite_repository = invite_repository
        self.meeting_repository = meeting_repository
        self.notification_service = notification_service
        self.settings = scheduling_settings

    async def accept_invite(
        self,
        invite_id: InviteId,
        actor_id: PersonId,
        final_datetime_iso: datetime,
        mode: MeetingMode | str,
        meeting_url: str | None = None,
        location_text: str | None = None,
        notes: str | None = None,
    ) -> MeetingView:
        """Accept a pending invite and create its meeting.

        The invite transition and the meeting insert commit together or not
        at all. The final time does not have to be one of the proposed slots.

        Args:
            invite_id: Invite to accept
            actor_id: Person accepting, must be the invitee
            final_datetime_iso: Agreed meeting time
            mode: online or offline
            meeting_url: Link for online meetings
            location_text: Place for offline meetings
            notes: Free-text notes

        Returns:
            The created meeting with its parties

        Raises:
            ValidationError: If mode is unknown or the time is in the past
            NotFoundError: If invite not found
            AuthorizationError: If the actor is not the invitee
            ConflictError: If the invite is not pending, or another accept
                won the race
        """
        with logfire.span(
            "scheduling_service.accept_invite",
            invite_id=str(invite_id),
            actor_id=str(actor_id),
        ):
            try:
                mode = MeetingMode(mode)
            except ValueError as e:
                raise ValidationError(f"Invalid meeting mode: {mode}") from e
            check_not_past(final_datetime_iso, self.settings, "Meeting time")

            invite = await self.invite_repository.find_by_id(invite_id)
            if not invite:
                logfire.warn("Invite not found", invite_id=str(invite_id))
                raise NotFoundError("Invite", str(invite_id))

            if invite.role_of(actor_id) != InviteRole.INVITEE.value:
                logfire.warn(
                    "Invite accept not authorized",
                    invite_id=str(invite_id),
                    actor_id=str(actor_id),
                )
                raise AuthorizationError(
                    "invite", str(invite_id), str(actor_id), "accept"
                )

            if not invite.status.can_transition_to(InviteStatus.ACCEPTED):
                raise self._conflict(invite_id, invite.status.value)

            meeting = Meeting(
                id=MeetingId(uuid4()),
                invite_id=invite_id,
                final_datetime_iso=final_datetime_iso,
                mode=mode,
                meeting_url=meeting_url or None,
                location_text=location_text or None,
                notes=notes or None,
                status=MeetingStatus.SCHEDULED,
            )
            if meeting.missing_venue:
                logfire.warn(
                    "Meeting scheduled without venue detail",
                    invite_id=str(invite_id),
                    mode=mode.value,
                )

            try:
                result = await self.meeting_repository.accept_and_create(meeting)
            except IntegrityError as e:
                logfire.warn(
                    "Meeting already exists for invite",
                    invite_id=str(invite_id),
                    error=str(e),
                )
                raise self._conflict(invite_id, InviteStatus.ACCEPTED.value) from e

            if result is None:
                current = await self.invite_repository.find_by_id(invite_id)
                raise self._conflict(
                    invite_id, current.status.value if current else None
                )

            accepted, saved = result
            await self._notify_parties(accepted)

            logfire.info(
                "Invite accepted",
                invite_id=str(invite_id),
                meeting_id=str(saved.id),
                mode=saved.mode.value,
            )
            return MeetingView.from_meeting(
                saved, accepted.inviter_id, accepted.invitee_id
            )

    async def _notify_parties(self, invite: Invite) -> None:
        await self.notification_service.notify(
            invite.inviter_id,
            "Invite accepted",
            "Your invite was accepted and a meeting is scheduled",
        )
        await self.notification_service.notify(
            invite.invitee_id,
            "Meeting scheduled",
            "You accepted an invite and a meeting is scheduled",
        )

    @staticmethod
    def _conflict(invite_id: InviteId, current_state: str | None) -> ConflictError:
        logfire.warn(
            "Invite accept conflict",
            invite_id=str(invite_id),
            status=current_state,
        )
        return ConflictError(
            "invite not pending",
            resource="Invite",
            resource_id=str(invite_id),
            current_state=current_state,
        )
