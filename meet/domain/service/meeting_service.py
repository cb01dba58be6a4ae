"""Meeting domain service."""

import logfire

from meet.config import SchedulingSettings
from meet.domain.error import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from meet.domain.model import MeetingView
from meet.domain.repository import MeetingRepository
from meet.domain.value import MeetingChanges, MeetingId, MeetingStatus, PersonId

from .base import Service
from .notification_service import NotificationService
from .timing import check_not_past

_STATUS_NOTICES: dict[MeetingStatus | None, tuple[str, str]] = {
    None: ("Meeting updated", "A scheduled meeting was updated"),
    MeetingStatus.COMPLETED: ("Meeting completed", "A meeting was marked completed"),
    MeetingStatus.CANCELLED: ("Meeting cancelled", "A scheduled meeting was cancelled"),
}


class MeetingService(Service):
    """Domain service for scheduled meetings."""

    def __init__(
        self,
        meeting_repository: MeetingRepository,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> None:
        """Initialize meeting service.

        Args:
            meeting_repository: Meeting repository
            notification_service: Notification domain service
            scheduling_settings: Scheduling rules
        """
        self.meeting_repository = meeting_repository
        self.notification_service = notification_service
        self.settings = scheduling_settings

    async def get_meeting(self, meeting_id: MeetingId) -> MeetingView:
        """Get meeting by ID.

        Raises:
            NotFoundError: If meeting not found
        """
        meeting = await self.meeting_repository.find_by_id(meeting_id)
        if not meeting:
            logfire.warn("Meeting not found", meeting_id=str(meeting_id))
            raise NotFoundError("Meeting", str(meeting_id))
        return meeting

    async def list_meetings(
        self, person_id: PersonId, status: MeetingStatus | None = None
    ) -> list[MeetingView]:
        """List meetings where the person is a party, newest first.

        Args:
            person_id: Person ID
            status: Optional status filter

        Returns:
            Meeting views, each with its invite's parties
        """
        with logfire.span(
            "meeting_service.list_meetings",
            person_id=str(person_id),
            status=status.value if status else None,
        ):
            meetings = await self.meeting_repository.find_by_person(person_id, status)
            logfire.info(
                "Meetings listed", person_id=str(person_id), count=len(meetings)
            )
            return meetings

    async def update_meeting(
        self,
        meeting_id: MeetingId,
        actor_id: PersonId,
        changes: MeetingChanges,
    ) -> MeetingView:
        """Reschedule, complete or cancel a scheduled meeting.

        Either party may edit. Field edits and a status change may be sent
        together; they are applied in one write. Cancelling a meeting leaves
        its invite accepted.

        Args:
            meeting_id: Meeting to update
            actor_id: Person requesting the change
            changes: Requested edits

        Returns:
            Updated meeting view

        Raises:
            ValidationError: If no change is requested or the new time is
                in the past
            NotFoundError: If meeting not found
            AuthorizationError: If the actor is not a party to the meeting
            ConflictError: If the meeting is no longer scheduled
        """
        with logfire.span(
            "meeting_service.update_meeting",
            meeting_id=str(meeting_id),
            actor_id=str(actor_id),
            status=changes.status.value if changes.status else None,
        ):
            # scheduled -> scheduled is a plain field edit
            target = (
                None if changes.status is MeetingStatus.SCHEDULED else changes.status
            )
            values = changes.field_edits()
            if not values and target is None:
                raise ValidationError(
                    "No meeting changes given",
                    resource="Meeting",
                    resource_id=str(meeting_id),
                )
            if "final_datetime_iso" in values:
                check_not_past(
                    values["final_datetime_iso"], self.settings, "Meeting time"
                )

            meeting = await self.get_meeting(meeting_id)

            if not meeting.involves(actor_id):
                logfire.warn(
                    "Meeting update not authorized",
                    meeting_id=str(meeting_id),
                    actor_id=str(actor_id),
                )
                raise AuthorizationError(
                    "meeting", str(meeting_id), str(actor_id), "update"
                )

            if not meeting.status.can_transition_to(target or MeetingStatus.SCHEDULED):
                raise self._not_scheduled(meeting_id, meeting.status.value)

            if target is not None:
                values["status"] = target

            updated = await self.meeting_repository.update_if_scheduled(
                meeting_id, values
            )
            if updated is None:
                current = await self.meeting_repository.find_by_id(meeting_id)
                raise self._not_scheduled(
                    meeting_id, current.status.value if current else None
                )

            if updated.missing_venue and updated.status is MeetingStatus.SCHEDULED:
                logfire.warn(
                    "Meeting scheduled without venue detail",
                    meeting_id=str(meeting_id),
                    mode=updated.mode.value,
                )

            title, content = _STATUS_NOTICES[target]
            await self.notification_service.notify(updated.inviter_id, title, content)
            await self.notification_service.notify(updated.invitee_id, title, content)

            logfire.info(
                "Meeting updated",
                meeting_id=str(meeting_id),
                status=updated.status.value,
                fields=sorted(k for k in values if k != "status"),
            )
            return updated

    @staticmethod
    def _not_scheduled(
        meeting_id: MeetingId, current_state: str | None
    ) -> ConflictError:
        logfire.warn(
            "Meeting not scheduled",
            meeting_id=str(meeting_id),
            status=current_state,
        )
        return ConflictError(
            "meeting not scheduled",
            resource="Meeting",
            resource_id=str(meeting_id),
            current_state=current_state,
        )
