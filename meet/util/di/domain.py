"""Domain layer DI providers."""

from dishka import Scope, provide

from meet.config import AuthSettings, SchedulingSettings
from meet.domain.repository import (
    InviteRepository,
    MeetingRepository,
    NotificationRepository,
    PersonRepository,
)
from meet.domain.service import (
    InviteService,
    JWTService,
    MeetingService,
    NotificationService,
    PersonService,
    SchedulingService,
)
from meet.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_person_service(self, person_repository: PersonRepository) -> PersonService:
        """Provide person domain service."""
        return PersonService(person_repository=person_repository)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        person_service: PersonService,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            person_service=person_service,
            notification_service=notification_service,
            scheduling_settings=scheduling_settings,
        )

    @provide
    def get_scheduling_service(
        self,
        invite_repository: InviteRepository,
        meeting_repository: MeetingRepository,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> SchedulingService:
        """Provide scheduling (accept path) domain service."""
        return SchedulingService(
            invite_repository=invite_repository,
            meeting_repository=meeting_repository,
            notification_service=notification_service,
            scheduling_settings=scheduling_settings,
        )

    @provide
    def get_meeting_service(
        self,
        meeting_repository: MeetingRepository,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> MeetingService:
        """Provide meeting domain service."""
        return MeetingService(
            meeting_repository=meeting_repository,
            notification_service=notification_service,
            scheduling_settings=scheduling_settings,
        )
