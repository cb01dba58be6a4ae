"""Application layer DI providers."""

from dishka import Scope, provide

from meet.application.usecase.invite import (
    CreateInviteUseCase,
    ListInvitesUseCase,
    UpdateInviteUseCase,
)
from meet.application.usecase.meeting import (
    AcceptInviteUseCase,
    ListMeetingsUseCase,
    UpdateMeetingUseCase,
)
from meet.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from meet.application.usecase.person import GetPersonUseCase, ListPeopleUseCase
from meet.config import SchedulingSettings
from meet.domain.repository import UnitOfWork
from meet.domain.service import (
    InviteService,
    MeetingService,
    NotificationService,
    PersonService,
    SchedulingService,
)
from meet.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self,
        invite_service: InviteService,
        person_service: PersonService,
        unit_of_work: UnitOfWork,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            invite_service=invite_service,
            person_service=person_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invites_use_case(
        self, invite_service: InviteService, person_service: PersonService
    ) -> ListInvitesUseCase:
        """Provide list invites use case."""
        return ListInvitesUseCase(
            invite_service=invite_service, person_service=person_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_invite_use_case(
        self, invite_service: InviteService, unit_of_work: UnitOfWork
    ) -> UpdateInviteUseCase:
        """Provide update invite use case."""
        return UpdateInviteUseCase(
            invite_service=invite_service, unit_of_work=unit_of_work
        )

    # Meeting use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_invite_use_case(
        self,
        scheduling_service: SchedulingService,
        person_service: PersonService,
        unit_of_work: UnitOfWork,
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(
            scheduling_service=scheduling_service,
            person_service=person_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_meetings_use_case(
        self, meeting_service: MeetingService, person_service: PersonService
    ) -> ListMeetingsUseCase:
        """Provide list meetings use case."""
        return ListMeetingsUseCase(
            meeting_service=meeting_service, person_service=person_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_meeting_use_case(
        self, meeting_service: MeetingService, unit_of_work: UnitOfWork
    ) -> UpdateMeetingUseCase:
        """Provide update meeting use case."""
        return UpdateMeetingUseCase(
            meeting_service=meeting_service, unit_of_work=unit_of_work
        )

    # Person use cases
    @provide(scope=Scope.REQUEST)
    def get_get_person_use_case(
        self, person_service: PersonService
    ) -> GetPersonUseCase:
        """Provide get person use case."""
        return GetPersonUseCase(person_service=person_service)

    @provide(scope=Scope.REQUEST)
    def get_list_people_use_case(
        self,
        person_service: PersonService,
        scheduling_settings: SchedulingSettings,
    ) -> ListPeopleUseCase:
        """Provide list people use case."""
        return ListPeopleUseCase(
            person_service=person_service, scheduling_settings=scheduling_settings
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        scheduling_settings: SchedulingSettings,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            scheduling_settings=scheduling_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_notifications_read_use_case(
        self, notification_service: NotificationService, unit_of_work: UnitOfWork
    ) -> MarkNotificationsReadUseCase:
        """Provide mark notifications read use case."""
        return MarkNotificationsReadUseCase(
            notification_service=notification_service, unit_of_work=unit_of_work
        )
