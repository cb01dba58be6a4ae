"""Mock persistence providers for testing."""

from dishka import Provider, Scope, provide

from meet.domain.error import TransientError
from meet.domain.repository import (
    InviteRepository,
    MeetingRepository,
    NotificationRepository,
    PersonRepository,
    UnitOfWork,
)
from meet.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryInviteRepository,
    InMemoryMeetingRepository,
    InMemoryNotificationRepository,
    InMemoryPersonRepository,
    InMemoryUnitOfWork,
)
from meet.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    One InMemoryDatabase per container (APP scope), so every test that builds
    its own container starts empty, while requests inside one container share
    data the way they would share a real database.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_person_repository(self, database: InMemoryDatabase) -> PersonRepository:
        """Provide in-memory person repository."""
        return InMemoryPersonRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, database: InMemoryDatabase) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_meeting_repository(self, database: InMemoryDatabase) -> MeetingRepository:
        """Provide in-memory meeting repository."""
        return InMemoryMeetingRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, database: InMemoryDatabase
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, database: InMemoryDatabase) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork(database)


class FailingUnitOfWork(UnitOfWork):
    """Refuses every commit, like a serialization failure at COMMIT."""

    async def commit(self) -> None:
        raise TransientError("Storage temporarily unavailable")


class FailingCommitProvider(Provider):
    """Override for build_test_container: every commit fails."""

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        return FailingUnitOfWork()
