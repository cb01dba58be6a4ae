"""PostgreSQL persistence component."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from meet.config import Settings
from meet.domain.repository import (
    InviteRepository,
    MeetingRepository,
    NotificationRepository,
    PersonRepository,
    UnitOfWork,
)
from meet.persistence.database import create_engine, create_session_factory
from meet.persistence.repository import (
    PostgresInviteRepository,
    PostgresMeetingRepository,
    PostgresNotificationRepository,
    PostgresPersonRepository,
)
from meet.persistence.unit_of_work import SessionUnitOfWork
from meet.util.di.base import ProviderBase
from meet.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component: repositories and the unit of work."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL, one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine; its pool is disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One session per request.

        Writes become durable only through UnitOfWork.commit, which mutating
        use cases call before returning. Whatever is left uncommitted when
        the request scope closes is rolled back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.debug("Request rolled back", error_type=type(e).__name__)
                raise
            finally:
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the request's unit of work."""
        return SessionUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_person_repository(self, session: AsyncSession) -> PersonRepository:
        """Provide Person repository."""
        return PostgresPersonRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return PostgresInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_meeting_repository(self, session: AsyncSession) -> MeetingRepository:
        """Provide Meeting repository."""
        return PostgresMeetingRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)
