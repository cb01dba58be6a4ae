"""Async engine and session factory for the scheduling tables."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from meet.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine.

    Every transaction runs at the configured isolation level, SERIALIZABLE by
    default, so two accepts of one invite cannot both commit.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,  # Dropped connections surface as TransientError less often
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        isolation_level=settings.database.isolation_level,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Repositories work with Core statements and map rows to frozen domain
    models, so nothing needs expiring or autoflushing.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
