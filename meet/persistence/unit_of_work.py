"""PostgreSQL unit of work over the request session."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from meet.domain.repository import UnitOfWork
from meet.persistence.errors import translate_db_errors


class SessionUnitOfWork(UnitOfWork):
    """Commits the request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @translate_db_errors
    async def commit(self) -> None:
        await self.session.commit()
        logfire.debug("Request committed")
