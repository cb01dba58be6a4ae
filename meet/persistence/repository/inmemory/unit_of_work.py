"""In-memory unit of work."""

from meet.domain.repository import UnitOfWork

from .store import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Writes apply immediately; commits are only counted."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def commit(self) -> None:
        await self._db.round_trip()
        self._db.commits += 1
