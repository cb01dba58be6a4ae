"""In-memory person repository for testing."""

from typing import Optional

from meet.domain.model import Person
from meet.domain.repository import PersonRepository
from meet.domain.service.directory import person_matches, sort_key
from meet.domain.value import DirectoryFilter, PersonId

from .store import InMemoryDatabase


class InMemoryPersonRepository(PersonRepository):
    """In-memory implementation of PersonRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, person_id: PersonId) -> Optional[Person]:
        """Find a person by ID."""
        await self._db.round_trip()
        return self._db.people.get(person_id)

    async def find_by_ids(self, person_ids: list[PersonId]) -> list[Person]:
        """Find people by ID. Unknown IDs are skipped."""
        await self._db.round_trip()
        return [self._db.people[pid] for pid in person_ids if pid in self._db.people]

    async def search(
        self, directory_filter: DirectoryFilter, limit: int = 50, offset: int = 0
    ) -> list[Person]:
        """Search people with the shared directory matching rules."""
        await self._db.round_trip()
        matches = [
            p for p in self._db.people.values() if person_matches(p, directory_filter)
        ]
        matches.sort(key=sort_key)
        return matches[offset : offset + limit]
