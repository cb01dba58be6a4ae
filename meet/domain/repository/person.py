"""Person repository interface (read-only)."""

from abc import ABC, abstractmethod

from meet.domain.model.person import Person
from meet.domain.value import DirectoryFilter, PersonId


class PersonRepository(ABC):
    """Read access to the external person store."""

    @abstractmethod
    async def find_by_id(self, person_id: PersonId) -> Person | None:
        """Find a person by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, person_ids: list[PersonId]) -> list[Person]:
        """Find several people at once. Unknown IDs are skipped."""
        pass

    @abstractmethod
    async def search(
        self, directory_filter: DirectoryFilter, limit: int = 50, offset: int = 0
    ) -> list[Person]:
        """Find people matching a directory filter, ordered by name.

        Args:
            directory_filter: Criteria, all of which must hold
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            Matching people
        """
        pass
