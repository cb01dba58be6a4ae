"""Person domain service."""

import logfire

from meet.domain.error import NotFoundError
from meet.domain.model import Person
from meet.domain.repository import PersonRepository
from meet.domain.value import DirectoryFilter, PersonId

from .base import Service


class PersonService(Service):
    """Read-only access to the person store."""

    def __init__(self, person_repository: PersonRepository) -> None:
        """Initialize person service.

        Args:
            person_repository: Person repository
        """
        self.person_repository = person_repository

    async def get_by_id(self, person_id: PersonId) -> Person:
        """Get person by ID.

        Args:
            person_id: Person ID

        Returns:
            Person entity

        Raises:
            NotFoundError: If person not found
        """
        with logfire.span("person_service.get_by_id", person_id=str(person_id)):
            person = await self.person_repository.find_by_id(person_id)
            if not person:
                logfire.warn("Person not found", person_id=str(person_id))
                raise NotFoundError("Person", str(person_id))
            return person

    async def ensure_exists(self, *person_ids: PersonId) -> None:
        """Raise NotFoundError for the first unknown person ID."""
        found = await self.person_repository.find_by_ids(list(person_ids))
        known = {p.id for p in found}
        for person_id in person_ids:
            if person_id not in known:
                logfire.warn("Person not found", person_id=str(person_id))
                raise NotFoundError("Person", str(person_id))

    async def get_many(self, person_ids: list[PersonId]) -> dict[PersonId, Person]:
        """Get people by ID, keyed by ID. Unknown IDs are left out."""
        if not person_ids:
            return {}
        people = await self.person_repository.find_by_ids(list(set(person_ids)))
        return {p.id: p for p in people}

    async def search(
        self, directory_filter: DirectoryFilter, limit: int = 50, offset: int = 0
    ) -> list[Person]:
        """Search the directory.

        Args:
            directory_filter: Criteria, all of which must hold
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            Matching people ordered by name
        """
        with logfire.span(
            "person_service.search",
            q=directory_filter.q,
            theme=directory_filter.theme,
            limit=limit,
            offset=offset,
        ):
            people = await self.person_repository.search(
                directory_filter, limit=limit, offset=offset
            )
            logfire.info("Directory searched", count=len(people))
            return people
