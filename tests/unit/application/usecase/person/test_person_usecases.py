"""Unit tests for the person directory use cases."""

from uuid import uuid4

import pytest

from meet.application.usecase.person import (
    GetPersonRequest,
    GetPersonUseCase,
    ListPeopleRequest,
    ListPeopleUseCase,
)
from meet.domain.error import NotFoundError, ValidationError
from meet.domain.model import Profile
from meet.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_person, seed_people
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestListPeopleUseCase:
    """Tests for ListPeopleUseCase."""

    @pytest.mark.asyncio
    async def test_filters_and_returns_profiles(self, unit_env):
        """Filtered results include profile details."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        database.add_person(
            make_person(
                "Ada",
                profile=Profile(interests=("math",), city="London", bio="Analyst"),
            )
        )
        seed_people(database, "Bob")
        use_case = await unit_env.get(ListPeopleUseCase)

        # Act
        result = await use_case.execute(ListPeopleRequest(theme="math"))

        # Assert
        assert [p.name for p in result.people] == ["Ada"]
        assert result.people[0].profile.interests == ["math"]
        assert result.people[0].profile.bio == "Analyst"

    @pytest.mark.asyncio
    async def test_limit_capped(self, unit_env):
        """Oversized pages are clamped to the configured maximum."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        seed_people(database, *[f"Person {i:03d}" for i in range(105)])
        use_case = await unit_env.get(ListPeopleUseCase)

        # Act
        result = await use_case.execute(ListPeopleRequest(limit=500))

        # Assert
        assert len(result.people) == 100

    @pytest.mark.asyncio
    async def test_malformed_id_filter_rejected(self, unit_env):
        """IDs in the filter must be UUIDs."""
        # Arrange
        use_case = await unit_env.get(ListPeopleUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(ListPeopleRequest(ids=["not-a-uuid"]))


class TestGetPersonUseCase:
    """Tests for GetPersonUseCase."""

    @pytest.mark.asyncio
    async def test_get_person(self, unit_env):
        """A person without a profile is returned with profile None."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        (bob,) = seed_people(database, "Bob")
        use_case = await unit_env.get(GetPersonUseCase)

        # Act
        result = await use_case.execute(GetPersonRequest(person_id=str(bob.id)))

        # Assert
        assert result.id == str(bob.id)
        assert result.profile is None

    @pytest.mark.asyncio
    async def test_unknown_person(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetPersonUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetPersonRequest(person_id=str(uuid4())))
