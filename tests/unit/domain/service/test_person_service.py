"""Unit tests for PersonService and directory matching."""

from uuid import uuid4

import pytest

from meet.domain.error import NotFoundError
from meet.domain.model import Profile
from meet.domain.service import PersonService
from meet.domain.service.directory import person_matches
from meet.domain.value import DirectoryFilter, PersonId
from meet.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_person
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _directory(database: InMemoryDatabase):
    """Seed a small directory."""
    ada = database.add_person(
        make_person(
            "Ada Lovelace",
            profile=Profile(
                interests=("math", "poetry"),
                expertise=("engines",),
                offerings=("mentoring",),
                city="London",
            ),
        )
    )
    grace = database.add_person(
        make_person(
            "Grace Hopper",
            profile=Profile(
                interests=("compilers",),
                expertise=("math",),
                seeking=("cofounder",),
                city="New York",
            ),
        )
    )
    alan = database.add_person(make_person("Alan Turing"))
    return ada, grace, alan


class TestPersonMatches:
    """Tests for the directory filter predicate."""

    def test_empty_filter_matches_everyone(self):
        """No criteria means every person matches."""
        person = make_person("Alan Turing")

        assert person_matches(person, DirectoryFilter())

    def test_query_matches_name_or_username(self):
        """The free-text query is a case-insensitive substring match."""
        person = make_person("Alan Turing", username="enigma")

        assert person_matches(person, DirectoryFilter(q="turing"))
        assert person_matches(person, DirectoryFilter(q="ENIG"))
        assert not person_matches(person, DirectoryFilter(q="hopper"))

    def test_profile_criteria_need_a_profile(self):
        """People without a profile never match attribute filters."""
        person = make_person("Alan Turing")

        assert not person_matches(person, DirectoryFilter(city="London"))

    def test_theme_matches_interests_or_expertise(self):
        """A theme hits either list."""
        by_interest = make_person("A", profile=Profile(interests=("ml",)))
        by_expertise = make_person("B", profile=Profile(expertise=("ml",)))
        by_offering = make_person("C", profile=Profile(offerings=("ml",)))

        theme = DirectoryFilter(theme="ml")
        assert person_matches(by_interest, theme)
        assert person_matches(by_expertise, theme)
        assert not person_matches(by_offering, theme)

    def test_blank_criteria_ignored(self):
        """Empty strings from query parameters are treated as absent."""
        person = make_person("Alan Turing")

        assert person_matches(person, DirectoryFilter(q="  ", city=""))


class TestSearch:
    """Tests for search method."""

    @pytest.mark.asyncio
    async def test_criteria_intersect(self, unit_env):
        """All given criteria must hold."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        ada, grace, _ = _directory(database)
        person_service = await unit_env.get(PersonService)

        # Act
        math_people = await person_service.search(DirectoryFilter(theme="math"))
        math_in_london = await person_service.search(
            DirectoryFilter(theme="math", city="London")
        )

        # Assert
        assert [p.id for p in math_people] == [ada.id, grace.id]
        assert [p.id for p in math_in_london] == [ada.id]

    @pytest.mark.asyncio
    async def test_ordered_by_name_and_paginated(self, unit_env):
        """Results are sorted by name and sliced by limit/offset."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        ada, grace, alan = _directory(database)
        person_service = await unit_env.get(PersonService)

        # Act
        first_page = await person_service.search(DirectoryFilter(), limit=2)
        second_page = await person_service.search(
            DirectoryFilter(), limit=2, offset=2
        )

        # Assert
        assert [p.id for p in first_page] == [ada.id, alan.id]
        assert [p.id for p in second_page] == [grace.id]

    @pytest.mark.asyncio
    async def test_filter_by_ids(self, unit_env):
        """An ID list restricts the result set."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        _, grace, alan = _directory(database)
        person_service = await unit_env.get(PersonService)

        # Act
        result = await person_service.search(
            DirectoryFilter(ids=frozenset({grace.id, alan.id}))
        )

        # Assert
        assert {p.id for p in result} == {grace.id, alan.id}


class TestGetById:
    """Tests for get_by_id and ensure_exists."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        """Known people are returned with their profile."""
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        ada, _, _ = _directory(database)
        person_service = await unit_env.get(PersonService)

        # Act
        result = await person_service.get_by_id(ada.id)

        # Assert
        assert result.name == "Ada Lovelace"
        assert result.profile.city == "London"

    @pytest.mark.asyncio
    async def test_unknown_person_raises_not_found(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        # Arrange
        person_service = await unit_env.get(PersonService)
        missing = PersonId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await person_service.get_by_id(missing)
        with pytest.raises(NotFoundError):
            await person_service.ensure_exists(missing)
