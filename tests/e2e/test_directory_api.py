"""End-to-end tests for the people directory and health endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from meet.config import Settings
from meet.domain.model import Profile
from meet.interface.api.app import create_app
from meet.persistence.repository.inmemory import InMemoryDatabase
from meet.util.jwt import create_token
from tests.conftest import make_person
from tests.di import build_test_container


@pytest.fixture
def env():
    """Test client plus the in-memory database behind it."""
    container = build_test_container()
    database = asyncio.run(container.get(InMemoryDatabase))
    client = TestClient(create_app(container))
    return client, database


def auth(person) -> dict[str, str]:
    token = create_token(str(person.id), Settings().auth)
    return {"Authorization": f"Bearer {token}"}


class TestPeopleEndpoints:
    """End-to-end tests for /people."""

    def test_requires_authentication(self, env):
        client, _ = env

        response = client.get("/people")

        assert response.status_code == 401

    def test_filter_by_theme_and_city(self, env):
        """Directory filters are applied together."""
        # Arrange
        client, database = env
        ada = database.add_person(
            make_person(
                "Ada",
                profile=Profile(interests=("math",), city="London"),
            )
        )
        database.add_person(
            make_person("Grace", profile=Profile(expertise=("math",), city="NYC"))
        )

        # Act
        by_theme = client.get("/people", params={"theme": "math"}, headers=auth(ada))
        by_both = client.get(
            "/people", params={"theme": "math", "city": "London"}, headers=auth(ada)
        )

        # Assert
        assert [p["name"] for p in by_theme.json()["people"]] == ["Ada", "Grace"]
        assert [p["name"] for p in by_both.json()["people"]] == ["Ada"]

    def test_get_person(self, env):
        client, database = env
        ada = database.add_person(make_person("Ada"))

        found = client.get(f"/people/{ada.id}", headers=auth(ada))
        missing = client.get(
            "/people/00000000-0000-0000-0000-000000000001", headers=auth(ada)
        )

        assert found.status_code == 200
        assert found.json()["username"] == "ada"
        assert missing.status_code == 404


class TestHealthEndpoint:
    """End-to-end tests for /health."""

    def test_health(self, env):
        client, _ = env

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
