"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from meet.domain.model import Person, Profile
from meet.domain.value import MeetingMode, PersonId, Slot
from meet.persistence.repository.inmemory import InMemoryDatabase

# Spans and logs from services stay local during tests
logfire.configure(send_to_logfire=False, console=False)


def future(days: int = 1, hours: int = 0) -> datetime:
    """A UTC time safely in the future."""
    return datetime.now(timezone.utc) + timedelta(days=days, hours=hours)


def past(days: int = 1) -> datetime:
    """A UTC time in the past."""
    return datetime.now(timezone.utc) - timedelta(days=days)


def make_slot(days: int = 1, mode: MeetingMode = MeetingMode.ONLINE) -> Slot:
    """Build a proposed slot `days` from now."""
    return Slot(datetime_iso=future(days), mode=mode)


def make_person(
    name: str,
    username: str | None = None,
    profile: Profile | None = None,
) -> Person:
    """Build a person with a fresh ID."""
    return Person(
        id=PersonId(uuid4()),
        name=name,
        username=username or name.lower().replace(" ", "_"),
        profile=profile,
    )


def seed_people(database: InMemoryDatabase, *names: str) -> list[Person]:
    """Add people with the given names to the in-memory person store."""
    return [database.add_person(make_person(name)) for name in names]
