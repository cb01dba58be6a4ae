"""Shared in-memory storage backing the in-memory repositories."""

import asyncio

from meet.domain.model import Invite, Meeting, Notification, Person
from meet.domain.value import InviteId, MeetingId, PersonId


class InMemoryDatabase:
    """Tables and a write lock shared by all in-memory repositories.

    One instance stands in for one database. Check-and-set sections run
    under ``lock`` so concurrent coroutines see the same guarantees the
    PostgreSQL repositories get from conditional updates and the unique
    meeting index.
    """

    def __init__(self) -> None:
        self.people: dict[PersonId, Person] = {}
        self.invites: dict[InviteId, Invite] = {}
        self.meetings: dict[MeetingId, Meeting] = {}
        # Unique index: invite_id -> meeting_id
        self.meeting_by_invite: dict[InviteId, MeetingId] = {}
        self.notifications: list[Notification] = []
        self.commits = 0
        self.lock = asyncio.Lock()

    def add_person(self, person: Person) -> Person:
        """Seed the person store."""
        self.people[person.id] = person
        return person

    @staticmethod
    async def round_trip() -> None:
        """Yield to the event loop the way a driver call would."""
        await asyncio.sleep(0)
