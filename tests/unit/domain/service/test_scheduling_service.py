"""Unit tests for SchedulingService."""

import asyncio
from uuid import uuid4

import pytest

from meet.domain.error import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from meet.domain.repository import (
    InviteRepository,
    MeetingRepository,
    NotificationRepository,
)
from meet.domain.service import InviteService, SchedulingService
from meet.domain.value import (
    InviteId,
    InviteStatus,
    MeetingMode,
    MeetingStatus,
    PersonId,
)
from meet.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import future, make_slot, past, seed_people
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _pending_invite(unit_env):
    database = await unit_env.get(InMemoryDatabase)
    alice, bob, carol = seed_people(database, "Alice", "Bob", "Carol")
    invite_service = await unit_env.get(InviteService)
    invite = await invite_service.create_invite(
        alice.id, bob.id, "Lunch?", [make_slot(days=2)]
    )
    return invite, alice, bob, carol


class TestAcceptInvite:
    """Tests for accept_invite method."""

    @pytest.mark.asyncio
    async def test_accept_creates_meeting(self, unit_env):
        """Accepting should mark the invite accepted and schedule one meeting."""
        # Arrange
        invite, alice, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        invite_repo = await unit_env.get(InviteRepository)
        meeting_repo = await unit_env.get(MeetingRepository)
        when = future(days=3)

        # Act
        meeting = await scheduling_service.accept_invite(
            invite.id,
            bob.id,
            when,
            "online",
            meeting_url="https://meet.example.org/abc",
        )

        # Assert
        assert meeting.invite_id == invite.id
        assert meeting.status == MeetingStatus.SCHEDULED
        assert meeting.mode == MeetingMode.ONLINE
        assert meeting.final_datetime_iso == when
        assert meeting.inviter_id == alice.id
        assert meeting.invitee_id == bob.id

        stored_invite = await invite_repo.find_by_id(invite.id)
        assert stored_invite.status == InviteStatus.ACCEPTED
        assert await meeting_repo.count_by_invite(invite.id) == 1

    @pytest.mark.asyncio
    async def test_final_time_need_not_match_a_slot(self, unit_env):
        """The accepted time is free; proposed slots are only advisory."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        when = future(days=10, hours=5)

        # Act
        meeting = await scheduling_service.accept_invite(
            invite.id, bob.id, when, MeetingMode.OFFLINE, location_text="Cafe Nero"
        )

        # Assert
        assert meeting.final_datetime_iso == when
        assert meeting.location_text == "Cafe Nero"

    @pytest.mark.asyncio
    async def test_missing_venue_still_accepted(self, unit_env):
        """An online meeting without a URL is allowed."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)

        # Act
        meeting = await scheduling_service.accept_invite(
            invite.id, bob.id, future(), "online", meeting_url=""
        )

        # Assert
        assert meeting.meeting_url is None
        assert meeting.missing_venue

    @pytest.mark.asyncio
    async def test_accept_notifies_both_parties(self, unit_env):
        """Both people should hear about the scheduled meeting."""
        # Arrange
        invite, alice, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        notification_repo = await unit_env.get(NotificationRepository)

        # Act
        await scheduling_service.accept_invite(invite.id, bob.id, future(), "online")

        # Assert
        alice_titles = [n.title for n in await notification_repo.find_by_person(alice.id)]
        bob_titles = [n.title for n in await notification_repo.find_by_person(bob.id)]
        assert alice_titles == ["Invite accepted"]
        assert bob_titles == ["Meeting scheduled", "New invite"]

    @pytest.mark.asyncio
    async def test_inviter_cannot_accept(self, unit_env):
        """Only the invitee may accept."""
        # Arrange
        invite, alice, _, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        meeting_repo = await unit_env.get(MeetingRepository)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await scheduling_service.accept_invite(
                invite.id, alice.id, future(), "online"
            )
        assert await meeting_repo.count_by_invite(invite.id) == 0

    @pytest.mark.asyncio
    async def test_third_party_cannot_accept(self, unit_env):
        """Someone outside the invite cannot accept it."""
        # Arrange
        invite, _, _, carol = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await scheduling_service.accept_invite(
                invite.id, carol.id, future(), "online"
            )

    @pytest.mark.asyncio
    async def test_second_accept_conflicts(self, unit_env):
        """Accepting an already accepted invite should conflict."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        meeting_repo = await unit_env.get(MeetingRepository)
        await scheduling_service.accept_invite(invite.id, bob.id, future(), "online")

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await scheduling_service.accept_invite(
                invite.id, bob.id, future(days=4), "offline"
            )
        assert exc_info.value.current_state == "accepted"
        assert await meeting_repo.count_by_invite(invite.id) == 1

    @pytest.mark.asyncio
    async def test_declined_invite_cannot_be_accepted(self, unit_env):
        """A declined invite is terminal."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        invite_service = await unit_env.get(InviteService)
        scheduling_service = await unit_env.get(SchedulingService)
        await invite_service.update_invite_status(
            invite.id, InviteStatus.DECLINED, bob.id
        )

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await scheduling_service.accept_invite(
                invite.id, bob.id, future(), "online"
            )
        assert exc_info.value.current_state == "declined"

    @pytest.mark.asyncio
    async def test_cancelled_invite_cannot_be_accepted(self, unit_env):
        """Once the inviter withdraws, a late accept finds nothing pending."""
        # Arrange
        invite, alice, bob, _ = await _pending_invite(unit_env)
        invite_service = await unit_env.get(InviteService)
        scheduling_service = await unit_env.get(SchedulingService)
        meeting_repo = await unit_env.get(MeetingRepository)
        await invite_service.update_invite_status(
            invite.id, InviteStatus.CANCELLED, alice.id
        )

        # Act & Assert
        with pytest.raises(ConflictError, match="invite not pending") as exc_info:
            await scheduling_service.accept_invite(
                invite.id, bob.id, future(), "online"
            )
        assert exc_info.value.current_state == "cancelled"
        assert await meeting_repo.count_by_invite(invite.id) == 0

    @pytest.mark.asyncio
    async def test_concurrent_accepts_create_one_meeting(self, unit_env):
        """Of two simultaneous accepts exactly one wins."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        meeting_repo = await unit_env.get(MeetingRepository)

        # Act
        results = await asyncio.gather(
            scheduling_service.accept_invite(invite.id, bob.id, future(1), "online"),
            scheduling_service.accept_invite(invite.id, bob.id, future(2), "offline"),
            return_exceptions=True,
        )

        # Assert
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        meetings = [r for r in results if not isinstance(r, Exception)]
        assert len(conflicts) == 1
        assert len(meetings) == 1
        assert await meeting_repo.count_by_invite(invite.id) == 1

    @pytest.mark.asyncio
    async def test_unknown_invite_raises_not_found(self, unit_env):
        """Accepting a missing invite should raise NotFoundError."""
        # Arrange
        scheduling_service = await unit_env.get(SchedulingService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await scheduling_service.accept_invite(
                InviteId(uuid4()), PersonId(uuid4()), future(), "online"
            )

    @pytest.mark.asyncio
    async def test_unknown_mode_rejected(self, unit_env):
        """A mode other than online/offline should raise ValidationError."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)

        # Act & Assert
        with pytest.raises(ValidationError, match="mode"):
            await scheduling_service.accept_invite(
                invite.id, bob.id, future(), "hybrid"
            )

    @pytest.mark.asyncio
    async def test_past_time_rejected(self, unit_env):
        """A final time in the past should raise ValidationError."""
        # Arrange
        invite, _, bob, _ = await _pending_invite(unit_env)
        scheduling_service = await unit_env.get(SchedulingService)
        invite_repo = await unit_env.get(InviteRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await scheduling_service.accept_invite(invite.id, bob.id, past(), "online")
        stored = await invite_repo.find_by_id(invite.id)
        assert stored.status == InviteStatus.PENDING
