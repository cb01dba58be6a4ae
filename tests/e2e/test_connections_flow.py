"""End-to-end tests for the invite and meeting endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from meet.config import Settings
from meet.interface.api.app import create_app
from meet.persistence.repository.inmemory import InMemoryDatabase
from meet.util.jwt import create_token
from tests.conftest import future, past, seed_people
from tests.di import FailingCommitProvider, build_test_container


@pytest.fixture
def env():
    """Test client plus the in-memory database behind it."""
    container = build_test_container()
    database = asyncio.run(container.get(InMemoryDatabase))
    client = TestClient(create_app(container))
    return client, database


def auth(person) -> dict[str, str]:
    """Bearer header for a person."""
    token = create_token(str(person.id), Settings().auth)
    return {"Authorization": f"Bearer {token}"}


def invite_body(invitee, **overrides) -> dict:
    body = {
        "invitee_id": str(invitee.id),
        "message": "Coffee next week?",
        "proposed_slots": [
            {"datetime_iso": future(days=2).isoformat(), "mode": "online"},
            {"datetime_iso": future(days=3).isoformat(), "mode": "offline"},
        ],
    }
    body.update(overrides)
    return body


class TestInviteEndpoints:
    """End-to-end tests for /invites.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_requires_authentication(self, env):
        """Should return 401 without a token."""
        client, _ = env

        response = client.get("/invites")

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_invalid_token_rejected(self, env):
        """Should return 401 with a token that does not verify."""
        client, _ = env

        response = client.get("/invites", cookies={"auth_token": "invalid-token"})

        assert response.status_code == 401

    def test_cookie_token_accepted(self, env):
        """The auth_token cookie works like the bearer header."""
        client, database = env
        (alice,) = seed_people(database, "Alice")
        token = create_token(str(alice.id), Settings().auth)

        response = client.get("/invites", cookies={"auth_token": token})

        assert response.status_code == 200
        assert response.json() == {"invites": []}

    def test_create_and_list(self, env):
        """A created invite shows up for both parties."""
        # Arrange
        client, database = env
        alice, bob = seed_people(database, "Alice", "Bob")

        # Act
        created = client.post("/invites", json=invite_body(bob), headers=auth(alice))
        received = client.get("/invites", headers=auth(bob))
        sent = client.get("/invites", params={"role": "inviter"}, headers=auth(alice))

        # Assert
        assert created.status_code == 201
        invite = created.json()
        assert invite["status"] == "pending"
        assert invite["counterpart"]["username"] == "bob"
        assert [i["id"] for i in received.json()["invites"]] == [invite["id"]]
        assert received.json()["invites"][0]["counterpart"]["name"] == "Alice"
        assert [i["id"] for i in sent.json()["invites"]] == [invite["id"]]

    def test_invalid_input_is_400(self, env):
        """Self-invites, empty and overfull slot lists are rejected."""
        client, database = env
        alice, bob = seed_people(database, "Alice", "Bob")
        four_slots = [
            {"datetime_iso": future(days=d).isoformat(), "mode": "online"}
            for d in range(1, 5)
        ]

        self_invite = client.post(
            "/invites", json=invite_body(alice), headers=auth(alice)
        )
        no_slots = client.post(
            "/invites", json=invite_body(bob, proposed_slots=[]), headers=auth(alice)
        )
        too_many = client.post(
            "/invites",
            json=invite_body(bob, proposed_slots=four_slots),
            headers=auth(alice),
        )
        past_slot = client.post(
            "/invites",
            json=invite_body(
                bob,
                proposed_slots=[{"datetime_iso": past().isoformat(), "mode": "online"}],
            ),
            headers=auth(alice),
        )

        for response in (self_invite, no_slots, too_many, past_slot):
            assert response.status_code == 400
            assert response.json()["detail"]["error"] == "ValidationError"

    def test_unknown_invitee_is_404(self, env):
        """Inviting someone who does not exist returns 404."""
        client, database = env
        (alice,) = seed_people(database, "Alice")

        response = client.post(
            "/invites",
            json=invite_body(alice, invitee_id="00000000-0000-0000-0000-000000000001"),
            headers=auth(alice),
        )

        assert response.status_code == 404

    def test_decline_then_cancel_conflicts(self, env):
        """Once declined, the invite cannot be cancelled."""
        # Arrange
        client, database = env
        alice, bob = seed_people(database, "Alice", "Bob")
        invite_id = client.post(
            "/invites", json=invite_body(bob), headers=auth(alice)
        ).json()["id"]

        # Act
        wrong_party = client.patch(
            f"/invites/{invite_id}", json={"status": "declined"}, headers=auth(alice)
        )
        declined = client.patch(
            f"/invites/{invite_id}", json={"status": "declined"}, headers=auth(bob)
        )
        cancelled = client.patch(
            f"/invites/{invite_id}", json={"status": "cancelled"}, headers=auth(alice)
        )

        # Assert
        assert wrong_party.status_code == 403
        assert declined.status_code == 200
        assert declined.json()["status"] == "declined"
        assert cancelled.status_code == 409
        assert cancelled.json()["detail"]["current_state"] == "declined"

    def test_status_accepted_not_allowed_through_patch(self, env):
        """Acceptance goes through POST /meetings."""
        client, database = env
        alice, bob = seed_people(database, "Alice", "Bob")
        invite_id = client.post(
            "/invites", json=invite_body(bob), headers=auth(alice)
        ).json()["id"]

        response = client.patch(
            f"/invites/{invite_id}", json={"status": "accepted"}, headers=auth(bob)
        )

        assert response.status_code == 409
        assert response.json()["detail"]["current_state"] == "pending"


class TestMeetingEndpoints:
    """End-to-end tests for /meetings."""

    def _accept(self, client, database):
        alice, bob = seed_people(database, "Alice", "Bob")
        invite_id = client.post(
            "/invites", json=invite_body(bob), headers=auth(alice)
        ).json()["id"]
        response = client.post(
            "/meetings",
            json={
                "invite_id": invite_id,
                "final_datetime_iso": future(days=4).isoformat(),
                "mode": "online",
                "meeting_url": "https://meet.example.org/xyz",
            },
            headers=auth(bob),
        )
        return response, invite_id, alice, bob

    def test_accept_schedules_meeting(self, env):
        """Accepting returns the meeting and flips the invite."""
        # Arrange & Act
        client, database = env
        response, invite_id, alice, _ = self._accept(client, database)

        # Assert
        assert response.status_code == 201
        meeting = response.json()
        assert meeting["invite_id"] == invite_id
        assert meeting["status"] == "scheduled"
        assert meeting["counterpart"]["name"] == "Alice"

        sent = client.get(
            "/invites", params={"role": "inviter"}, headers=auth(alice)
        ).json()
        assert sent["invites"][0]["status"] == "accepted"

        listed = client.get("/meetings", headers=auth(alice)).json()
        assert [m["id"] for m in listed["meetings"]] == [meeting["id"]]

    def test_second_accept_conflicts(self, env):
        """The same invite cannot produce a second meeting."""
        client, database = env
        _, invite_id, _, bob = self._accept(client, database)

        again = client.post(
            "/meetings",
            json={
                "invite_id": invite_id,
                "final_datetime_iso": future(days=5).isoformat(),
                "mode": "offline",
            },
            headers=auth(bob),
        )

        assert again.status_code == 409
        assert again.json()["detail"]["current_state"] == "accepted"

    def test_inviter_cannot_accept(self, env):
        """Only the invitee may accept."""
        client, database = env
        alice, bob = seed_people(database, "Alice", "Bob")
        invite_id = client.post(
            "/invites", json=invite_body(bob), headers=auth(alice)
        ).json()["id"]

        response = client.post(
            "/meetings",
            json={
                "invite_id": invite_id,
                "final_datetime_iso": future().isoformat(),
                "mode": "online",
            },
            headers=auth(alice),
        )

        assert response.status_code == 403

    def test_reschedule_complete_then_conflict(self, env):
        """Edits apply while scheduled and stop once completed."""
        # Arrange
        client, database = env
        response, _, alice, bob = self._accept(client, database)
        meeting_id = response.json()["id"]

        # Act
        moved = client.patch(
            f"/meetings/{meeting_id}",
            json={"mode": "offline", "location_text": "Cafe"},
            headers=auth(alice),
        )
        completed = client.patch(
            f"/meetings/{meeting_id}", json={"status": "completed"}, headers=auth(bob)
        )
        late_edit = client.patch(
            f"/meetings/{meeting_id}", json={"notes": "late"}, headers=auth(alice)
        )

        # Assert
        assert moved.status_code == 200
        assert moved.json()["mode"] == "offline"
        assert moved.json()["meeting_url"] == "https://meet.example.org/xyz"
        assert completed.json()["status"] == "completed"
        assert late_edit.status_code == 409

    def test_empty_update_is_400(self, env):
        """A PATCH with nothing in it is rejected."""
        client, database = env
        response, _, alice, _ = self._accept(client, database)

        empty = client.patch(
            f"/meetings/{response.json()['id']}", json={}, headers=auth(alice)
        )

        assert empty.status_code == 400

    def test_malformed_id_is_400(self, env):
        """IDs that are not UUIDs are validation errors, not 500s."""
        client, database = env
        (alice,) = seed_people(database, "Alice")

        response = client.patch(
            "/meetings/not-a-uuid", json={"notes": "x"}, headers=auth(alice)
        )

        assert response.status_code == 400


class TestNotificationEndpoints:
    """End-to-end tests for /notifications."""

    def test_feed_and_mark_read(self, env):
        """Invites land in the invitee's feed and can be marked read."""
        # Arrange
        client, database = env
        alice, bob = seed_people(database, "Alice", "Bob")
        client.post("/invites", json=invite_body(bob), headers=auth(alice))

        # Act
        feed = client.get("/notifications", headers=auth(bob)).json()
        marked = client.post("/notifications/read", json={}, headers=auth(bob))
        unread = client.get(
            "/notifications", params={"status": "unread"}, headers=auth(bob)
        ).json()

        # Assert
        assert [n["title"] for n in feed["notifications"]] == ["New invite"]
        assert marked.json() == {"marked": 1}
        assert unread["notifications"] == []


@pytest.fixture
def failing_commit_env():
    """Like env, but every commit is refused by storage."""
    container = build_test_container(overrides=(FailingCommitProvider(),))
    database = asyncio.run(container.get(InMemoryDatabase))
    client = TestClient(create_app(container))
    return client, database


class TestCommitFailure:
    """A write that cannot be committed is never reported as a success."""

    def test_create_invite_is_503(self, failing_commit_env):
        """The client sees a retryable error instead of 201."""
        # Arrange
        client, database = failing_commit_env
        alice, bob = seed_people(database, "Alice", "Bob")

        # Act
        response = client.post("/invites", json=invite_body(bob), headers=auth(alice))

        # Assert
        assert response.status_code == 503
        assert response.headers["Retry-After"] == "1"
        assert response.json()["detail"]["error"] == "TransientError"

    def test_mark_read_is_503(self, failing_commit_env):
        """Marking notifications read reports the failed commit too."""
        client, database = failing_commit_env
        (alice,) = seed_people(database, "Alice")

        response = client.post("/notifications/read", json={}, headers=auth(alice))

        assert response.status_code == 503

    def test_reads_unaffected(self, failing_commit_env):
        """Requests that write nothing do not commit."""
        client, database = failing_commit_env
        (alice,) = seed_people(database, "Alice")

        response = client.get("/invites", headers=auth(alice))

        assert response.status_code == 200
