"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from meet.domain.model import Invite, Meeting, MeetingView, Notification, Person, Profile
from meet.domain.value import (
    InviteId,
    InviteStatus,
    MeetingId,
    MeetingMode,
    MeetingStatus,
    NotificationId,
    NotificationStatus,
    PersonId,
    Slot,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_person(row: Dict[str, Any]) -> Person:
    """Convert a people row, outer-joined with person_profiles, to a Person.

    Args:
        row: Database row as dict; profile columns are None when the person
            has no profile

    Returns:
        Person domain model
    """
    profile = None
    if row.get("profile_person_id") is not None:
        profile = Profile(
            bio=row.get("bio"),
            interests=tuple(row.get("interests") or ()),
            expertise=tuple(row.get("expertise") or ()),
            offerings=tuple(row.get("offerings") or ()),
            seeking=tuple(row.get("seeking") or ()),
            availability_text=row.get("availability_text"),
            timezone=row.get("timezone"),
            wechat_id=row.get("wechat_id"),
            city=row.get("city"),
        )
    return Person(
        id=PersonId(_uuid(row["id"])),
        name=row["name"],
        username=row["username"],
        profile=profile,
    )


def slot_to_json(slot: Slot) -> Dict[str, str]:
    """Serialize a slot for the proposed_slots JSONB column."""
    return {"datetime_iso": slot.datetime_iso.isoformat(), "mode": slot.mode.value}


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        inviter_id=PersonId(_uuid(row["inviter_id"])),
        invitee_id=PersonId(_uuid(row["invitee_id"])),
        message=row.get("message") or "",
        proposed_slots=tuple(Slot.model_validate(s) for s in row["proposed_slots"]),
        status=InviteStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": invite.id,
        "inviter_id": invite.inviter_id,
        "invitee_id": invite.invitee_id,
        "message": invite.message,
        "proposed_slots": [slot_to_json(s) for s in invite.proposed_slots],
        "status": invite.status.value,
        "created_at": invite.created_at,
        "updated_at": invite.updated_at,
    }


def row_to_meeting(row: Dict[str, Any]) -> Meeting:
    """Convert database row to Meeting domain model."""
    return Meeting(
        id=MeetingId(_uuid(row["id"])),
        invite_id=InviteId(_uuid(row["invite_id"])),
        final_datetime_iso=row["final_datetime_iso"],
        mode=MeetingMode(row["mode"]),
        meeting_url=row.get("meeting_url"),
        location_text=row.get("location_text"),
        notes=row.get("notes"),
        status=MeetingStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_meeting_view(row: Dict[str, Any]) -> MeetingView:
    """Convert a meeting row joined with its invite's parties to a MeetingView."""
    return MeetingView.from_meeting(
        row_to_meeting(row),
        inviter_id=PersonId(_uuid(row["inviter_id"])),
        invitee_id=PersonId(_uuid(row["invitee_id"])),
    )


def meeting_to_dict(meeting: Meeting) -> Dict[str, Any]:
    """Convert Meeting domain model to database dict."""
    return {
        "id": meeting.id,
        "invite_id": meeting.invite_id,
        "final_datetime_iso": meeting.final_datetime_iso,
        "mode": meeting.mode.value,
        "meeting_url": meeting.meeting_url,
        "location_text": meeting.location_text,
        "notes": meeting.notes,
        "status": meeting.status.value,
        "created_at": meeting.created_at,
        "updated_at": meeting.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        person_id=PersonId(_uuid(row["user_id"])),
        title=row["title"],
        content=row["content"],
        path=row.get("path"),
        status=NotificationStatus(row["status"]),
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return {
        "id": notification.id,
        "user_id": notification.person_id,
        "title": notification.title,
        "content": notification.content,
        "path": notification.path,
        "status": notification.status.value,
        "created_at": notification.created_at,
    }
