"""Meeting routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from meet.application.usecase.meeting import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    ListMeetingsRequest,
    ListMeetingsResponse,
    ListMeetingsUseCase,
    UpdateMeetingRequest,
    UpdateMeetingUseCase,
)
from meet.application.usecase.views import MeetingItem
from meet.domain.error import DomainError
from meet.domain.service import JWTService
from meet.domain.value import MeetingStatus
from meet.interface.api.auth import authenticate
from meet.interface.error import to_http_exception

router = APIRouter(prefix="/meetings", tags=["meetings"], route_class=DishkaRoute)


class CreateMeetingAPIRequest(BaseModel):
    """API request accepting an invite and scheduling its meeting."""

    invite_id: str
    final_datetime_iso: datetime
    mode: str
    meeting_url: str | None = None
    location_text: str | None = None
    notes: str | None = None


class UpdateMeetingAPIRequest(BaseModel):
    """API request editing a meeting. Omitted fields are left unchanged."""

    final_datetime_iso: datetime | None = None
    mode: str | None = None
    meeting_url: str | None = None
    location_text: str | None = None
    notes: str | None = None
    status: MeetingStatus | None = None


@router.post("", response_model=MeetingItem, status_code=status.HTTP_201_CREATED)
async def create_meeting(
    request: CreateMeetingAPIRequest,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MeetingItem:
    """Accept an invite as its invitee and create the meeting.

    Raises:
        HTTPException: 403 if not the invitee, 404 if the invite is missing,
            409 if it is not pending or was accepted concurrently
    """
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await accept_invite_use_case.execute(
            AcceptInviteRequest(
                invite_id=request.invite_id,
                actor_id=actor_id,
                final_datetime_iso=request.final_datetime_iso,
                mode=request.mode,
                meeting_url=request.meeting_url,
                location_text=request.location_text,
                notes=request.notes,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=ListMeetingsResponse)
async def list_meetings(
    list_meetings_use_case: FromDishka[ListMeetingsUseCase],
    jwt_service: FromDishka[JWTService],
    status_filter: MeetingStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListMeetingsResponse:
    """List meetings where the current person is inviter or invitee."""
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await list_meetings_use_case.execute(
            ListMeetingsRequest(person_id=actor_id, status=status_filter)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{meeting_id}", response_model=MeetingItem)
async def update_meeting(
    meeting_id: str,
    request: UpdateMeetingAPIRequest,
    update_meeting_use_case: FromDishka[UpdateMeetingUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MeetingItem:
    """Reschedule, complete or cancel a scheduled meeting.

    Raises:
        HTTPException: 400 on an empty change set, 403 if not a party,
            404 if missing, 409 if the meeting is no longer scheduled
    """
    actor_id = authenticate(jwt_service, auth_token, authorization)

    # Only forward the fields the client actually sent
    changes = request.model_dump(exclude_unset=True)

    try:
        return await update_meeting_use_case.execute(
            UpdateMeetingRequest(meeting_id=meeting_id, actor_id=actor_id, **changes)
        )
    except DomainError as e:
        raise to_http_exception(e)
