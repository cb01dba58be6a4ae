"""Invite routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from meet.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
    SlotInput,
    UpdateInviteRequest,
    UpdateInviteUseCase,
)
from meet.application.usecase.views import InviteItem
from meet.domain.error import DomainError
from meet.domain.service import JWTService
from meet.domain.value import InviteRole, InviteStatus
from meet.interface.api.auth import authenticate
from meet.interface.error import to_http_exception

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class SlotAPIInput(BaseModel):
    """Proposed slot in an API request."""

    datetime_iso: datetime
    mode: str


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite."""

    invitee_id: str
    message: str = ""
    proposed_slots: list[SlotAPIInput] = Field(default_factory=list)


class UpdateInviteAPIRequest(BaseModel):
    """API request for declining or cancelling an invite."""

    status: InviteStatus


@router.post("", response_model=InviteItem, status_code=status.HTTP_201_CREATED)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteItem:
    """Propose a one-on-one meeting to another person.

    Args:
        request: Invitee, message and 1-3 proposed slots
        create_invite_use_case: Create invite use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        The created pending invite

    Raises:
        HTTPException: 401 if not authenticated, 400 on invalid input,
            404 if the invitee does not exist
    """
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await create_invite_use_case.execute(
            CreateInviteRequest(
                inviter_id=actor_id,
                invitee_id=request.invitee_id,
                message=request.message,
                proposed_slots=[
                    SlotInput(datetime_iso=s.datetime_iso, mode=s.mode)
                    for s in request.proposed_slots
                ],
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("", response_model=ListInvitesResponse)
async def list_invites(
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    role: InviteRole = Query(default=InviteRole.INVITEE),
    status_filter: InviteStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListInvitesResponse:
    """List the current person's sent (inviter) or received (invitee) invites.

    Terminal invites are included, newest first.
    """
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await list_invites_use_case.execute(
            ListInvitesRequest(person_id=actor_id, role=role, status=status_filter)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{invite_id}", response_model=InviteItem)
async def update_invite(
    invite_id: str,
    request: UpdateInviteAPIRequest,
    update_invite_use_case: FromDishka[UpdateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InviteItem:
    """Decline (invitee) or cancel (inviter) a pending invite.

    Acceptance goes through ``POST /meetings``.

    Raises:
        HTTPException: 400 for other target statuses, 403 for the wrong
            party, 404 if missing, 409 if no longer pending
    """
    actor_id = authenticate(jwt_service, auth_token, authorization)

    try:
        return await update_invite_use_case.execute(
            UpdateInviteRequest(
                invite_id=invite_id, actor_id=actor_id, status=request.status
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
