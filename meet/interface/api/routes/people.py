"""People directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query

from meet.application.usecase.person import (
    GetPersonRequest,
    GetPersonUseCase,
    ListPeopleRequest,
    ListPeopleResponse,
    ListPeopleUseCase,
    PersonItem,
)
from meet.domain.error import DomainError
from meet.domain.service import JWTService
from meet.interface.api.auth import authenticate
from meet.interface.error import to_http_exception

router = APIRouter(prefix="/people", tags=["people"], route_class=DishkaRoute)


@router.get("", response_model=ListPeopleResponse)
async def list_people(
    list_people_use_case: FromDishka[ListPeopleUseCase],
    jwt_service: FromDishka[JWTService],
    q: str | None = Query(default=None),
    theme: str | None = Query(default=None),
    interest: str | None = Query(default=None),
    expertise: str | None = Query(default=None),
    offering: str | None = Query(default=None),
    seeking: str | None = Query(default=None),
    city: str | None = Query(default=None),
    ids: list[str] | None = Query(default=None),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListPeopleResponse:
    """Browse the directory. All given filters must match.

    ``theme`` matches interests or expertise; results are ordered by name.
    """
    authenticate(jwt_service, auth_token, authorization)

    try:
        return await list_people_use_case.execute(
            ListPeopleRequest(
                q=q,
                theme=theme,
                interest=interest,
                expertise=expertise,
                offering=offering,
                seeking=seeking,
                city=city,
                ids=ids,
                limit=limit,
                offset=offset,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{person_id}", response_model=PersonItem)
async def get_person(
    person_id: str,
    get_person_use_case: FromDishka[GetPersonUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> PersonItem:
    """Get one person's directory entry."""
    authenticate(jwt_service, auth_token, authorization)

    try:
        return await get_person_use_case.execute(GetPersonRequest(person_id=person_id))
    except DomainError as e:
        raise to_http_exception(e)
