"""Person directory use cases."""

from meet.application.usecase.person.get_person import (
    GetPersonRequest,
    GetPersonUseCase,
    PersonItem,
    ProfileItem,
)
from meet.application.usecase.person.list_people import (
    ListPeopleRequest,
    ListPeopleResponse,
    ListPeopleUseCase,
)

__all__ = [
    "GetPersonRequest",
    "GetPersonUseCase",
    "ListPeopleRequest",
    "ListPeopleResponse",
    "ListPeopleUseCase",
    "PersonItem",
    "ProfileItem",
]
