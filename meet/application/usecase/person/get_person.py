"""Get person use case."""

from pydantic import BaseModel

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.views import parse_id
from meet.domain.model import Person
from meet.domain.service import PersonService
from meet.domain.value import PersonId


class ProfileItem(BaseModel):
    """Directory profile in responses."""

    bio: str | None = None
    interests: list[str] = []
    expertise: list[str] = []
    offerings: list[str] = []
    seeking: list[str] = []
    availability_text: str | None = None
    timezone: str | None = None
    wechat_id: str | None = None
    city: str | None = None


class PersonItem(BaseModel):
    """Person in responses."""

    id: str
    name: str
    username: str
    profile: ProfileItem | None = None

    @classmethod
    def from_person(cls, person: Person) -> "PersonItem":
        profile = None
        if person.profile is not None:
            profile = ProfileItem(**person.profile.model_dump())
        return cls(
            id=str(person.id),
            name=person.name,
            username=person.username,
            profile=profile,
        )


class GetPersonRequest(BaseModel):
    """Request to fetch one person."""

    person_id: str


class GetPersonUseCase(BaseUseCase):
    """Use case for viewing a person's directory entry."""

    def __init__(self, person_service: PersonService) -> None:
        """Initialize use case.

        Args:
            person_service: Person domain service
        """
        self.person_service = person_service

    async def execute(self, request: GetPersonRequest) -> PersonItem:
        """Get the person.

        Raises:
            NotFoundError: If person not found
        """
        person_id = parse_id(request.person_id, "person_id", PersonId)
        person = await self.person_service.get_by_id(person_id)
        return PersonItem.from_person(person)
