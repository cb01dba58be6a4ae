"""List people (directory search) use case."""

from pydantic import BaseModel, Field

from meet.application.usecase.base import BaseUseCase
from meet.application.usecase.person.get_person import PersonItem
from meet.application.usecase.views import parse_id
from meet.config import SchedulingSettings
from meet.domain.service import PersonService
from meet.domain.value import DirectoryFilter, PersonId


class ListPeopleRequest(BaseModel):
    """Directory search request. All given criteria must hold."""

    q: str | None = None
    theme: str | None = None
    interest: str | None = None
    expertise: str | None = None
    offering: str | None = None
    seeking: str | None = None
    city: str | None = None
    ids: list[str] | None = None
    limit: int = Field(default=50, ge=1)
    offset: int = Field(default=0, ge=0)


class ListPeopleResponse(BaseModel):
    """Directory page ordered by name."""

    people: list[PersonItem]


class ListPeopleUseCase(BaseUseCase):
    """Use case for browsing and filtering the people directory."""

    def __init__(
        self, person_service: PersonService, scheduling_settings: SchedulingSettings
    ) -> None:
        """Initialize use case.

        Args:
            person_service: Person domain service
            scheduling_settings: Provides the page size cap
        """
        self.person_service = person_service
        self.settings = scheduling_settings

    async def execute(self, request: ListPeopleRequest) -> ListPeopleResponse:
        """Search the directory. The page size is capped at list_limit_max."""
        ids = None
        if request.ids is not None:
            ids = frozenset(parse_id(i, "id", PersonId) for i in request.ids)

        directory_filter = DirectoryFilter(
            q=request.q,
            theme=request.theme,
            interest=request.interest,
            expertise=request.expertise,
            offering=request.offering,
            seeking=request.seeking,
            city=request.city,
            ids=ids,
        )
        limit = min(request.limit, self.settings.list_limit_max)

        people = await self.person_service.search(
            directory_filter, limit=limit, offset=request.offset
        )
        return ListPeopleResponse(people=[PersonItem.from_person(p) for p in people])
