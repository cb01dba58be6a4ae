"""PostgreSQL implementation of Person repository."""

from typing import Optional

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from meet.domain.model import Person
from meet.domain.repository import PersonRepository
from meet.domain.value import DirectoryFilter, PersonId
from meet.persistence.errors import translate_db_errors
from meet.persistence.mappers import row_to_person
from meet.persistence.tables import people_table, person_profiles_table

_people = people_table.c
_profiles = person_profiles_table.c


def _person_select() -> Select:
    """People outer-joined with their profile."""
    return select(
        people_table,
        _profiles.person_id.label("profile_person_id"),
        _profiles.bio,
        _profiles.interests,
        _profiles.expertise,
        _profiles.offerings,
        _profiles.seeking,
        _profiles.availability_text,
        _profiles.timezone,
        _profiles.wechat_id,
        _profiles.city,
    ).select_from(
        people_table.outerjoin(
            person_profiles_table, _profiles.person_id == _people.id
        )
    )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresPersonRepository(PersonRepository):
    """PostgreSQL implementation of PersonRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_db_errors
    async def find_by_id(self, person_id: PersonId) -> Optional[Person]:
        """Find a person by ID."""
        stmt = _person_select().where(_people.id == person_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_person(dict(row)) if row else None

    @translate_db_errors
    async def find_by_ids(self, person_ids: list[PersonId]) -> list[Person]:
        """Find people by ID. Unknown IDs are skipped."""
        if not person_ids:
            return []
        stmt = _person_select().where(_people.id.in_(person_ids))
        result = await self.session.execute(stmt)
        return [row_to_person(dict(row)) for row in result.mappings().all()]

    @translate_db_errors
    async def search(
        self, directory_filter: DirectoryFilter, limit: int = 50, offset: int = 0
    ) -> list[Person]:
        """Search the directory.

        Array criteria use containment, q is a case-insensitive substring
        match on name or username, city is an exact match.
        """
        f = directory_filter
        stmt = _person_select()

        if f.ids is not None:
            stmt = stmt.where(_people.id.in_(list(f.ids)))
        if f.q:
            pattern = f"%{_escape_like(f.q)}%"
            stmt = stmt.where(
                or_(
                    _people.name.ilike(pattern, escape="\\"),
                    _people.username.ilike(pattern, escape="\\"),
                )
            )
        if f.interest:
            stmt = stmt.where(_profiles.interests.contains([f.interest]))
        if f.expertise:
            stmt = stmt.where(_profiles.expertise.contains([f.expertise]))
        if f.offering:
            stmt = stmt.where(_profiles.offerings.contains([f.offering]))
        if f.seeking:
            stmt = stmt.where(_profiles.seeking.contains([f.seeking]))
        if f.city:
            stmt = stmt.where(_profiles.city == f.city)
        if f.theme:
            stmt = stmt.where(
                or_(
                    _profiles.interests.contains([f.theme]),
                    _profiles.expertise.contains([f.theme]),
                )
            )

        stmt = (
            stmt.order_by(func.lower(_people.name), func.lower(_people.username))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_person(dict(row)) for row in result.mappings().all()]
