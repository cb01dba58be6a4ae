"""People directory filtering.

A plain attribute-intersection match over person records, shared by the
in-memory person store and the tests. The PostgreSQL store expresses the
same rules in SQL.
"""

from meet.domain.model.person import Person
from meet.domain.value import DirectoryFilter


def person_matches(person: Person, directory_filter: DirectoryFilter) -> bool:
    """Check whether a person satisfies every criterion of the filter."""
    f = directory_filter

    if f.ids is not None and person.id not in f.ids:
        return False

    if f.q:
        needle = f.q.lower()
        if needle not in person.name.lower() and needle not in person.username.lower():
            return False

    profile = person.profile
    needs_profile = any(
        (f.theme, f.interest, f.expertise, f.offering, f.seeking, f.city)
    )
    if not needs_profile:
        return True
    if profile is None:
        return False

    if f.interest and f.interest not in profile.interests:
        return False
    if f.expertise and f.expertise not in profile.expertise:
        return False
    if f.offering and f.offering not in profile.offerings:
        return False
    if f.seeking and f.seeking not in profile.seeking:
        return False
    if f.city and profile.city != f.city:
        return False
    if f.theme and not (
        f.theme in profile.interests or f.theme in profile.expertise
    ):
        return False

    return True


def sort_key(person: Person) -> tuple[str, str]:
    """Directory ordering: by name, then username."""
    return (person.name.lower(), person.username.lower())
