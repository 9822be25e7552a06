"""Explicit translation between the domain ``Person`` and the ``person`` table row.

Column mapping lives here rather than on the entity, so the domain object
stays a plain dataclass and every converted field is visible in one place.
"""
from .models import PersonORM
from ..domain.entities import Person

MUTABLE_COLUMNS = ("firstname", "lastname", "email", "password", "tutor")


def to_domain(row: PersonORM) -> Person:
    return Person(
        id=row.id,
        firstname=row.firstname,
        lastname=row.lastname,
        email=row.email,
        password=row.password,
        tutor=bool(row.tutor),
    )


def apply_to_row(person: Person, row: PersonORM) -> PersonORM:
    """Overwrite every mutable column of ``row``; the primary key is never touched."""
    for column in MUTABLE_COLUMNS:
        setattr(row, column, getattr(person, column))
    row.tutor = bool(person.tutor)
    return row


def to_row(person: Person) -> PersonORM:
    """Build a fresh row; ``id`` is left for the database to assign."""
    return apply_to_row(person, PersonORM())
