import structlog
from sqlalchemy import select
from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import sessionmaker

from .mapping import apply_to_row, to_domain, to_row
from .metrics import db_errors_total, db_queries_total
from .models import PersonORM
from ..domain.entities import Person
from ..domain.errors import ConnectivityError, ConstraintViolation, StorageError
from ..domain.ports import IPersonRepository

logger = structlog.get_logger(__name__)


def translate_error(operation: str, exc: SQLAlchemyError) -> StorageError:
    """Map a SQLAlchemy failure onto the gateway's error taxonomy."""
    if isinstance(exc, (IntegrityError, DataError)):
        error, kind = ConstraintViolation(str(exc.orig or exc)), "constraint"
    elif isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        error, kind = ConnectivityError(str(exc)), "connectivity"
    else:
        error, kind = StorageError(str(exc)), "storage"
    db_errors_total.labels(operation=operation, kind=kind).inc()
    logger.warning("storage_error", operation=operation, kind=kind, error=type(exc).__name__)
    return error


class PersonRepository(IPersonRepository):
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list_all(self) -> list[Person]:
        db = self.session_factory()
        try:
            db_queries_total.labels(operation="list_all").inc()
            rows = db.execute(select(PersonORM)).scalars().all()
            return [to_domain(row) for row in rows]
        except SQLAlchemyError as e:
            raise translate_error("list_all", e) from e
        finally:
            db.close()

    def save(self, person: Person) -> Person:
        db = self.session_factory()
        try:
            db_queries_total.labels(operation="save").inc()
            row = db.get(PersonORM, person.id) if person.id is not None else None
            if row is None:
                # неизвестный id -> новая запись, id назначает БД
                row = to_row(person)
                db.add(row)
            else:
                apply_to_row(person, row)
            db.commit()
            db.refresh(row)
            saved = to_domain(row)
        except SQLAlchemyError as e:
            db.rollback()
            raise translate_error("save", e) from e
        finally:
            db.close()
        logger.info("person_saved", person_id=saved.id, created=saved.id != person.id)
        return saved
