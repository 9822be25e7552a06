import os
import sys
import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from person_service.infrastructure.models import Base
from person_service.infrastructure.repositories import PersonRepository
from person_service.main import create_app


@pytest.fixture
def test_engine():
    """Общая in-memory SQLite БД для всех потоков TestClient"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture
def repository(session_factory):
    return PersonRepository(session_factory)


@pytest.fixture
def client(repository, test_engine):
    app = create_app(repository=repository, engine=test_engine)
    with TestClient(app) as c:
        yield c
