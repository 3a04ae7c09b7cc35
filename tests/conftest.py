"""Shared fixtures: a fresh in-memory database per test."""

import os

# Setup environment for testing (before any fitnest import reads settings)
os.environ["FITNEST_DATABASE_URL"] = "sqlite://"
os.environ["FITNEST_LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from fitnest.database import create_db_engine, get_session, init_db
from fitnest.main import app
from fitnest.services.user_service import create_user


@pytest.fixture
def engine():
    db_engine = create_db_engine("sqlite://")
    init_db(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = _get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make_user(username: str, name: str | None = None, role: str = "member"):
        return create_user(session, username=username, password="secret", name=name or username.title(), role=role)
    return _make_user
