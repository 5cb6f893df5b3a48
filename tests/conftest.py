"""
Pytest fixtures for the TIL app.

Each test gets its own in-memory SQLite database with migrations applied,
so the admin user is always present.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tilapp.database import get_db, init_db
from tilapp.main import app


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def engine():
    """Migrated in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """Creates a user through the API and returns its public JSON."""
    def _create_user(username="alice", name="Alice", password="secret", twitter_url=None):
        response = client.post(
            "/api/users",
            json={
                "name": name,
                "username": username,
                "password": password,
                "twitter_url": twitter_url,
            },
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _create_user


@pytest.fixture
def create_acronym(client):
    def _create_acronym(user_id, short="OMG", long="Oh My God"):
        response = client.post(
            "/api/acronyms",
            json={"short": short, "long": long, "user_id": user_id},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _create_acronym
