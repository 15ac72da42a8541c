"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from bookmark_api.config import Settings
from bookmark_api.database import Base, get_db
from bookmark_api.main import create_app


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/bookmarks", "/bookmarks_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

TEST_JWT_SECRET = "test-secret"  # noqa: S105

settings = Settings(
    database_url=SQLALCHEMY_DATABASE_URL,
    jwt_secret=TEST_JWT_SECRET,
    environment="test",
    log_level="WARNING",
)
app = create_app(settings)
TestingSessionLocal = app.state.database.session_factory


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    app.state.database.create_all()
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def signup(client, email: str, password: str) -> AuthHeaders:
    """Register a user and return auth headers carrying their id and email."""
    response = client.post("/auth/signup", json={"email": email, "password": password})
    assert response.status_code == 201
    token = response.json()["access_token"]

    headers = AuthHeaders({"Authorization": f"Bearer {token}"}, email=email)
    me = client.get("/users/me", headers=headers)
    assert me.status_code == 200
    headers.user_id = me.json()["id"]
    return headers


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return signup(client, "test@example.com", "testpass123")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return signup(client, "other@example.com", "otherpass123")


@pytest.fixture
def bookmark(client, auth_headers):
    """Create a bookmark owned by the auth_headers user."""
    response = client.post(
        "/bookmarks",
        headers=auth_headers,
        json={
            "title": "FastAPI docs",
            "description": "Framework reference",
            "link": "https://fastapi.tiangolo.com",
        },
    )
    assert response.status_code == 201
    return response.json()
