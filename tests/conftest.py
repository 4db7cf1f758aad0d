"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from marketplace.config import Settings
from marketplace.database import Base, create_db_engine, create_session_factory, init_db
from marketplace.main import create_app
from marketplace.services.auth import AuthService, PasswordHasher
from marketplace.services.listing_service import ListingService
from marketplace.store import SqlAlchemyStore


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rsplit("/", 1)[0] + "/marketplace_test"
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# Minimum bcrypt work factor keeps the suite fast
TEST_SETTINGS = Settings(
    database_url=SQLALCHEMY_DATABASE_URL,
    environment="test",
    bcrypt_rounds=4,
)

engine = create_db_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = create_session_factory(engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    # Rebuild so a schema left by an older checkout never lingers
    Base.metadata.drop_all(bind=engine)
    init_db(engine)
    yield
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def clean_tables():
    """Remove all rows after each test."""
    yield

    with TestingSessionLocal() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()


@pytest.fixture
def store():
    """Store backed by the test database."""
    return SqlAlchemyStore(TestingSessionLocal)


@pytest.fixture
def auth_service(store):
    return AuthService(store, PasswordHasher(rounds=4))


@pytest.fixture
def listing_service(store):
    return ListingService(store)


@pytest.fixture
def app():
    """Application wired against the test database."""
    return create_app(TEST_SETTINGS)


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the app's startup."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register users over the API and get identity headers for them."""

    def _register(email: str, password: str = "testpass123", **fields) -> AuthHeaders:
        payload = {
            "first_name": "Test",
            "last_name": "User",
            "email": email,
            "password": password,
            "phone_number": "555-0100",
            **fields,
        }
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201
        user = response.json()["user"]
        return AuthHeaders({"X-User-Email": user["email"]}, user_id=user["id"], email=user["email"])

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Create a user and return identity headers with user info."""
    return register_user("test@example.com", first_name="Test", last_name="Seller")


@pytest.fixture
def other_headers(register_user):
    """A second user who owns nothing."""
    return register_user("other@example.com", first_name="Other", last_name="Buyer")


@pytest.fixture
def test_settings():
    return TEST_SETTINGS
