# tests/conftest.py
import os

# Point the app at SQLite before anything imports the engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
# The limiter's in-memory counters would otherwise carry across tests
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from admin_dashboard.main import app
from admin_dashboard.api import deps
from admin_dashboard.db.session import get_db
from admin_dashboard.db.base_class import Base
import admin_dashboard.models  # noqa: F401  (registers every table on Base)

ADMIN_EMAIL = "admin@example.com"

# --- In-memory Test Database Setup ---
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


# --- Mock Dependencies Setup ---
def override_require_admin():
    return deps.AdminVerification(authorized=True, email=ADMIN_EMAIL)


@pytest.fixture(scope="function")
def client(db_session):
    """
    TestClient backed by the in-memory database with the admin check
    bypassed.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.require_admin] = override_require_admin
    app.dependency_overrides[deps.get_admin_verification] = override_require_admin

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def mock_db():
    return MagicMock()


@pytest.fixture(scope="function")
def mock_db_client(mock_db):
    """TestClient with a MagicMock session, for asserting no query ran."""
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[deps.require_admin] = override_require_admin

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(db_session):
    """TestClient that runs the real admin check against the test database."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
