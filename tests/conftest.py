"""Pytest fixtures for wholesale portal tests."""

import os

# Must be set before portal.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["ERP_SOURCE"] = "mock"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portal.api.deps import get_source
from portal.database import Base, get_db
from portal.main import app
from portal.models.user import Role
from portal.repositories.user_repository import UserRepository
from portal.services.auth_service import create_access_token, hash_password
from portal.services.erp_client import MockRecordSource


@pytest.fixture
def db_session():
    """In-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def record_source():
    """Mock ERP with the default fixture catalog and orders."""
    return MockRecordSource()


@pytest.fixture
def client(db_session, record_source):
    """Test client wired to the test database and mock ERP."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_source] = lambda: record_source
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_user(db_session, email, password="secret123", role=Role.USER, **extra):
    return UserRepository(db_session).create({
        "email": email,
        "password": hash_password(password),
        "role": role.value,
        **extra,
    })


def bearer(user):
    token = create_access_token(user.id, user.email, user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def regular_user(db_session):
    return make_user(db_session, "user@wholesale.com", password="user123", name="Test User", company="Test Company")


@pytest.fixture
def other_user(db_session):
    return make_user(db_session, "another@example.com")


@pytest.fixture
def admin_user(db_session):
    return make_user(db_session, "admin@wholesale.com", password="admin123", role=Role.ADMIN, name="Admin User")


@pytest.fixture
def user_headers(regular_user):
    return bearer(regular_user)


@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)


@pytest.fixture
def user_factory(db_session):
    """Create accounts on demand: user_factory(email, password=..., role=...)."""

    def factory(email, password="secret123", role=Role.USER, **extra):
        return make_user(db_session, email, password=password, role=role, **extra)

    return factory


@pytest.fixture
def headers_for():
    """Authorization headers for a given account."""
    return bearer
