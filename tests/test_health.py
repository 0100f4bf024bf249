"""Tests for health and root endpoints."""

from portal.seed import SEED_USERS, seed
from portal.repositories.user_repository import UserRepository
from portal.services.auth_service import verify_password


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"
    assert data["erp"].startswith("healthy")


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_seed_is_idempotent(db_session):
    assert seed(db_session) == len(SEED_USERS)
    assert seed(db_session) == 0

    admin = UserRepository(db_session).get_by_email("admin@wholesale.com")
    assert admin.role == "ADMIN"
    assert verify_password("admin123", admin.password)
