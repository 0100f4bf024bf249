"""Tests for login and registration endpoints."""

import jwt
import pytest

from portal.config import settings
from portal.services.erp_client import MockRecordSource


class TestLogin:
    def test_success(self, client, regular_user):
        response = client.post("/auth/login", json={"email": "user@wholesale.com", "password": "user123"})
        assert response.status_code == 200
        data = response.json()
        assert data["user"] == {
            "id": regular_user.id,
            "email": "user@wholesale.com",
            "name": "Test User",
            "role": "USER",
        }
        claims = jwt.decode(data["token"], settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        assert claims["id"] == regular_user.id
        assert claims["role"] == "USER"

    def test_token_grants_access(self, client, regular_user):
        token = client.post(
            "/auth/login", json={"email": "user@wholesale.com", "password": "user123"}
        ).json()["token"]
        response = client.get("/user/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_wrong_password(self, client, regular_user):
        response = client.post("/auth/login", json={"email": "user@wholesale.com", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_unknown_email(self, client):
        response = client.post("/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_missing_fields(self, client):
        assert client.post("/auth/login", json={"email": "user@wholesale.com"}).status_code == 422
        assert client.post("/auth/login", json={"email": "", "password": "x"}).status_code == 422


class TestRegister:
    def test_success(self, client):
        response = client.post("/auth/register", json={
            "email": "new@example.com",
            "password": "secret123",
            "name": "New",
            "company": "Acme",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "new@example.com"
        assert data["user"]["role"] == "USER"
        assert data["token"]

        login = client.post("/auth/login", json={"email": "new@example.com", "password": "secret123"})
        assert login.status_code == 200

    def test_duplicate_email(self, client, regular_user):
        response = client.post("/auth/register", json={"email": "user@wholesale.com", "password": "secret123"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_invalid_email(self, client):
        response = client.post("/auth/register", json={"email": "not-an-email", "password": "secret123"})
        assert response.status_code == 422

    def test_missing_password(self, client):
        response = client.post("/auth/register", json={"email": "new@example.com"})
        assert response.status_code == 422


class TestEmailKeptAsTyped:
    @pytest.fixture
    def record_source(self):
        return MockRecordSource(orders=[
            {
                "order_number": "ORD-MIXED-1",
                "user_email": "Buyer@Example.COM",
                "status": "pending",
                "shipment_date": None,
                "created_at": "2024-02-01T00:00:00Z",
                "order_lines": [{"sku": "SKU001", "quantity": 6, "tracking_number": None, "shipped_at": None}],
            },
            {
                "order_number": "ORD-LOWER-1",
                "user_email": "buyer@example.com",
                "status": "pending",
                "shipment_date": None,
                "created_at": "2024-02-02T00:00:00Z",
                "order_lines": [{"sku": "SKU002", "quantity": 1, "tracking_number": None, "shipped_at": None}],
            },
        ])

    def test_register_login_and_see_orders(self, client):
        register = client.post("/auth/register", json={"email": "Buyer@Example.COM", "password": "secret123"})
        assert register.status_code == 201
        assert register.json()["user"]["email"] == "Buyer@Example.COM"

        login = client.post("/auth/login", json={"email": "Buyer@Example.COM", "password": "secret123"})
        assert login.status_code == 200
        token = login.json()["token"]

        orders = client.get("/orders", headers={"Authorization": f"Bearer {token}"}).json()["orders"]
        assert [o["orderNumber"] for o in orders] == ["ORD-MIXED-1"]

    def test_login_with_other_casing_fails(self, client):
        client.post("/auth/register", json={"email": "Buyer@Example.COM", "password": "secret123"})
        response = client.post("/auth/login", json={"email": "buyer@example.com", "password": "secret123"})
        assert response.status_code == 401
