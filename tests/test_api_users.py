"""Tests for profile and admin account management endpoints."""

import pytest

from portal.services.auth_service import InvalidCredentialsError
from portal.services.user_service import UserService


class TestProfile:
    def test_get_profile(self, client, regular_user, user_headers):
        response = client.get("/user/profile", headers=user_headers)
        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["id"] == regular_user.id
        assert profile["email"] == "user@wholesale.com"
        assert profile["company"] == "Test Company"
        assert profile["role"] == "USER"
        assert "createdAt" in profile
        assert "password" not in profile

    def test_requires_authentication(self, client):
        assert client.get("/user/profile").status_code == 401

    def test_update_profile(self, client, user_headers):
        response = client.put("/user/profile", json={"phone": "555-0100"}, headers=user_headers)
        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["phone"] == "555-0100"
        assert profile["name"] == "Test User"

    def test_update_cannot_change_email_or_role(self, client, user_headers):
        response = client.put(
            "/user/profile",
            json={"email": "hacker@example.com", "role": "ADMIN"},
            headers=user_headers,
        )
        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["email"] == "user@wholesale.com"
        assert profile["role"] == "USER"


class TestChangePassword:
    def test_success(self, client, user_headers):
        response = client.put(
            "/user/password",
            json={"currentPassword": "user123", "newPassword": "newpass1"},
            headers=user_headers,
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password changed successfully"

        login = client.post("/auth/login", json={"email": "user@wholesale.com", "password": "newpass1"})
        assert login.status_code == 200

    def test_wrong_current_password(self, client, user_headers):
        response = client.put(
            "/user/password",
            json={"currentPassword": "nope", "newPassword": "newpass1"},
            headers=user_headers,
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Current password is incorrect"

    def test_new_password_too_short(self, client, user_headers):
        response = client.put(
            "/user/password",
            json={"currentPassword": "user123", "newPassword": "abc"},
            headers=user_headers,
        )
        assert response.status_code == 422

    def test_missing_fields(self, client, user_headers):
        response = client.put("/user/password", json={"currentPassword": "user123"}, headers=user_headers)
        assert response.status_code == 422


class TestAdminEndpoints:
    def test_non_admin_forbidden(self, client, user_headers):
        assert client.get("/user/all", headers=user_headers).status_code == 403
        assert client.post("/user/create", json={"email": "x@example.com"}, headers=user_headers).status_code == 403
        assert client.delete("/user/1", headers=user_headers).status_code == 403

    def test_anonymous_unauthenticated(self, client):
        assert client.get("/user/all").status_code == 401

    def test_list_users_newest_first(self, client, regular_user, other_user, admin_user, admin_headers):
        response = client.get("/user/all", headers=admin_headers)
        assert response.status_code == 200
        emails = [u["email"] for u in response.json()["users"]]
        assert emails == ["admin@wholesale.com", "another@example.com", "user@wholesale.com"]

    def test_create_user_with_default_password(self, client, admin_headers):
        response = client.post(
            "/user/create",
            json={"email": "buyer@example.com", "name": "Buyer", "company": "Shop"},
            headers=admin_headers,
        )
        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "buyer@example.com"
        assert data["user"]["role"] == "USER"
        assert "000000" in data["message"]

        login = client.post("/auth/login", json={"email": "buyer@example.com", "password": "000000"})
        assert login.status_code == 200

    def test_create_keeps_email_as_typed(self, client, admin_headers):
        response = client.post("/user/create", json={"email": "Shop.Owner@Example.COM"}, headers=admin_headers)
        assert response.status_code == 201
        assert response.json()["user"]["email"] == "Shop.Owner@Example.COM"

        login = client.post("/auth/login", json={"email": "Shop.Owner@Example.COM", "password": "000000"})
        assert login.status_code == 200

    def test_create_rejects_invalid_email(self, client, admin_headers):
        response = client.post("/user/create", json={"email": "not-an-email"}, headers=admin_headers)
        assert response.status_code == 422

    def test_create_duplicate(self, client, regular_user, admin_headers):
        response = client.post("/user/create", json={"email": "user@wholesale.com"}, headers=admin_headers)
        assert response.status_code == 400

    def test_create_requires_email(self, client, admin_headers):
        assert client.post("/user/create", json={"name": "No Email"}, headers=admin_headers).status_code == 422

    def test_delete_user(self, client, regular_user, admin_headers):
        response = client.delete(f"/user/{regular_user.id}", headers=admin_headers)
        assert response.status_code == 200
        emails = [u["email"] for u in client.get("/user/all", headers=admin_headers).json()["users"]]
        assert "user@wholesale.com" not in emails

    def test_cannot_delete_self(self, client, admin_user, admin_headers):
        response = client.delete(f"/user/{admin_user.id}", headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot delete your own account"

    def test_delete_unknown(self, client, admin_headers):
        assert client.delete("/user/9999", headers=admin_headers).status_code == 404

    def test_delete_invalid_id(self, client, admin_headers):
        assert client.delete("/user/abc", headers=admin_headers).status_code == 422


class TestUserService:
    def test_change_password_enforces_minimum_length(self, db_session, regular_user):
        service = UserService(db_session)
        with pytest.raises(ValueError):
            service.change_password(regular_user.id, "user123", "abc")

    def test_change_password_wrong_current(self, db_session, regular_user):
        service = UserService(db_session)
        with pytest.raises(InvalidCredentialsError):
            service.change_password(regular_user.id, "nope", "newpass1")
