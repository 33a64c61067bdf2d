from datetime import timedelta

from jose import jwt

from accountboard.config import settings
from accountboard.core.security import ALGORITHM, create_access_token
from accountboard.models import User
from tests.conftest import DEMO_EMAIL, DEMO_PASSWORD, create_user, login_headers


def test_health_endpoint_no_auth(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_endpoint_no_auth(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "AccountBoard API"


class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_demo_login(self, client, demo_company):
        response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"] == {
            "id": body["user"]["id"],
            "email": DEMO_EMAIL,
            "role": "manager",
            "companyId": demo_company.id,
            "companyName": "Demo Company",
            "isActive": True,
        }

    def test_token_claims(self, client, demo_company):
        response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})

        claims = jwt.decode(response.json()["token"], settings.SECRET_KEY, algorithms=[ALGORITHM])
        assert claims["sub"] == str(response.json()["user"]["id"])
        assert claims["company_id"] == demo_company.id
        assert claims["role"] == "manager"
        assert claims["exp"] > claims["iat"]

    def test_wrong_password(self, client):
        response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_email_has_same_message(self, client):
        response = client.post("/api/auth/login", json={"email": "ghost@demo.com", "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_inactive_user_cannot_log_in(self, client, db_session, demo_company):
        create_user(db_session, demo_company.id, "former@demo.com", is_active=False)

        response = client.post("/api/auth/login", json={"email": "former@demo.com", "password": "secret123"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_company_id_narrows_lookup(self, client, demo_company):
        response = client.post(
            "/api/auth/login",
            json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD, "companyId": demo_company.id + 1},
        )

        assert response.status_code == 401

    def test_missing_password_is_validation_error(self, client):
        response = client.post("/api/auth/login", json={"email": DEMO_EMAIL})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"


class TestTokenValidation:
    """Tests for bearer token checks on protected routes"""

    def test_valid_token_accepted(self, client, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == DEMO_EMAIL

    def test_missing_token_rejected(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_malformed_token_rejected(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["error"].startswith("Invalid token")

    def test_expired_token_rejected(self, client, demo_company):
        user_id = demo_company.users[0].id
        token = create_access_token(user_id, demo_company.id, "manager", expires_delta=timedelta(minutes=-1))

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_invalid_signature_rejected(self, client, demo_company):
        token = jwt.encode(
            {"sub": "1", "company_id": demo_company.id, "exp": 4102444800},
            "some-other-secret",
            algorithm=ALGORITHM,
        )

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_missing_company_claim_rejected(self, client):
        token = jwt.encode({"sub": "1", "exp": 4102444800}, settings.SECRET_KEY, algorithm=ALGORITHM)

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"error": "Token missing company identifier"}

    def test_non_numeric_subject_rejected(self, client, demo_company):
        token = jwt.encode(
            {"sub": "abc", "company_id": demo_company.id, "exp": 4102444800},
            settings.SECRET_KEY,
            algorithm=ALGORITHM,
        )

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"error": "Token has malformed identifiers"}

    def test_unknown_user_rejected(self, client, demo_company):
        token = create_access_token(9999, demo_company.id, "manager")

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json() == {"error": "User not found"}

    def test_deactivated_user_token_rejected(self, client, db_session, demo_company):
        user = create_user(db_session, demo_company.id, "temp@demo.com")
        headers = login_headers(client, "temp@demo.com", "secret123")
        user.is_active = False
        db_session.commit()

        response = client.get("/api/auth/me", headers=headers)

        assert response.status_code == 401


class TestSession:
    """Tests for logout and password change"""

    def test_logout(self, client, auth_headers):
        response = client.post("/api/auth/logout", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Logout successful"}

    def test_change_password(self, client, db_session, demo_company):
        create_user(db_session, demo_company.id, "staff@demo.com", password="first-pass")
        headers = login_headers(client, "staff@demo.com", "first-pass")

        response = client.put(
            "/api/auth/change-password",
            headers=headers,
            json={"currentPassword": "first-pass", "newPassword": "second-pass"},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Password changed successfully"}
        login_headers(client, "staff@demo.com", "second-pass")
        old = client.post("/api/auth/login", json={"email": "staff@demo.com", "password": "first-pass"})
        assert old.status_code == 401

    def test_change_password_wrong_current(self, client, auth_headers, db_session):
        response = client.put(
            "/api/auth/change-password",
            headers=auth_headers,
            json={"currentPassword": "not-it", "newPassword": "second-pass"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Current password is incorrect"}

    def test_change_password_too_short(self, client, auth_headers):
        response = client.put(
            "/api/auth/change-password",
            headers=auth_headers,
            json={"currentPassword": DEMO_PASSWORD, "newPassword": "123"},
        )

        assert response.status_code == 400

    def test_new_hash_uses_bcrypt(self, client, db_session, demo_company):
        user = create_user(db_session, demo_company.id, "hash@demo.com", password="first-pass")
        headers = login_headers(client, "hash@demo.com", "first-pass")

        client.put(
            "/api/auth/change-password",
            headers=headers,
            json={"currentPassword": "first-pass", "newPassword": "second-pass"},
        )

        db_session.refresh(user)
        assert db_session.get(User, user.id).password.startswith("$2b$")
