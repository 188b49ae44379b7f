from datetime import timedelta

from jose import jwt

from dojo_api.core.security import create_access_token, decode_access_token
from tests.conftest import OWNER_EMAIL, OWNER_PASSWORD


class TestLogin:

    def test_login_returns_token_for_owner(self, client, owner, test_settings):
        response = client.post(
            "/login", json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD}
        )

        assert response.status_code == 200
        body = response.json()
        payload = decode_access_token(body["token"], test_settings)
        assert payload["id"] == 1
        assert payload["email"] == OWNER_EMAIL
        assert payload["role"] == "admin"

    def test_login_returns_user_summary_without_hash(self, client, owner):
        response = client.post(
            "/login", json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD}
        )

        user = response.json()["user"]
        assert user == {
            "id": 1,
            "email": OWNER_EMAIL,
            "role": "admin",
            "dojo_name": "Dojo Central",
            "logo": "https://cdn.example.com/logo.png",
        }
        assert "password_hash" not in response.text

    def test_unknown_email_is_404(self, client, owner):
        response = client.post(
            "/login", json={"email": "ghost@dojo.com", "password": OWNER_PASSWORD}
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "User does not exist"}

    def test_wrong_password_is_401(self, client, owner):
        response = client.post(
            "/login", json={"email": OWNER_EMAIL, "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "Incorrect password"}

    def test_missing_fields_are_rejected(self, client, owner):
        response = client.post("/login", json={"email": OWNER_EMAIL})

        assert response.status_code == 422


class TestAuthenticationGate:

    def test_missing_header_is_401(self, client, owner):
        response = client.get("/students")

        assert response.status_code == 401
        assert response.json() == {"detail": "Not authenticated"}

    def test_non_bearer_scheme_is_401(self, client, owner):
        response = client.get("/students", headers={"Authorization": "Basic abc"})

        assert response.status_code == 401

    def test_bearer_without_token_is_401(self, client, owner):
        response = client.get("/students", headers={"Authorization": "Bearer "})

        assert response.status_code == 401

    def test_garbage_token_is_403(self, client, owner):
        response = client.get(
            "/students", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 403
        assert response.json() == {"detail": "Invalid token"}

    def test_expired_token_is_403(self, client, owner, test_settings):
        token = create_access_token(
            {"id": owner.id, "email": owner.email, "role": owner.role},
            test_settings,
            expires_delta=timedelta(minutes=-1),
        )

        response = client.get(
            "/students", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 403
        assert response.json() == {"detail": "Token expired"}

    def test_token_from_other_secret_is_403(self, client, owner):
        token = jwt.encode(
            {"id": owner.id, "email": owner.email, "role": owner.role},
            "forged-secret",
            algorithm="HS256",
        )

        response = client.get(
            "/students", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 403

    def test_token_without_identity_claims_is_403(self, client, owner, test_settings):
        token = create_access_token({"email": owner.email}, test_settings)

        response = client.get(
            "/students", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 403

    def test_login_token_opens_protected_routes(self, client, owner):
        token = client.post(
            "/login", json={"email": OWNER_EMAIL, "password": OWNER_PASSWORD}
        ).json()["token"]

        response = client.get(
            "/students", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 200
        assert response.json() == []


def test_root_is_public_liveness_banner(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Backend online 🚀"
