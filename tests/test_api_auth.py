"""Auth endpoints and bearer-token handling."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from helpdesk.main import create_app

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, auth_header, register


def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "running"


def test_admin_seed_exists_after_startup(client):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["role"] == "admin"
    assert body["user"]["fullName"] == "System Administrator"


def test_seed_survives_restart(settings, client):
    with TestClient(create_app(settings)) as second:
        login = second.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        users = second.get("/api/admin/users", headers=auth_header(login.json()["token"])).json()
    assert [u["email"] for u in users].count(ADMIN_EMAIL) == 1


def test_register_returns_user_token(client, settings):
    body = register(client, "carol@example.com", full_name="Carol")
    claims = jwt.decode(body["token"], settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])

    assert body["user"] == {"id": claims["id"], "email": "carol@example.com", "fullName": "Carol", "role": "user"}
    assert claims["role"] == "user"
    assert claims["sub"] == str(claims["id"])


def test_token_lifetime_is_a_day(client, settings):
    body = register(client, "ttl@example.com")
    claims = jwt.decode(body["token"], settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert settings.JWT_EXPIRATION_MINUTES == 24 * 60
    # exp must be roughly 24h ahead
    remaining = datetime.fromtimestamp(claims["exp"], tz=timezone.utc) - datetime.now(timezone.utc)
    assert timedelta(hours=23) < remaining <= timedelta(hours=24)


def test_register_duplicate_email(client):
    register(client, "dup@example.com")
    response = client.post("/api/auth/register", json={"email": "dup@example.com", "password": "x"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "ConflictError"


def test_register_missing_fields(client):
    response = client.post("/api/auth/register", json={"email": "only@example.com"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "ValidationError"
    assert error["details"]["fields"] == {"password": "required"}
    assert error["path"] == "/api/auth/register"


@pytest.mark.parametrize("password", ["x" * 5000, "abc\x00def"])
def test_register_rejects_unhashable_password(client, password):
    response = client.post("/api/auth/register", json={"email": "pw@example.com", "password": password})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "ValidationError"
    assert "password" in error["details"]["fields"]

    login = client.post("/api/auth/login", json={"email": "pw@example.com", "password": password})
    assert login.status_code == 401


def test_login_wrong_password(client, alice):
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "AuthenticationError",
        "message": "Invalid credentials",
        "details": {},
        "path": "/api/auth/login",
    }


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"password": "x"})
    assert response.status_code == 400


def test_me(client, alice):
    response = client.get("/api/auth/me", headers=auth_header(alice["token"]))

    assert response.status_code == 200
    assert response.json()["email"] == "alice@example.com"
    assert "password_hash" not in response.json()


def test_missing_token(client):
    response = client.get("/api/tickets")

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Access token required"


def test_tampered_token(client, alice):
    response = client.get("/api/tickets", headers=auth_header(alice["token"] + "x"))
    assert response.status_code == 401


def test_expired_token(client, app):
    signer = app.state.context.signer
    token = signer.sign({"sub": "1", "id": 1, "email": ADMIN_EMAIL, "role": "admin"}, ttl=timedelta(seconds=-5))

    response = client.get("/api/tickets", headers=auth_header(token))

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Token expired"


def test_request_id_header(client):
    response = client.get("/health", headers={"X-Request-ID": "0f8fad5b-d9cb-469f-a165-70867728950e"})
    assert response.headers["X-Request-ID"] == "0f8fad5b-d9cb-469f-a165-70867728950e"
