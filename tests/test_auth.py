# File: tests/test_auth.py

from datetime import datetime, timezone

from fastapi.testclient import TestClient
from sqlalchemy import func, select

from authapi.core.config import settings
from authapi.core.security import decode_access_token
from authapi.main import app
from authapi.models.user import User


def test_register_returns_public_fields_only(client):
    resp = client.post(
        "/api/register",
        json={"name": "Test", "email": "test@email.com", "password": "password"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"]
    assert body["data"]["name"] == "Test"
    assert body["data"]["email"] == "test@email.com"
    assert isinstance(body["data"]["id"], int)
    assert "password" not in body["data"]
    assert "password_hash" not in body["data"]
    assert "password" not in resp.text


def test_register_then_login_returns_token(client, registered_user):
    resp = client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert isinstance(body["token"], str) and body["token"]


def test_token_carries_user_id_email_and_future_expiry(client, registered_user, db):
    resp = client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    claims = decode_access_token(resp.json()["token"])

    user = db.scalar(select(User).where(User.email == registered_user["email"]))
    assert claims["id"] == user.id
    assert claims["email"] == "test@email.com"
    assert claims["exp"] > datetime.now(timezone.utc).timestamp()


def test_login_wrong_password_fails(client, registered_user):
    resp = client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": "not-the-password"},
    )
    assert resp.status_code == 401
    body = resp.json()
    assert body["success"] is False
    assert "token" not in body


def test_login_unknown_email_fails_with_same_message(client, registered_user):
    wrong_password = client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": "nope"},
    )
    unknown_email = client.post(
        "/api/login",
        json={"email": "nobody@email.com", "password": "password"},
    )
    assert unknown_email.status_code == 401
    assert unknown_email.json() == wrong_password.json()


def test_duplicate_email_is_rejected(client, registered_user, db):
    resp = client.post(
        "/api/register",
        json={"name": "Other", "email": "TEST@email.com", "password": "different"},
    )
    assert resp.status_code == 409
    assert resp.json()["success"] is False

    assert db.scalar(select(func.count()).select_from(User)) == 1
    # the original account still logs in with its own password
    login = client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    assert login.status_code == 200


def test_login_email_is_case_insensitive(client, registered_user):
    resp = client.post(
        "/api/login",
        json={"email": "Test@Email.com", "password": registered_user["password"]},
    )
    assert resp.status_code == 200


def test_register_validation_error(client):
    resp = client.post("/api/register", json={"name": "Test", "email": "not-an-email"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["success"] is False
    fields = {err["field"] for err in body["errors"]}
    assert {"email", "password"} <= fields


def test_register_rejects_password_longer_than_bcrypt_limit(client):
    resp = client.post(
        "/api/register",
        json={"name": "Test", "email": "long@email.com", "password": "x" * 73},
    )
    assert resp.status_code == 422


def test_register_rejects_blank_name(client):
    resp = client.post(
        "/api/register",
        json={"name": "   ", "email": "blank@email.com", "password": "password"},
    )
    assert resp.status_code == 422


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_login_signing_failure_returns_internal_error(registered_user, monkeypatch):
    # an RSA algorithm cannot sign with the shared HMAC secret
    monkeypatch.setattr(settings, "algorithm", "RS256")
    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.post(
            "/api/login",
            json={"email": registered_user["email"], "password": registered_user["password"]},
        )
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal server error"}
