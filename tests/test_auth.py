"""Tests for registration, login and the health endpoint."""

from datetime import timedelta

from calmmind.auth.service import create_token, hash_password, verify_password


def test_register_returns_public_user(client):
    response = client.post("/api/auth/register", json={"username": "kasun", "password": "pw", "name": "Kasun"})
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "kasun"
    assert body["language"] == "en"
    assert "password" not in body
    assert "createdAt" in body


def test_register_duplicate_username(client):
    client.post("/api/auth/register", json={"username": "kasun", "password": "pw"})
    response = client.post("/api/auth/register", json={"username": "kasun", "password": "other"})
    assert response.status_code == 409
    assert response.json()["message"] == "Username already registered"


def test_register_stores_hash(client, storage):
    client.post("/api/auth/register", json={"username": "kasun", "password": "pw"})
    stored = storage.get_user_by_username("kasun")
    assert stored.password != "pw"
    assert verify_password("pw", stored.password)


def test_login_and_me(client):
    client.post("/api/auth/register", json={"username": "kasun", "password": "pw", "language": "si"})
    login = client.post("/api/auth/login", json={"username": "kasun", "password": "pw"})
    assert login.status_code == 200
    body = login.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["username"] == "kasun"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['accessToken']}"})
    assert me.status_code == 200
    assert me.json()["language"] == "si"


def test_login_bad_password(client):
    client.post("/api/auth/register", json={"username": "kasun", "password": "pw"})
    response = client.post("/api/auth/login", json={"username": "kasun", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_user(client):
    response = client.post("/api/auth/login", json={"username": "ghost", "password": "pw"})
    assert response.status_code == 401


def test_me_without_token(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401


def test_expired_token_is_rejected(client, settings):
    token = create_token(1, settings, expires_delta=timedelta(minutes=-1))
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_unknown_user(client, settings):
    token = create_token(4242, settings)
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "User not found"


def test_hash_password_is_salted():
    assert hash_password("pw") != hash_password("pw")


def test_health(client, fake_client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "storage": "memory",
        "model": "gpt-4o",
        "apiKeyConfigured": True,
    }

    fake_client.configured = False
    assert client.get("/api/health").json()["apiKeyConfigured"] is False
