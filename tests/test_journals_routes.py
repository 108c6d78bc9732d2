"""Tests for sync and history endpoints."""

import pytest

HISTORY_ROUTES = ["/api/mood-history", "/api/journal", "/api/daily-tips"]


@pytest.mark.parametrize("path", HISTORY_ROUTES)
def test_history_requires_session(client, path):
    response = client.get(path)
    assert response.status_code == 401
    assert response.json()["message"] == "User not authenticated"


def test_sync_requires_session(client):
    response = client.post("/api/sync", json={"journal": []})
    assert response.status_code == 401


@pytest.mark.parametrize("path", HISTORY_ROUTES)
def test_history_empty_for_new_user(client, auth_headers, path):
    response = client.get(path, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_sync_stores_records_for_session_user(client, auth_headers):
    payload = {
        "journal": [
            {"text": "Offline entry", "date": "2024-05-01", "mood": "sad", "moodScore": 0.3, "userId": 999},
            {"id": 17, "text": "Another", "date": "2024-05-02", "language": "hi"},
        ],
        "moodHistory": [
            {"date": "2024-05-01", "mood": "sad", "score": 0.3, "journalEntry": "Offline entry"},
        ],
        "dailyTips": [
            {"date": "2024-05-01", "affirmation": "I am calm.", "selfCare": ["Breathe"], "mood": "sad"},
        ],
    }
    response = client.post("/api/sync", json=payload, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}

    journal = client.get("/api/journal", headers=auth_headers).json()
    assert sorted(e["text"] for e in journal) == ["Another", "Offline entry"]
    me = client.get("/api/auth/me", headers=auth_headers).json()
    assert {e["userId"] for e in journal} == {me["id"]}

    history = client.get("/api/mood-history", headers=auth_headers).json()
    assert [(h["mood"], h["score"]) for h in history] == [("sad", 0.3)]

    tips = client.get("/api/daily-tips", headers=auth_headers).json()
    assert tips[0]["affirmation"] == "I am calm."
    assert tips[0]["selfCare"] == ["Breathe"]


def test_sync_with_empty_payload(client, auth_headers):
    response = client.post("/api/sync", json={}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_users_see_only_their_records(client):
    tokens = {}
    for name in ("amal", "bimal"):
        client.post("/api/auth/register", json={"username": name, "password": "pw"})
        login = client.post("/api/auth/login", json={"username": name, "password": "pw"}).json()
        tokens[name] = {"Authorization": f"Bearer {login['accessToken']}"}

    client.post(
        "/api/sync",
        json={"journal": [{"text": "amal's entry", "date": "2024-05-01"}]},
        headers=tokens["amal"],
    )

    assert len(client.get("/api/journal", headers=tokens["amal"]).json()) == 1
    assert client.get("/api/journal", headers=tokens["bimal"]).json() == []
