"""Tests for /api/messages"""
from datetime import datetime

MESSAGE = {
    "name": "Sam",
    "email": "sam@example.com",
    "subject": "Hello",
    "message": "Are you available for an internship?",
}


def test_create_message_stamps_created_at(client):
    r = client.post("/api/messages", json=MESSAGE)
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 1
    assert body["createdAt"].endswith("Z")
    datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))


def test_create_message_keeps_client_timestamp(client):
    r = client.post("/api/messages", json={**MESSAGE, "createdAt": "2025-01-31T12:00:00.000Z"})
    assert r.status_code == 201
    assert r.json()["createdAt"] == "2025-01-31T12:00:00.000Z"


def test_create_message_bad_timestamp(client):
    r = client.post("/api/messages", json={**MESSAGE, "createdAt": "yesterday"})
    assert r.status_code == 400
    assert r.json()["errors"][0]["path"] == ["createdAt"]


def test_create_message_invalid_email(client):
    r = client.post("/api/messages", json={**MESSAGE, "email": "not-an-email"})
    assert r.status_code == 400
    assert r.json()["message"] == "Validation error"


def test_create_message_empty_subject(client):
    r = client.post("/api/messages", json={**MESSAGE, "subject": ""})
    assert r.status_code == 400


def test_list_messages(client):
    assert client.get("/api/messages").json() == []
    client.post("/api/messages", json=MESSAGE)
    client.post("/api/messages", json={**MESSAGE, "name": "Kim"})
    body = client.get("/api/messages").json()
    assert [m["name"] for m in body] == ["Sam", "Kim"]
    assert [m["id"] for m in body] == [1, 2]


def test_messages_are_append_only(client):
    client.post("/api/messages", json=MESSAGE)
    assert client.get("/api/messages/1").status_code in (404, 405)
    assert client.put("/api/messages/1", json=MESSAGE).status_code in (404, 405)
    assert client.delete("/api/messages/1").status_code in (404, 405)
    assert len(client.get("/api/messages").json()) == 1
