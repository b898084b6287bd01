"""Tests for /api/achievements"""

ACHIEVEMENT = {
    "title": "Hackathon Winner",
    "organization": "City Hackathon • 2025",
    "description": "First place out of 40 teams.",
    "icon": "trophy",
}


def test_create_achievement_missing_title(client):
    payload = {k: v for k, v in ACHIEVEMENT.items() if k != "title"}
    r = client.post("/api/achievements", json=payload)
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation error"
    assert len(body["errors"]) > 0
    assert body["errors"][0]["path"] == ["title"]
    assert body["errors"][0]["code"] == "missing"


def test_create_and_get_achievement(client):
    r = client.post("/api/achievements", json=ACHIEVEMENT)
    assert r.status_code == 201
    created = r.json()
    assert created["id"] == 4

    r = client.get("/api/achievements/4")
    assert r.status_code == 200
    assert r.json() == created


def test_unknown_icon_is_stored(client):
    r = client.post("/api/achievements", json={**ACHIEVEMENT, "icon": "rocket"})
    assert r.status_code == 201
    assert r.json()["icon"] == "rocket"


def test_get_achievement_not_found(client):
    r = client.get("/api/achievements/12")
    assert r.status_code == 404
    assert r.json() == {"message": "Achievement not found"}


def test_update_and_delete_achievement(client):
    r = client.put("/api/achievements/3", json=ACHIEVEMENT)
    assert r.status_code == 200
    assert r.json() == {"id": 3, **ACHIEVEMENT}

    assert client.delete("/api/achievements/3").status_code == 204
    ids = [a["id"] for a in client.get("/api/achievements").json()]
    assert ids == [1, 2]
