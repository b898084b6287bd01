"""Tests for /api/projects"""


def test_list_projects_seeded(client):
    r = client.get("/api/projects")
    assert r.status_code == 200
    body = r.json()
    assert [p["id"] for p in body] == [1, 2, 3]
    assert body[0]["title"] == "Personal Portfolio Website"


def test_create_then_get_project(client, project_payload):
    """POST returns 201 with a new id; GET by that id returns the same object."""
    r = client.post("/api/projects", json=project_payload)
    assert r.status_code == 201
    created = r.json()
    assert isinstance(created["id"], int) and created["id"] > 0
    assert created["title"] == "X"
    assert created["description"] == "Y"
    assert created["technologies"] == ["A", "B"]

    r = client.get(f"/api/projects/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_create_project_uses_camel_case(client):
    payload = {
        "title": "Site",
        "description": "d",
        "technologies": ["Go", "Go"],
        "imageUrl": "https://img.example.com/a.png",
        "projectUrl": "https://example.com",
        "githubUrl": "https://github.com/x/y",
    }
    r = client.post("/api/projects", json=payload)
    assert r.status_code == 201
    body = r.json()
    assert body["imageUrl"] == payload["imageUrl"]
    assert body["projectUrl"] == payload["projectUrl"]
    assert body["githubUrl"] == payload["githubUrl"]
    assert body["technologies"] == ["Go", "Go"]
    assert "image_url" not in body


def test_create_project_ignores_client_id(client, project_payload):
    r = client.post("/api/projects", json={**project_payload, "id": 1})
    assert r.status_code == 201
    assert r.json()["id"] == 4


def test_update_project(client, project_payload):
    r = client.put("/api/projects/2", json=project_payload)
    assert r.status_code == 200
    body = r.json()
    assert body["id"] == 2
    assert body["title"] == "X"
    # full replace: optional fields not sent are cleared
    assert body["githubUrl"] is None
    assert client.get("/api/projects/2").json() == body


def test_update_missing_project_returns_404(client, project_payload):
    r = client.put("/api/projects/999", json=project_payload)
    assert r.status_code == 404
    assert r.json() == {"message": "Project not found"}
    assert len(client.get("/api/projects").json()) == 3


def test_get_missing_project_returns_404(client):
    r = client.get("/api/projects/999")
    assert r.status_code == 404
    assert r.json() == {"message": "Project not found"}


def test_delete_project(client):
    r = client.delete("/api/projects/1")
    assert r.status_code == 204
    assert r.content == b""
    assert client.get("/api/projects/1").status_code == 404

    r = client.delete("/api/projects/1")
    assert r.status_code == 404
    assert r.json() == {"message": "Project not found"}


def test_ids_not_reused_after_delete(client, project_payload):
    first = client.post("/api/projects", json=project_payload).json()
    client.delete(f"/api/projects/{first['id']}")
    second = client.post("/api/projects", json=project_payload).json()
    assert second["id"] != first["id"]


def test_create_project_missing_technologies(client):
    r = client.post("/api/projects", json={"title": "X", "description": "Y"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Validation error"
    assert any(e["path"] == ["technologies"] for e in body["errors"])


def test_create_project_wrong_type(client):
    r = client.post("/api/projects", json={"title": "X", "description": "Y", "technologies": "A,B"})
    assert r.status_code == 400
    assert r.json()["message"] == "Validation error"
