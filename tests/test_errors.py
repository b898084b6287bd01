"""Tests for the error responses and the app-level endpoints"""
import pytest
from fastapi.testclient import TestClient

from portfolio_api.app.main import create_app
from portfolio_api.app.services.collection_service import CollectionService


@pytest.mark.parametrize("path", ["/api/projects/abc", "/api/skills/1.5", "/api/achievements/12abc"])
def test_invalid_id_format_on_get(client, path):
    r = client.get(path)
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid ID format"}


@pytest.mark.parametrize("resource", ["projects", "educations", "skills", "experiences", "achievements"])
def test_invalid_id_format_on_delete(client, resource):
    r = client.delete(f"/api/{resource}/xyz")
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid ID format"}


def test_invalid_id_checked_before_body(client):
    r = client.put("/api/projects/abc", json={})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid ID format"}


def test_malformed_json_body(client):
    r = client.post(
        "/api/projects",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["message"] == "Validation error"


def test_unknown_route_uses_message_key(client):
    r = client.get("/api/unknown")
    assert r.status_code == 404
    assert "message" in r.json()


def test_internal_error_is_generic(settings, store, monkeypatch):
    async def boom(self):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(CollectionService, "list_items", boom)
    client = TestClient(create_app(settings=settings, store=store), raise_server_exceptions=False)
    r = client.get("/api/projects")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}
    assert "secret" not in r.text


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy"}


def test_portfolio_bundle(client):
    r = client.get("/api/portfolio")
    assert r.status_code == 200
    body = r.json()
    assert body["profile"]["name"] == "Jane Smith"
    assert len(body["projects"]) == 3
    assert len(body["educations"]) == 2
    assert len(body["skills"]) == 4
    assert len(body["experiences"]) == 2
    assert len(body["achievements"]) == 3
    assert body["contact"]["successMessage"].startswith("Thank you")
    assert "messages" not in body


def test_portfolio_bundle_empty(empty_client):
    body = empty_client.get("/api/portfolio").json()
    assert body["profile"] is None
    assert body["contact"] is None
    assert body["projects"] == []


def test_stores_are_isolated_per_app(settings):
    first = TestClient(create_app(settings=settings))
    second = TestClient(create_app(settings=settings))
    first.delete("/api/projects/1")
    assert second.get("/api/projects/1").status_code == 200
