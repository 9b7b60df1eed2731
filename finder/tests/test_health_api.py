# coding: utf-8

from fastapi.testclient import TestClient


def test_get_health_local(client: TestClient, monkeypatch):
    """Test case for get_health

    Health check
    """
    monkeypatch.delenv("WEBSITE_INSTANCE_ID", raising=False)

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "environment": "Local Development"}


def test_get_health_on_app_service(client: TestClient, monkeypatch):
    monkeypatch.setenv("WEBSITE_INSTANCE_ID", "instance-1")

    response = client.get("/api/health")

    assert response.json() == {"status": "healthy", "environment": "Azure App Service"}


def test_unknown_route_uses_error_body(client: TestClient):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert "error" in response.json()
