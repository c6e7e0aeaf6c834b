"""Tests for GET /health and GET /robots.txt."""

from veritas.main import app


def test_health_with_model_service(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "modelService": "ready"}


def test_health_degraded_without_model_service(client):
    # Lifespan leaves the service unset when the Gemini client cannot be built.
    app.state.model_service = None

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "modelService": "unavailable"}


def test_robots_txt(client):
    response = client.get("/robots.txt")
    assert response.status_code == 200
    assert "User-agent: *" in response.text
    assert "Disallow: /" in response.text
