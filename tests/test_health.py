"""Tests for health check and root endpoints."""


def test_health_check(client):
    """Test basic health check."""
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["products"] == 0


def test_root_endpoint(client):
    """Test root endpoint returns a welcome message."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "Welcome" in data["message"]
    assert data["products"] == "/api/products"
    assert "version" in data
    assert "docs" in data
