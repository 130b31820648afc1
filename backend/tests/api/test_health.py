"""Tests for health check endpoints."""


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self, client):
        """Health response should have correct structure."""
        data = client.get("/api/health").json()
        assert set(data.keys()) == {"status", "version"}

    def test_health_needs_no_token(self, client):
        response = client.get("/api/health", headers={"x-auth-token": "garbage"})
        assert response.status_code == 200
