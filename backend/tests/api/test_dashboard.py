"""Tests for the dashboard stats endpoint."""

from modules.wardrobe.models import NewItem


class TestDashboardStats:

    def test_new_user(self, client, auth_headers):
        response = client.get("/api/dashboard/stats", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "name": "Ada Lovelace",
            "totalItems": 0,
            "dirtyItems": 0,
            "isNewUser": True,
        }

    def test_counts(self, client, auth_headers, item_repository, user_repository):
        user_id = user_repository.get_by_email("ada@example.com").id
        for is_clean in (True, False):
            item_repository.create(NewItem(
                user_id=user_id,
                name="Sweater",
                image_url="https://img/sweater.png",
                category="Knitwear",
                is_clean=is_clean,
            ))

        data = client.get("/api/dashboard/stats", headers=auth_headers).json()

        assert data["totalItems"] == 2
        assert data["dirtyItems"] == 1
        assert data["isNewUser"] is False

    def test_deleted_user(self, client, make_token):
        """A valid token for an account that no longer exists."""
        response = client.get("/api/dashboard/stats", headers={"x-auth-token": make_token("gone")})
        assert response.status_code == 404

    def test_requires_token(self, client):
        assert client.get("/api/dashboard/stats").status_code == 401
