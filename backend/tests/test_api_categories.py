"""Tests for categories API endpoints."""

import pytest
from prodcats.models.category import Category


@pytest.mark.unit
class TestCategoriesAPI:
    """Test categories API endpoints."""

    def test_get_categories(self, client, test_category):
        """Test getting list of categories."""
        response = client.get("/api/categories")

        assert response.status_code == 200
        data = response.json()
        assert data == [
            {
                "id": test_category.id,
                "name": "Electronics",
                "description": "Electronic devices and gadgets",
                "isActive": True,
            }
        ]

    def test_get_categories_excludes_inactive(
        self, client, test_category, inactive_category
    ):
        response = client.get("/api/categories")

        assert response.status_code == 200
        assert [cat["name"] for cat in response.json()] == ["Electronics"]

    def test_get_category(self, client, test_category):
        response = client.get(f"/api/categories/{test_category.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Electronics"

    def test_get_inactive_category(self, client, inactive_category):
        """Inactive categories can still be fetched so they can be re-activated."""
        response = client.get(f"/api/categories/{inactive_category.id}")

        assert response.status_code == 200
        assert response.json()["isActive"] is False

    def test_get_category_not_found(self, client):
        response = client.get("/api/categories/99999")

        assert response.status_code == 404
        assert response.json()["message"] == "Category with id 99999 not found."

    def test_create_category(self, client, db_session):
        """Test creating a new category."""
        category_data = {
            "name": "Science",
            "description": "Scientific books and kits",
        }

        response = client.post("/api/categories", json=category_data)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Science"
        assert data["description"] == "Scientific books and kits"
        assert data["isActive"] is True
        assert response.headers["location"] == f"/api/categories/{data['id']}"
        assert db_session.query(Category).count() == 1

    def test_create_category_strips_name(self, client):
        response = client.post("/api/categories", json={"name": "  Garden  "})

        assert response.status_code == 201
        assert response.json()["name"] == "Garden"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 256])
    def test_create_category_invalid_name(self, client, name):
        response = client.post("/api/categories", json={"name": name})

        assert response.status_code == 400
        assert "name" in response.json()["errors"]

    def test_create_category_ignores_is_active(self, client):
        response = client.post(
            "/api/categories", json={"name": "Books", "isActive": False}
        )

        assert response.status_code == 201
        assert response.json()["isActive"] is True

    def test_update_category(self, client, test_category):
        """Test updating a category."""
        update_data = {"name": "Updated Electronics"}

        response = client.put(f"/api/categories/{test_category.id}", json=update_data)

        assert response.status_code == 204
        data = client.get(f"/api/categories/{test_category.id}").json()
        assert data["name"] == "Updated Electronics"
        # Omitted fields are untouched
        assert data["description"] == "Electronic devices and gadgets"

    def test_deactivate_category(self, client, test_category):
        response = client.put(
            f"/api/categories/{test_category.id}", json={"isActive": False}
        )

        assert response.status_code == 204
        assert client.get("/api/categories").json() == []

        # Products can no longer be created under it
        response = client.post(
            "/api/products",
            json={"name": "Phone", "price": 100, "categoryId": test_category.id},
        )
        assert response.status_code == 400

    def test_reactivate_category(self, client, inactive_category):
        response = client.put(
            f"/api/categories/{inactive_category.id}", json={"isActive": True}
        )

        assert response.status_code == 204
        assert [cat["id"] for cat in client.get("/api/categories").json()] == [
            inactive_category.id
        ]

    def test_update_category_rejects_null_active_flag(self, client, test_category):
        response = client.put(
            f"/api/categories/{test_category.id}", json={"isActive": None}
        )

        assert response.status_code == 400
        assert response.json()["errors"]["isActive"] == ["isActive cannot be null"]

    def test_update_category_not_found(self, client):
        response = client.put("/api/categories/99999", json={"name": "Nope"})

        assert response.status_code == 404

    def test_categories_have_no_delete(self, client, test_category):
        response = client.delete(f"/api/categories/{test_category.id}")

        assert response.status_code == 405
        assert response.json() == {"message": "Method Not Allowed"}
