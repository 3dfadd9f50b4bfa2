"""Tests for categories API endpoints."""

import uuid

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.infrastructure.learning.repositories import CategoryRepository


class TestListCategories:
    """Test suite for GET /categories endpoint."""

    def test_list_categories_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_categories_sorted_by_name(
        self, client: TestClient, seeded_categories: list[models.Category]
    ) -> None:
        """Test that all seeded categories come back ordered by name."""
        response = client.get("/api/v1/categories")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 14
        assert data[0]["name"] == "Applied Mathematics"
        assert data[-1]["name"] == "Zoology"
        names = [category["name"] for category in data]
        assert names == sorted(names)
        assert {category["id"] for category in data} == {c.id for c in seeded_categories}


class TestGetCategory:
    """Test suite for GET /categories/:id and /categories/details endpoints."""

    def test_get_category_success(
        self, client: TestClient, test_category: models.Category
    ) -> None:
        response = client.get(f"/api/v1/categories/{test_category.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": "c1", "name": "Science"}

    def test_get_category_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Category with id 'missing' not found"}

    def test_get_category_blank_id(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/%20")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Category ID must not be null or empty"}

    def test_get_category_by_name(
        self, client: TestClient, test_category: models.Category
    ) -> None:
        response = client.get("/api/v1/categories/details", params={"name": "Science"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": test_category.id, "name": "Science"}

    def test_get_category_by_name_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/details", params={"name": "Art"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Category with name 'Art' not found"}

    def test_get_category_by_blank_name(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/details", params={"name": "  "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Name must not be null or empty"}

    def test_lookup_category_id(self, client: TestClient, test_category: models.Category) -> None:
        response = client.get("/api/v1/categories/lookup", params={"name": "Science"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": test_category.id}


class TestCreateCategory:
    """Test suite for POST /categories endpoint."""

    def test_create_category_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post("/api/v1/categories", json={"name": "Music"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Music"
        assert str(uuid.UUID(data["id"])) == data["id"]

        db_category = db_session.get(models.Category, data["id"])
        assert db_category is not None
        assert db_category.name == "Music"

    def test_create_category_duplicate_name(self, client: TestClient) -> None:
        """Test that a second category with the same name is rejected."""
        first = client.post("/api/v1/categories", json={"name": "Music"})
        second = client.post("/api/v1/categories", json={"name": "Music"})

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_409_CONFLICT
        assert second.json() == {"error": "Category with name 'Music' already exists"}
        assert len(client.get("/api/v1/categories").json()) == 1

    def test_create_category_name_race_hits_storage_constraint(
        self,
        client: TestClient,
        db_session: Session,
        test_category: models.Category,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that a duplicate slipping past the name check is rejected by the unique index."""
        # Another request inserted "Science" after this one checked the name
        monkeypatch.setattr(CategoryRepository, "exists_by_name", lambda self, name: False)

        response = client.post("/api/v1/categories", json={"name": "Science"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"error": "Request conflicts with existing data"}
        assert db_session.query(models.Category).count() == 1
        assert client.get("/api/v1/categories/c1").json() == {"id": "c1", "name": "Science"}

    def test_create_category_wrong_type_name(self, client: TestClient) -> None:
        response = client.post("/api/v1/categories", json={"name": 5})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"errors": ["Name is required."]}

    def test_create_category_blank_name(self, client: TestClient) -> None:
        response = client.post("/api/v1/categories", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"errors": ["Name is required."]}

    def test_create_category_missing_name(self, client: TestClient) -> None:
        response = client.post("/api/v1/categories", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"errors": ["Name is required."]}

    def test_create_category_without_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/categories")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Request body must not be null"}

    def test_create_category_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/categories",
            content=b'{"name": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Malformed JSON request body"}


class TestUpsertCategory:
    """Test suite for PUT /categories endpoint."""

    def test_upsert_creates_then_replaces(self, client: TestClient) -> None:
        """Test that the first PUT creates (201) and the next one replaces (200)."""
        body = {"id": "c9", "name": "Geology"}

        created = client.put("/api/v1/categories", json=body)
        assert created.status_code == status.HTTP_201_CREATED
        assert created.json() == body

        replaced = client.put("/api/v1/categories", json=body)
        assert replaced.status_code == status.HTTP_200_OK
        assert replaced.json() == body

        assert client.get("/api/v1/categories/c9").json() == body

    def test_upsert_renames_existing(
        self, client: TestClient, test_category: models.Category
    ) -> None:
        response = client.put("/api/v1/categories", json={"id": "c1", "name": "Natural Science"})

        assert response.status_code == status.HTTP_200_OK
        assert client.get("/api/v1/categories/c1").json()["name"] == "Natural Science"

    def test_upsert_name_taken_by_other_category(
        self, client: TestClient, test_category: models.Category
    ) -> None:
        response = client.put("/api/v1/categories", json={"id": "c2", "name": "Science"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"error": "Category with name 'Science' already exists"}
        assert client.get("/api/v1/categories/c2").status_code == status.HTTP_404_NOT_FOUND

    def test_upsert_reports_all_blank_fields(self, client: TestClient) -> None:
        response = client.put("/api/v1/categories", json={"id": "", "name": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"errors": ["ID is required.", "Name is required."]}


class TestDeleteCategory:
    """Test suite for DELETE /categories/:id endpoint."""

    def test_delete_category_success(
        self, client: TestClient, test_category: models.Category
    ) -> None:
        response = client.delete(f"/api/v1/categories/{test_category.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""
        assert client.get("/api/v1/categories/c1").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_category_twice(
        self, client: TestClient, test_category: models.Category
    ) -> None:
        first = client.delete("/api/v1/categories/c1")
        second = client.delete("/api/v1/categories/c1")

        assert first.status_code == status.HTTP_204_NO_CONTENT
        assert second.status_code == status.HTTP_404_NOT_FOUND
        assert second.json() == {"error": "Category with id 'c1' not found"}

    def test_delete_category_cascades(
        self,
        client: TestClient,
        db_session: Session,
        test_flashcard: models.Flashcard,
    ) -> None:
        """Test that deleting a category removes its study sessions and flashcards."""
        response = client.delete("/api/v1/categories/c1")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/api/v1/sessions/s1").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/v1/flashcards/f1").status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.StudySession).count() == 0
        assert db_session.query(models.Flashcard).count() == 0
