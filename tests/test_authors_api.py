"""Tests for the authors API endpoints."""

import uuid

from fastapi import status
from fastapi.testclient import TestClient

from books_api import models
from tests.factories import SeededLibrary


class TestAuthorsCrud:
    def test_create_author(self, client: TestClient) -> None:
        response = client.post("/api/authors", json={"name": "Martin Fowler", "bio": "Refactoring"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["name"] == "Martin Fowler"
        assert data["bio"] == "Refactoring"
        uuid.UUID(data["id"])

    def test_create_author_requires_name(self, client: TestClient) -> None:
        response = client.post("/api/authors", json={"name": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["field"] == "name"

    def test_list_authors_with_books(self, client: TestClient, library: SeededLibrary) -> None:
        response = client.get("/api/authors")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        # Newest first: Eric Evans was created after Robert C. Martin
        assert [author["name"] for author in data] == ["Eric Evans", "Robert C. Martin"]
        assert [book["title"] for book in data[0]["books"]] == ["Domain-Driven Design"]
        assert len(data[1]["books"]) == 3
        assert "author" not in data[0]["books"][0]

    def test_get_author(self, client: TestClient, library: SeededLibrary) -> None:
        author_id = str(library.author_a.id)

        response = client.get(f"/api/authors/{author_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == author_id
        assert data["bio"] == "Uncle Bob"
        assert [book["title"] for book in data["books"]] == [
            "Clean Code",
            "Clean Architecture",
            "Working Effectively with Legacy Code",
        ]

    def test_get_author_invalid_id(self, client: TestClient) -> None:
        response = client.get("/api/authors/not-a-uuid")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "INVALID_AUTHOR_ID"

    def test_get_author_not_found(self, client: TestClient) -> None:
        response = client.get(f"/api/authors/{uuid.uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == "AUTHOR_NOT_FOUND"

    def test_update_author(self, client: TestClient, author_b: models.Author) -> None:
        author_id = str(author_b.id)

        response = client.patch(f"/api/authors/{author_id}", json={"bio": "DDD"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["name"] == "Eric Evans"
        assert data["bio"] == "DDD"

    def test_update_author_no_fields(self, client: TestClient, author_b: models.Author) -> None:
        response = client.patch(f"/api/authors/{author_b.id}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "NO_FIELDS_TO_UPDATE"

    def test_delete_author_with_books(self, client: TestClient, library: SeededLibrary) -> None:
        response = client.delete(f"/api/authors/{library.author_b.id}")

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["code"] == "AUTHOR_HAS_BOOKS"

    def test_delete_author(self, client: TestClient, author_b: models.Author) -> None:
        author_id = str(author_b.id)

        response = client.delete(f"/api/authors/{author_id}")
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = client.delete(f"/api/authors/{author_id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
