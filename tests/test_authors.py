"""
Tests for Authors API Endpoints

Tests for /api/v1/authors endpoints.
"""

from datetime import date, timedelta
from decimal import Decimal

from fastapi import status

from tests.conftest import API


class TestCreateAuthor:
    """Tests for POST /api/v1/authors endpoint."""

    def test_create_author_success(self, client):
        """Test creating an author returns 201 and the stored record."""
        author_data = {"name": "Higuchi Ichiyo", "birthDate": "1872-05-02"}

        response = client.post(f"{API}/authors", json=author_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Higuchi Ichiyo"
        assert data["birthDate"] == "1872-05-02"
        assert isinstance(data["id"], int)

    def test_created_author_id_is_stable(self, client):
        """Test that the returned id reads back the same author."""
        created = client.post(
            f"{API}/authors", json={"name": "Mori Ogai", "birthDate": "1862-02-17"}
        ).json()

        response = client.get(f"{API}/authors/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    def test_create_author_born_today(self, client):
        """A birth date of today (in the reference timezone) is allowed."""
        from bookcatalog.services.validation import reference_today

        today = reference_today().isoformat()
        response = client.post(f"{API}/authors", json={"name": "Newborn", "birthDate": today})

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_author_duplicate(self, client, sample_author):
        """Test that the same name and birth date twice is a conflict."""
        author_data = {"name": "Natsume Soseki", "birthDate": "1867-02-09"}

        response = client.post(f"{API}/authors", json=author_data)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"status": 409, "error": "author already exists"}

    def test_create_author_blank_name(self, client):
        """Test that whitespace-only name is rejected."""
        response = client.post(f"{API}/authors", json={"name": "   ", "birthDate": "1990-01-01"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"status": 400, "error": "name must not be blank"}

    def test_create_author_future_birth_date(self, client):
        """Test that a birth date in the future is rejected."""
        future = (date.today() + timedelta(days=2)).isoformat()

        response = client.post(f"{API}/authors", json={"name": "Someone", "birthDate": future})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "future" in response.json()["error"]

    def test_create_author_invalid_date(self, client):
        """Test that an unparsable date is a 400 naming the field."""
        response = client.post(f"{API}/authors", json={"name": "Someone", "birthDate": "yesterday"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["status"] == 400
        assert "birthDate" in data["error"]

    def test_create_author_missing_field(self, client):
        """Test that name and birthDate are both required."""
        response = client.post(f"{API}/authors", json={"name": "Someone"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetAuthor:
    """Tests for GET /api/v1/authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_author):
        response = client.get(f"{API}/authors/{sample_author.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": sample_author.id,
            "name": "Natsume Soseki",
            "birthDate": "1867-02-09",
        }

    def test_get_author_not_found(self, client):
        response = client.get(f"{API}/authors/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"status": 404, "error": "author not found"}


class TestUpdateAuthor:
    """Tests for PUT /api/v1/authors/{author_id} endpoint."""

    def test_update_author_name(self, client, sample_author):
        """Test updating only the name keeps the birth date."""
        response = client.put(
            f"{API}/authors/{sample_author.id}",
            json={"newName": "Natsume Kinnosuke"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Natsume Kinnosuke"
        assert data["birthDate"] == "1867-02-09"

    def test_update_author_birth_date(self, client, sample_author):
        """Test updating only the birth date keeps the name."""
        response = client.put(
            f"{API}/authors/{sample_author.id}",
            json={"newBirthDate": "1867-02-10"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Natsume Soseki"
        assert data["birthDate"] == "1867-02-10"

    def test_update_author_nothing_to_update(self, client, sample_author):
        response = client.put(f"{API}/authors/{sample_author.id}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "nothing to update"

    def test_update_author_nothing_to_update_unknown_id(self, client):
        """An empty update is a bad request even for an unknown id."""
        response = client.put(f"{API}/authors/99999", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_null_fields_count_as_absent(self, client, sample_author):
        response = client.put(
            f"{API}/authors/{sample_author.id}",
            json={"newName": None, "newBirthDate": None},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_not_found(self, client):
        response = client.put(f"{API}/authors/99999", json={"newName": "x"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_author_blank_name(self, client, sample_author):
        response = client.put(f"{API}/authors/{sample_author.id}", json={"newName": " "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "newName must not be blank"

    def test_update_author_future_birth_date(self, client, sample_author):
        future = (date.today() + timedelta(days=2)).isoformat()

        response = client.put(f"{API}/authors/{sample_author.id}", json={"newBirthDate": future})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_author_conflict(self, client, sample_author, second_author):
        """Test that renaming onto another author's identity is a conflict."""
        response = client.put(
            f"{API}/authors/{second_author.id}",
            json={"newName": "Natsume Soseki", "newBirthDate": "1867-02-09"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT


class TestGetAuthorBooks:
    """Tests for GET /api/v1/authors/{author_id}/books endpoint."""

    def test_author_books_not_found(self, client):
        response = client.get(f"{API}/authors/99999/books")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_author_books_empty(self, client, third_author):
        response = client.get(f"{API}/authors/{third_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_author_books_lists_all_authors(self, client, sample_book, sample_author, second_author):
        """Each book lists every author, not only the one queried."""
        response = client.get(f"{API}/authors/{second_author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == sample_book.id
        assert data[0]["title"] == "Kokoro"
        assert data[0]["authorIds"] == [sample_author.id, second_author.id]
        assert Decimal(data[0]["price"]) == Decimal("1200.00")
        assert data[0]["status"] == "UNPUBLISHED"

    def test_author_books_ordered_by_book_id(self, client, sample_author, second_author, third_author):
        first = client.post(
            f"{API}/books",
            json={"title": "First", "authorIds": [third_author.id, sample_author.id]},
        ).json()
        second = client.post(
            f"{API}/books",
            json={"title": "Second", "authorIds": [sample_author.id]},
        ).json()
        client.post(f"{API}/books", json={"title": "Other", "authorIds": [second_author.id]})

        response = client.get(f"{API}/authors/{sample_author.id}/books")

        data = response.json()
        assert [book["id"] for book in data] == [first["id"], second["id"]]
        assert data[0]["authorIds"] == [third_author.id, sample_author.id]
        assert data[1]["authorIds"] == [sample_author.id]
