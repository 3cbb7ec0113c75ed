"""
Tests for Authors API Endpoints

Tests for /api/authors/{author_id}/books.
"""

from fastapi import status

from app.models import Author


class TestListAuthorBooks:
    """Tests for GET /api/authors/{author_id}/books endpoint."""

    def test_list_author_books_success(self, client, catalog, authors):
        """Test listing the books of an author."""
        response = client.get(f"/api/authors/{authors['orwell'].id}/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert {item["Title"] for item in data} == {"1984", "Animal Farm"}
        assert all(item["Author"] == "George Orwell" for item in data)

    def test_list_author_books_count_matches_rows(self, client, catalog, authors):
        """The number of summaries equals the number of the author's books."""
        for author in authors.values():
            expected = [b for b in catalog.values() if b.author_id == author.id]

            response = client.get(f"/api/authors/{author.id}/books")

            assert response.status_code == status.HTTP_200_OK
            assert len(response.json()) == len(expected)

    def test_list_author_books_without_books(self, client, db_session):
        """An author with no books yields an empty list."""
        author = Author(name="Unpublished Writer")
        db_session.add(author)
        db_session.commit()

        response = client.get(f"/api/authors/{author.id}/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_author_books_unknown_author(self, client, catalog):
        """An unknown author is an empty list, not a 404."""
        response = client.get("/api/authors/99999/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_author_books_non_numeric_id(self, client):
        """A non-numeric author id doesn't match the route."""
        response = client.get("/api/authors/herbert/books")

        assert response.status_code == status.HTTP_404_NOT_FOUND
